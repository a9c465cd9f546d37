"""
Real API integration tests.
Requires the COOKIE environment variable (or a .env file) to run.
Skip with:  pytest -k "not Integration"
"""

from __future__ import annotations

import os
import unittest

from dotenv import load_dotenv

from wildtrails.client import WildTrailsClient
from wildtrails.coordinator import AvailabilityCoordinator


class TestWildTrailsIntegration(unittest.IsolatedAsyncioTestCase):
    """
    Integration tests that hit the real wildtrails API.
    Skipped automatically when COOKIE is not set.
    """

    def setUp(self):
        load_dotenv()
        self.cookie = os.getenv("COOKIE")
        if not self.cookie:
            self.skipTest("COOKIE not set, skipping integration tests")

    async def test_fetch_directory(self):
        async with WildTrailsClient(self.cookie) as client:
            directory = await client.fetch_directory()
        self.assertGreater(len(directory), 0)
        self.assertGreater(len(directory.regions()), 0)

    async def test_full_run(self):
        async with WildTrailsClient(self.cookie) as client:
            result = await AvailabilityCoordinator(client).async_run()
        for _, _, availability in result.table.rows():
            self.assertGreater(availability, 0)
