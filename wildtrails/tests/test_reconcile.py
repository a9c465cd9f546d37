"""
Tests for availability reconciliation: walk-up window, overbooking clamp,
drop rule and directory filtering.
"""

from __future__ import annotations

import unittest
from datetime import date, datetime, timedelta, timezone

from wildtrails.models import ReconciledEntry
from wildtrails.reconcile import pacific_today, reconcile, reconcile_reports, select_bound

from .test_common import TODAY, make_directory, make_report_date, make_trailhead


class TestSelectBound(unittest.TestCase):

    def setUp(self):
        self.trailhead = make_trailhead(quota=18, capacity=30)

    def test_within_window_uses_capacity(self):
        for offset in (-3, 0, 1, 14, 15):
            with self.subTest(offset=offset):
                day = TODAY + timedelta(days=offset)
                self.assertEqual(select_bound(self.trailhead, day, TODAY), 30)

    def test_beyond_window_uses_quota(self):
        for offset in (16, 25, 365):
            with self.subTest(offset=offset):
                day = TODAY + timedelta(days=offset)
                self.assertEqual(select_bound(self.trailhead, day, TODAY), 18)

    def test_custom_window(self):
        day = TODAY + timedelta(days=5)
        self.assertEqual(select_bound(self.trailhead, day, TODAY, window_days=4), 18)
        self.assertEqual(select_bound(self.trailhead, day, TODAY, window_days=5), 30)


class TestReconcile(unittest.TestCase):

    def setUp(self):
        self.directory = make_directory(make_trailhead("w35", name="Alder Creek", quota=18, capacity=30))

    def test_inside_window_uses_capacity(self):
        entry = reconcile(date(2020, 9, 10), "w35", 5, self.directory, TODAY)
        self.assertEqual(entry, ReconciledEntry(date(2020, 9, 10), "Alder Creek", 25))

    def test_outside_window_overbooked_is_dropped(self):
        self.assertIsNone(reconcile(date(2020, 10, 1), "w35", 20, self.directory, TODAY))

    def test_outside_window_uses_quota(self):
        entry = reconcile(date(2020, 10, 1), "w35", 5, self.directory, TODAY)
        self.assertEqual(entry.availability, 13)

    def test_unknown_trailhead_is_dropped(self):
        for occupancy in (0, 3, 100):
            with self.subTest(occupancy=occupancy):
                self.assertIsNone(reconcile(date(2020, 9, 10), "zz9", occupancy, self.directory, TODAY))

    def test_zero_occupancy_gives_full_bound(self):
        self.assertEqual(reconcile(date(2020, 9, 10), "w35", 0, self.directory, TODAY).availability, 30)
        self.assertEqual(reconcile(date(2020, 10, 1), "w35", 0, self.directory, TODAY).availability, 18)

    def test_full_or_overbooked_is_dropped(self):
        for occupancy in (30, 31, 255):
            with self.subTest(occupancy=occupancy):
                self.assertIsNone(reconcile(date(2020, 9, 10), "w35", occupancy, self.directory, TODAY))

    def test_zero_capacity_trailhead_is_dropped(self):
        directory = make_directory(make_trailhead("c0", quota=0, capacity=0))
        self.assertIsNone(reconcile(date(2020, 9, 10), "c0", 0, directory, TODAY))

    def test_availability_always_positive(self):
        for occupancy in range(0, 40):
            for offset in (0, 15, 16, 30):
                entry = reconcile(TODAY + timedelta(days=offset), "w35", occupancy, self.directory, TODAY)
                if entry is not None:
                    self.assertGreater(entry.availability, 0)


class TestReconcileReports(unittest.TestCase):

    def test_reconciles_every_report_date(self):
        directory = make_directory(
            make_trailhead("w35", name="Alder Creek", quota=18, capacity=30),
            make_trailhead("w37", name="Chilnualna Falls", quota=15, capacity=25),
        )
        report = [
            make_report_date(date(2020, 9, 10), w35=5, w37=25, zz9=3),
            make_report_date(date(2020, 10, 1), w35=20, w37=1),
        ]
        entries = list(reconcile_reports(report, directory, TODAY))
        self.assertEqual(entries, [
            ReconciledEntry(date(2020, 9, 10), "Alder Creek", 25),
            ReconciledEntry(date(2020, 10, 1), "Chilnualna Falls", 14),
        ])
        self.assertFalse(any(e.trailhead_name == "zz9" for e in entries))


class TestPacificToday(unittest.TestCase):

    def test_converts_from_utc(self):
        # 03:00 UTC on the 7th is still the evening of the 6th in California
        now = datetime(2020, 9, 7, 3, 0, tzinfo=timezone.utc)
        self.assertEqual(pacific_today(now=now), date(2020, 9, 6))

    def test_other_time_zone(self):
        now = datetime(2020, 9, 7, 3, 0, tzinfo=timezone.utc)
        self.assertEqual(pacific_today("Europe/Berlin", now=now), date(2020, 9, 7))

    def test_defaults_to_current_date(self):
        self.assertIsInstance(pacific_today(), date)
