"""CSV output of a ResultTable: ``date,name,availability`` per line, no header."""
from __future__ import annotations

import csv
import sys
from typing import TextIO

from wildtrails.aggregate import ResultTable


def write_csv(table: ResultTable, stream: TextIO | None = None) -> int:
    """Write every row of the table ordered by date then name. Returns the row count."""
    if stream is None:
        stream = sys.stdout
    writer = csv.writer(stream, lineterminator="\n")
    count = 0
    for day, name, availability in table.rows():
        writer.writerow([day.isoformat(), name, availability])
        count += 1
    return count
