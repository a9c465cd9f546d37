"""
Result aggregation: merges reconciled entries from every region into one
table keyed by date, then trailhead name.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date

from wildtrails.models import ReconciledEntry


class ResultTable:
    """
    Availability by date and trailhead name.

    Dates iterate chronologically and names lexically, regardless of
    insertion order. Writing an existing (date, name) key replaces its value.
    """

    def __init__(self) -> None:
        self._by_date: dict[date, dict[str, int]] = {}

    def insert(self, day: date, trailhead_name: str, availability: int) -> None:
        if availability <= 0:
            raise ValueError(
                f"Availability must be positive, got {availability} for {trailhead_name} on {day}"
            )
        self._by_date.setdefault(day, {})[trailhead_name] = availability

    def get(self, day: date, trailhead_name: str) -> int | None:
        return self._by_date.get(day, {}).get(trailhead_name)

    def dates(self) -> list[date]:
        return sorted(self._by_date)

    def items(self) -> Iterator[tuple[date, dict[str, int]]]:
        """(date, {name: availability}) pairs, both levels sorted."""
        for day in self.dates():
            names = self._by_date[day]
            yield day, {name: names[name] for name in sorted(names)}

    def rows(self) -> Iterator[tuple[date, str, int]]:
        for day, names in self.items():
            for name, availability in names.items():
                yield day, name, availability

    def to_dict(self) -> dict[date, dict[str, int]]:
        return dict(self.items())

    def __len__(self) -> int:
        return sum(len(names) for names in self._by_date.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultTable):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"ResultTable(dates={len(self._by_date)}, rows={len(self)})"


def aggregate(entries: Iterable[ReconciledEntry]) -> ResultTable:
    """Materialize entries into a ResultTable; later entries win on key collisions."""
    table = ResultTable()
    for entry in entries:
        table.insert(entry.date, entry.trailhead_name, entry.availability)
    return table
