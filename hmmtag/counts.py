"""Occurrence count tables built during training."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping


@dataclass
class CountRow:
    """Counts for one source tag, with the row total kept alongside."""

    counts: Dict[str, int] = field(default_factory=dict)
    total: int = 0

    def add(self, key: str) -> None:
        self.counts[key] = self.counts.get(key, 0) + 1
        self.total += 1

    def __getitem__(self, key: str) -> int:
        return self.counts[key]

    def __contains__(self, key: object) -> bool:
        return key in self.counts

    def __iter__(self) -> Iterator[str]:
        return iter(self.counts)

    def __len__(self) -> int:
        return len(self.counts)


class CountTable:
    """
    Mapping from a source key to a :class:`CountRow`.

    Used for both transition counts (previous tag -> tag) and emission counts
    (tag -> word). Rows are created on first increment, so no row ever has a
    zero total. Row and key order follow first insertion.
    """

    def __init__(self) -> None:
        self._rows: Dict[str, CountRow] = {}

    def increment(self, row: str, key: str) -> None:
        entry = self._rows.get(row)
        if entry is None:
            entry = self._rows[row] = CountRow()
        entry.add(key)

    def count(self, row: str, key: str) -> int:
        entry = self._rows.get(row)
        if entry is None:
            return 0
        return entry.counts.get(key, 0)

    def total(self, row: str) -> int:
        entry = self._rows.get(row)
        return entry.total if entry is not None else 0

    def rows(self) -> Mapping[str, CountRow]:
        return self._rows

    def __getitem__(self, row: str) -> CountRow:
        return self._rows[row]

    def __contains__(self, row: object) -> bool:
        return row in self._rows

    def __iter__(self) -> Iterator[str]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        """Plain nested dict copy of the counts (totals excluded)."""
        return {row: dict(entry.counts) for row, entry in self._rows.items()}

    def __repr__(self) -> str:
        return f"CountTable({self.to_dict()!r})"
