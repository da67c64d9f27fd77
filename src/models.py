"""
Canonical records shared by ingestion, aggregation and export.

Entries are frozen once built. The session keeps them in a RecordSet, which
only grows by append and shrinks by clear() / drop_last().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Entry:
    supplier: str
    quoted_value: float
    final_value: float
    account_category: str = ""
    business_area: str = ""
    period_label: str = ""
    period_type: str = ""

    @property
    def savings(self) -> float:
        return self.quoted_value - self.final_value

    @property
    def savings_percent(self) -> float:
        if self.quoted_value > 0:
            return self.savings / self.quoted_value * 100
        return 0.0


@dataclass(frozen=True)
class AggregateResult:
    total_quoted: float
    total_final: float
    absolute_savings: float
    savings_percent: float
    per_category_final_sum: dict = field(default_factory=dict)
    top_category: str = ""
    top_category_value: float = 0.0


class RecordSet:
    """Append-only, ordered collection of entries for one session."""

    def __init__(self, entries=None):
        self._entries: list[Entry] = list(entries or [])

    def append(self, entry: Entry) -> None:
        self._entries.append(entry)

    def extend(self, entries) -> None:
        for e in entries:
            self.append(e)

    def clear(self) -> None:
        self._entries = []

    def drop_last(self) -> None:
        if self._entries:
            self._entries = self._entries[:-1]

    def snapshot(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RecordSet({len(self)} entries)"
