"""
History Ledger: append-only settlement log, newest entry first

Contract: ledger_state.json#/properties/history

Entries are immutable once recorded. The only removal is pop_latest()
(index 0), used by undo.
"""

from typing import Iterable, Optional

from score_ledger.core.domain import HistoryEntry
from score_ledger.core.errors import EmptyHistoryError


class HistoryLedger:
    """Newest-first sequence of HistoryEntry."""

    def __init__(self, entries: Optional[Iterable[HistoryEntry]] = None):
        self._entries: list[HistoryEntry] = list(entries or ())

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        """All entries, newest first."""
        return tuple(self._entries)

    def prepend(self, entry: HistoryEntry) -> None:
        self._entries.insert(0, entry)

    def latest(self) -> HistoryEntry:
        if not self._entries:
            raise EmptyHistoryError("History is empty")
        return self._entries[0]

    def pop_latest(self) -> HistoryEntry:
        """Remove and return the newest entry."""
        if not self._entries:
            raise EmptyHistoryError("History is empty")
        return self._entries.pop(0)

    def has_entry_for_round(self, round_number: int) -> bool:
        """True if any settlement was recorded during round_number."""
        return any(entry.round == round_number for entry in self._entries)
