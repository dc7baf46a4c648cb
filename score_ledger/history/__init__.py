"""History ledger and single-step undo."""

from .ledger import HistoryLedger
from .undo import UndoResult, undo_last

__all__ = [
    "HistoryLedger",
    "UndoResult",
    "undo_last",
]
