"""
Score ledger for a 4-seat table game.

Tracks players, seats, zero-sum point settlements, single-step undo,
dealer rotation and the per-round balance timeline used for reporting.
"""

from score_ledger.config import LedgerConfig
from score_ledger.core.errors import (
    DuplicateNameError,
    EmptyHistoryError,
    InvalidAmountError,
    LedgerError,
    MalformedStateError,
    MissingParticipantError,
    NotFoundError,
)
from score_ledger.session import ScoreLedger
from score_ledger.state import LedgerState

__all__ = [
    "ScoreLedger",
    "LedgerState",
    "LedgerConfig",
    # Errors
    "LedgerError",
    "DuplicateNameError",
    "NotFoundError",
    "InvalidAmountError",
    "EmptyHistoryError",
    "MalformedStateError",
    "MissingParticipantError",
]
