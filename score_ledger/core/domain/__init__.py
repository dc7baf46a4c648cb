"""
Domain models and value objects.

Contains Player, Transaction, HistoryEntry and RotationState.
"""

from score_ledger.core.domain.player import Player
from score_ledger.core.domain.rotation_state import (
    INITIAL_ROUND,
    SEAT_COUNT,
    RotationState,
)
from score_ledger.core.domain.transaction import HistoryEntry, Transaction

__all__ = [
    # Table constants
    "SEAT_COUNT",
    "INITIAL_ROUND",
    # Models
    "Player",
    "Transaction",
    "HistoryEntry",
    "RotationState",
]
