"""
LedgerState: the complete mutable state of one ledger session

Registry, seating, history and rotation state, passed by reference to the
components that operate on them.
"""

from dataclasses import dataclass, field

from score_ledger.core.domain import RotationState
from score_ledger.history import HistoryLedger
from score_ledger.registry import PlayerRegistry
from score_ledger.seating import Seating


@dataclass
class LedgerState:
    registry: PlayerRegistry = field(default_factory=PlayerRegistry)
    seating: Seating = field(default_factory=Seating)
    history: HistoryLedger = field(default_factory=HistoryLedger)
    rotation: RotationState = field(default_factory=RotationState.initial)
