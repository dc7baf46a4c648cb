"""
ScoreLedger: public surface of the ledger

Owns one LedgerState and routes every operation to the component that
implements it: PlayerRegistry, Seating, SettlementEngine, undo_last,
DealerRotationStateMachine, reconstruct_timeline and the state codec.
No other code mutates scores, origins, seats or history.
"""

import logging
from typing import Any, Optional

from score_ledger.config import LedgerConfig
from score_ledger.core.contracts import LedgerStateValidator
from score_ledger.core.domain import HistoryEntry, Player, RotationState
from score_ledger.history import UndoResult, undo_last
from score_ledger.persistence import LoadResult, load_state, serialize_state
from score_ledger.replay import Timeline, reconstruct_timeline
from score_ledger.rotation import DealerRotationStateMachine, RotationTransitionResult
from score_ledger.seating import SeatAssignment, check_seat_index
from score_ledger.settlement import SettlementEngine, SettlementResult
from score_ledger.state import LedgerState


logger = logging.getLogger(__name__)


class ScoreLedger:
    """Single-actor ledger session over a LedgerState."""

    def __init__(
        self,
        state: Optional[LedgerState] = None,
        config: Optional[LedgerConfig] = None,
        rotation_machine: Optional[DealerRotationStateMachine] = None,
    ):
        self.state = state or LedgerState()
        self.config = config or LedgerConfig()
        self.rotation_machine = rotation_machine or DealerRotationStateMachine()

    # -------------------------------------------------------------------------
    # Players
    # -------------------------------------------------------------------------

    def add_player(self, name: str) -> Player:
        return self.state.registry.add_player(name)

    def players(self) -> list[Player]:
        return self.state.registry.players()

    def display_score(self, name: str, missing_ok: bool = False) -> int:
        return self.state.registry.display_score(name, missing_ok=missing_ok)

    def raw_score(self, name: str, missing_ok: bool = False) -> int:
        return self.state.registry.raw_score(name, missing_ok=missing_ok)

    def set_origin(self, name: str, value: Any) -> Player:
        return self.state.registry.set_origin(name, value)

    def reset_origin(self, name: str) -> Player:
        return self.state.registry.reset_origin(name)

    # -------------------------------------------------------------------------
    # Seats
    # -------------------------------------------------------------------------

    def seat(self, index: int, name: str) -> None:
        """
        Seat a registered player.

        Raises:
            ValueError: index outside 0..3
            NotFoundError: name not registered
        """
        check_seat_index(index)
        self.state.registry.get(name)
        self.state.seating.seat(index, name)
        logger.info("Seat %d: %s", index, name)

    def seats(self) -> list[Optional[str]]:
        return self.state.seating.seats()

    def active_occupants(self) -> tuple[SeatAssignment, ...]:
        return self.state.seating.active_occupants()

    def unassigned_players(self) -> list[str]:
        return self.state.seating.unassigned_players(self.state.registry)

    def can_settle(self) -> bool:
        """True once enough players are seated for the host to offer a settlement."""
        return len(self.active_occupants()) >= self.config.min_players_to_settle

    # -------------------------------------------------------------------------
    # Settlements & undo
    # -------------------------------------------------------------------------

    def propose_settlement(
        self, from_name: Optional[str], to_name: Optional[str], amount: Any
    ) -> SettlementResult:
        engine = SettlementEngine(self.state.registry, self.state.history, self.config)
        return engine.propose_settlement(from_name, to_name, amount, self.state.rotation)

    def settle_between_seats(self, from_seat: int, to_seat: int, amount: Any) -> SettlementResult:
        """
        Settlement between the occupants of two seats.

        Raises:
            ValueError: invalid or identical seat indices
            MissingParticipantError: either seat is empty
        """
        check_seat_index(from_seat)
        check_seat_index(to_seat)
        if from_seat == to_seat:
            raise ValueError(f"Settlement needs two distinct seats, got {from_seat} twice")
        seating = self.state.seating
        return self.propose_settlement(
            seating.occupant(from_seat), seating.occupant(to_seat), amount
        )

    def undo_last(self) -> UndoResult:
        return undo_last(self.state.registry, self.state.history)

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """Ledger entries, newest first."""
        return self.state.history.entries

    # -------------------------------------------------------------------------
    # Dealer rotation
    # -------------------------------------------------------------------------

    @property
    def rotation(self) -> RotationState:
        return self.state.rotation

    def designate_dealer(self, seat: int) -> RotationTransitionResult:
        result = self.rotation_machine.designate_dealer(
            self.state.rotation, seat, table_full=self.state.seating.is_full()
        )
        return self._apply_rotation(result)

    def confirm_dealer(self) -> RotationTransitionResult:
        result = self.rotation_machine.confirm_dealer(
            self.state.rotation, table_full=self.state.seating.is_full()
        )
        return self._apply_rotation(result)

    def advance_dealer(self) -> RotationTransitionResult:
        """
        Simple advance to the next seat.

        Not blocked when the current round has no settlement; callers check
        has_settlement_for_round() first if they want to warn.
        """
        return self._apply_rotation(self.rotation_machine.advance(self.state.rotation))

    def has_settlement_for_round(self, round_number: Optional[int] = None) -> bool:
        """True if a settlement was recorded in round_number (default: current round)."""
        if round_number is None:
            round_number = self.state.rotation.round
        return self.state.history.has_entry_for_round(round_number)

    def dealer_name(self) -> Optional[str]:
        """Occupant of the dealer seat, None if that seat is empty."""
        return self.state.seating.occupant(self.state.rotation.dealer_seat)

    def _apply_rotation(self, result: RotationTransitionResult) -> RotationTransitionResult:
        self.state.rotation = result.new_state
        logger.info("Rotation %s: %s", result.trigger.value, result.details)
        return result

    # -------------------------------------------------------------------------
    # Reporting & persistence
    # -------------------------------------------------------------------------

    def reconstruct_timeline(self) -> Timeline:
        return reconstruct_timeline(self.state.registry.players(), self.state.history.entries)

    def load_state(self, blob: Any, strict: bool = False) -> LoadResult:
        """Replace the session state with a persisted snapshot."""
        result = load_state(
            blob, strict=strict, validator=LedgerStateValidator(self.config.schema_name)
        )
        self.state = result.state
        return result

    def serialize_state(self) -> dict[str, Any]:
        return serialize_state(self.state)

    def reset(self) -> None:
        """Clear all players, seats, history and rotation state."""
        self.state = LedgerState()
        logger.info("Ledger reset")
