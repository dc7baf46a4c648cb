"""Dealer Rotation State Machine: dealer seat, streak and round counter.

State: RotationState (ledger_state.json#/properties/currentRound, dealerIndex,
dealerStreak)

Transitions:
- designate_dealer on a full table, same seat → streak + 1, round + 1
- designate_dealer on a full table, other seat → dealer = seat, streak = 0, round + 1
- designate_dealer with any empty seat → dealer = seat, streak = 0 (setup, round unchanged)
- advance → dealer = (dealer + 1) mod 4, streak = 0, round + 1

There is no terminal state. Whether the current round has a recorded
settlement is a soft check left to the caller (HistoryLedger.has_entry_for_round).
"""

from dataclasses import dataclass
from enum import Enum

from score_ledger.core.domain import SEAT_COUNT, RotationState
from score_ledger.seating import check_seat_index


class RotationTrigger(str, Enum):
    """Transition kind recorded in the result."""

    DEALER_RETAINED = "dealer_retained"
    DEALER_CHANGED = "dealer_changed"
    DEALER_SETUP = "dealer_setup"
    SIMPLE_ADVANCE = "simple_advance"


@dataclass(frozen=True)
class RotationTransitionResult:
    """Result of a rotation transition."""

    new_state: RotationState
    previous_state: RotationState
    trigger: RotationTrigger

    # Diagnostics
    transition_occurred: bool
    round_advanced: bool
    details: str


class DealerRotationStateMachine:
    """Pure transitions over RotationState; holds no state of its own."""

    def designate_dealer(
        self,
        current_state: RotationState,
        seat: int,
        table_full: bool,
    ) -> RotationTransitionResult:
        """Designate seat as dealer for the next hand.

        Args:
            current_state: current rotation state
            seat: seat to hold the deal (0..3)
            table_full: True when all 4 seats are occupied

        Returns:
            RotationTransitionResult with the new state

        Raises:
            ValueError: seat outside 0..3
        """
        check_seat_index(seat)

        # 1. Setup: the table is not full, no hand is counted
        if not table_full:
            new_state = current_state.model_copy(
                update={"dealer_seat": seat, "dealer_streak": 0}
            )
            return self._create_result(
                new_state=new_state,
                previous_state=current_state,
                trigger=RotationTrigger.DEALER_SETUP,
                details=f"Dealer set to seat {seat} before the table is full",
            )

        # 2. Same seat keeps the deal
        if seat == current_state.dealer_seat:
            new_state = current_state.model_copy(
                update={
                    "dealer_streak": current_state.dealer_streak + 1,
                    "round": current_state.round + 1,
                }
            )
            return self._create_result(
                new_state=new_state,
                previous_state=current_state,
                trigger=RotationTrigger.DEALER_RETAINED,
                details=f"Seat {seat} retains the deal, streak={new_state.dealer_streak}",
            )

        # 3. Deal passes to another seat
        new_state = current_state.model_copy(
            update={
                "dealer_seat": seat,
                "dealer_streak": 0,
                "round": current_state.round + 1,
            }
        )
        return self._create_result(
            new_state=new_state,
            previous_state=current_state,
            trigger=RotationTrigger.DEALER_CHANGED,
            details=f"Deal passes seat {current_state.dealer_seat} → {seat}",
        )

    def confirm_dealer(
        self, current_state: RotationState, table_full: bool
    ) -> RotationTransitionResult:
        """Reconfirm the current dealer seat (designate_dealer on the same seat)."""
        return self.designate_dealer(current_state, current_state.dealer_seat, table_full)

    def advance(self, current_state: RotationState) -> RotationTransitionResult:
        """Simple advance: the deal moves to the next seat, wrapping 3 → 0."""
        next_seat = (current_state.dealer_seat + 1) % SEAT_COUNT
        new_state = current_state.model_copy(
            update={
                "dealer_seat": next_seat,
                "dealer_streak": 0,
                "round": current_state.round + 1,
            }
        )
        return self._create_result(
            new_state=new_state,
            previous_state=current_state,
            trigger=RotationTrigger.SIMPLE_ADVANCE,
            details=f"Deal advances seat {current_state.dealer_seat} → {next_seat}",
        )

    def _create_result(
        self,
        new_state: RotationState,
        previous_state: RotationState,
        trigger: RotationTrigger,
        details: str,
    ) -> RotationTransitionResult:
        """Build the transition result."""
        return RotationTransitionResult(
            new_state=new_state,
            previous_state=previous_state,
            trigger=trigger,
            transition_occurred=new_state != previous_state,
            round_advanced=new_state.round > previous_state.round,
            details=details,
        )
