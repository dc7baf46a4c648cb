"""
RotationState: dealer seat, dealer streak and round counter

Contract: ledger_state.json#/properties/currentRound, dealerIndex, dealerStreak
"""

from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# TABLE CONSTANTS
# =============================================================================

# Fixed number of seats at the table
SEAT_COUNT: Final[int] = 4

# Round counter of a fresh session
INITIAL_ROUND: Final[int] = 1


class RotationState(BaseModel):
    """
    Dealer rotation state.

    Immutable (frozen=True): transitions return a new instance.
    Aliases match the persisted state keys.
    """

    round: int = Field(default=INITIAL_ROUND, alias="currentRound", ge=1)
    dealer_seat: int = Field(default=0, alias="dealerIndex", ge=0, lt=SEAT_COUNT)
    dealer_streak: int = Field(default=0, alias="dealerStreak", ge=0)

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def initial(cls) -> "RotationState":
        """round=1, dealer_seat=0, dealer_streak=0."""
        return cls(round=INITIAL_ROUND, dealer_seat=0, dealer_streak=0)
