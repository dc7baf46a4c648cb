"""
Player: registered participant with a zero-sum score and a display origin

Contract: ledger_state.json#/$defs/player

Immutable Pydantic model. The registry replaces the instance on every
balance or origin change.
"""

from pydantic import BaseModel, Field


class Player(BaseModel):
    """
    Registered player.

    - score: net of all settlements (sum over all players is always 0)
    - origin: manually set baseline, only added for display
    """

    name: str = Field(..., min_length=1, description="Unique, immutable player name")
    score: int = Field(default=0, description="Net of all settlements")
    origin: int = Field(default=0, description="Display-only baseline")

    model_config = {"frozen": True}

    def display_score(self) -> int:
        """Displayed balance: score + origin."""
        return self.score + self.origin
