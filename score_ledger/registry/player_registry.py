"""
Player Registry: player identities, raw scores and display origins

Names are unique and immutable. Players are never removed; balances change
only through settlements and undo (apply_delta), origins only through
set_origin/reset_origin.
"""

import logging
import re
from typing import Any, Iterable, Optional

from score_ledger.core.domain import Player
from score_ledger.core.errors import DuplicateNameError, NotFoundError


logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_int(value: Any) -> int:
    """
    Lenient integer coercion for user-entered values.

    Leading integer of a string ("12abc" -> 12), truncation of floats,
    0 for anything non-numeric.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        return int(value)
    if isinstance(value, (str, bytes)):
        text = value.decode("utf-8", "ignore") if isinstance(value, bytes) else value
        match = _LEADING_INT.match(text)
        return int(match.group(1)) if match else 0
    return 0


class PlayerRegistry:
    """Ordered registry of players (registration order is preserved)."""

    def __init__(self, players: Optional[Iterable[Player]] = None):
        self._players: dict[str, Player] = {}
        for player in players or ():
            if player.name in self._players:
                raise DuplicateNameError(f"Player already exists: {player.name!r}")
            self._players[player.name] = player

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, name: object) -> bool:
        return name in self._players

    def add_player(self, name: str) -> Player:
        """
        Register a new player with score 0 and origin 0.

        Args:
            name: Player name (surrounding whitespace is trimmed)

        Returns:
            The created Player

        Raises:
            DuplicateNameError: name already registered or empty after trimming
        """
        trimmed = (name or "").strip()
        if not trimmed:
            raise DuplicateNameError("Player name is empty")
        if trimmed in self._players:
            raise DuplicateNameError(f"Player already exists: {trimmed!r}")

        player = Player(name=trimmed, score=0, origin=0)
        self._players[trimmed] = player
        logger.info("Player added: %s", trimmed)
        return player

    def get(self, name: str) -> Player:
        try:
            return self._players[name]
        except KeyError:
            raise NotFoundError(f"Unknown player: {name!r}") from None

    def players(self) -> list[Player]:
        return list(self._players.values())

    def names(self) -> list[str]:
        return list(self._players)

    def raw_score(self, name: str, missing_ok: bool = False) -> int:
        """
        Raw score (net of settlements, origin excluded).

        With missing_ok=True an unknown name reads as 0 (reporting context).
        """
        if missing_ok and name not in self._players:
            return 0
        return self.get(name).score

    def display_score(self, name: str, missing_ok: bool = False) -> int:
        """Displayed score = score + origin; unknown names read as 0 with missing_ok."""
        if missing_ok and name not in self._players:
            return 0
        return self.get(name).display_score()

    def set_origin(self, name: str, value: Any) -> Player:
        """
        Overwrite a player's display origin.

        The value is coerced to int (non-numeric input becomes 0). Scores and
        the zero-sum invariant are unaffected.
        """
        player = self.get(name)
        updated = player.model_copy(update={"origin": coerce_int(value)})
        self._players[name] = updated
        logger.info("Origin set: %s origin=%d", name, updated.origin)
        return updated

    def reset_origin(self, name: str) -> Player:
        """Set a player's origin back to 0."""
        return self.set_origin(name, 0)

    def apply_delta(self, name: str, delta: int) -> Player:
        """
        Change a player's raw score by delta.

        Reserved for the settlement engine and undo, which apply deltas in
        zero-sum pairs.
        """
        player = self.get(name)
        updated = player.model_copy(update={"score": player.score + delta})
        self._players[name] = updated
        return updated

    def total_score(self) -> int:
        """Sum of raw scores (0 while the ledger is consistent)."""
        return sum(p.score for p in self._players.values())
