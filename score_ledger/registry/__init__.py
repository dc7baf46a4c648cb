"""Player registry: identities, balances and display origins."""

from .player_registry import PlayerRegistry, coerce_int

__all__ = [
    "PlayerRegistry",
    "coerce_int",
]
