"""Settlement engine: validated zero-sum transfers."""

from .engine import SettlementEngine, SettlementResult, parse_amount

__all__ = [
    "SettlementEngine",
    "SettlementResult",
    "parse_amount",
]
