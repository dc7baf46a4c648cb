"""
Ledger configuration

Frozen dataclasses with defaults, passed to the components that need them.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional


def wall_clock_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class LedgerConfig:
    """
    Configuration of a ledger session.

    - min_players_to_settle: seated players needed before the host offers
      a settlement (advisory, see ScoreLedger.can_settle)
    - max_amount_digits: longest amount accepted, None for no cap (hosts
      with a fixed-width keypad set their own)
    - schema_name: persisted-state JSON Schema
    - clock: epoch-ms time source for history entries
    """

    min_players_to_settle: int = 2
    max_amount_digits: Optional[int] = None
    schema_name: str = "ledger_state"
    clock: Callable[[], int] = field(default=wall_clock_ms, compare=False)
