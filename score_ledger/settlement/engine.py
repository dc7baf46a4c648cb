"""
Settlement Engine: validated point transfers between players

Check order (all before any mutation):
1. Payer and payee present (both reported together)
2. Amount is a positive integer (int, integral float or digit string)
3. Both names registered

On success exactly one balance pair changes and one HistoryEntry is
prepended to the ledger, tagged with the current round and dealer seat.
Payer == payee is not rejected here; the host never offers that choice.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from score_ledger.config import LedgerConfig
from score_ledger.core.domain import HistoryEntry, RotationState, Transaction
from score_ledger.core.errors import InvalidAmountError, MissingParticipantError
from score_ledger.history import HistoryLedger
from score_ledger.registry import PlayerRegistry


logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"^\d+$")


@dataclass(frozen=True)
class SettlementResult:
    """Result of an applied settlement."""

    entry: HistoryEntry
    # Per-player balance change ({payer: -amount, payee: +amount})
    deltas: dict[str, int]


def parse_amount(amount: Any, max_digits: Optional[int] = None) -> int:
    """
    Parse a settlement amount.

    Args:
        amount: int, integral float, or digit string (keypad input)
        max_digits: longest accepted amount, None for unlimited

    Returns:
        The amount as a strictly positive int

    Raises:
        InvalidAmountError: non-numeric, non-integral, non-positive or too long
    """
    if isinstance(amount, bool) or amount is None:
        raise InvalidAmountError(f"Amount must be a positive integer, got {amount!r}")

    if isinstance(amount, int):
        value = amount
    elif isinstance(amount, float):
        if not amount.is_integer():
            raise InvalidAmountError(f"Amount must be a whole number, got {amount!r}")
        value = int(amount)
    elif isinstance(amount, str):
        text = amount.strip()
        if not _DIGITS.match(text):
            raise InvalidAmountError(f"Amount must be a positive integer, got {amount!r}")
        value = int(text)
    else:
        raise InvalidAmountError(f"Amount must be a positive integer, got {amount!r}")

    if value <= 0:
        raise InvalidAmountError(f"Amount must be > 0, got {value}")
    if max_digits is not None and len(str(value)) > max_digits:
        raise InvalidAmountError(f"Amount {value} exceeds {max_digits} digits")
    return value


def _is_missing(name: Optional[str]) -> bool:
    return name is None or not str(name).strip()


class SettlementEngine:
    """Applies settlements to the registry and records them in the ledger."""

    def __init__(
        self,
        registry: PlayerRegistry,
        history: HistoryLedger,
        config: Optional[LedgerConfig] = None,
    ):
        self.registry = registry
        self.history = history
        self.config = config or LedgerConfig()

    def propose_settlement(
        self,
        from_name: Optional[str],
        to_name: Optional[str],
        amount: Any,
        rotation: RotationState,
    ) -> SettlementResult:
        """
        Validate and apply a transfer of amount points from from_name to to_name.

        Args:
            from_name: payer
            to_name: payee
            amount: points to transfer
            rotation: current rotation state (round and dealer seat are recorded)

        Returns:
            SettlementResult with the recorded entry and balance deltas

        Raises:
            MissingParticipantError: payer and/or payee not set
            InvalidAmountError: amount not a positive integer
            NotFoundError: payer or payee not registered
        """
        from_missing = _is_missing(from_name)
        to_missing = _is_missing(to_name)
        if from_missing or to_missing:
            raise MissingParticipantError(from_missing=from_missing, to_missing=to_missing)

        value = parse_amount(amount, self.config.max_amount_digits)

        # NotFoundError before any balance is touched
        self.registry.get(from_name)
        self.registry.get(to_name)

        tx = Transaction(from_player=from_name, to_player=to_name, amount=value)
        entry = HistoryEntry(
            time=self.config.clock(),
            round=rotation.round,
            dealer_index=rotation.dealer_seat,
            transactions=(tx,),
        )

        self.registry.apply_delta(from_name, -value)
        self.registry.apply_delta(to_name, value)
        self.history.prepend(entry)

        logger.info(
            "Settlement: %s -> %s amount=%d round=%d dealer_seat=%d",
            from_name, to_name, value, rotation.round, rotation.dealer_seat,
        )
        return SettlementResult(entry=entry, deltas=tx.deltas())
