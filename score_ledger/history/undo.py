"""
Undo: reversal of the most recent settlement

Only balances are restored. Origins, the round counter and the dealer
fields are left as they are.
"""

import logging
from dataclasses import dataclass

from score_ledger.core.domain import HistoryEntry
from score_ledger.registry import PlayerRegistry

from .ledger import HistoryLedger


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UndoResult:
    """Result of an undo."""

    entry: HistoryEntry
    # Per-player balance change applied by the undo
    deltas: dict[str, int]


def undo_last(registry: PlayerRegistry, history: HistoryLedger) -> UndoResult:
    """
    Remove the newest history entry and reverse its transactions.

    Transactions are reversed in stored order: score[from] += amount,
    score[to] -= amount. A side naming a player missing from the registry
    (possible only with loaded state) is skipped.

    Raises:
        EmptyHistoryError: history is empty (nothing is changed)
    """
    entry = history.pop_latest()
    deltas: dict[str, int] = {}

    for tx in entry.transactions:
        for name, delta in ((tx.from_player, tx.amount), (tx.to_player, -tx.amount)):
            if name not in registry:
                logger.warning("Undo skipped unknown player %r (round %d)", name, entry.round)
                continue
            registry.apply_delta(name, delta)
            deltas[name] = deltas.get(name, 0) + delta

    logger.info("Undo: round=%d transactions=%d", entry.round, len(entry.transactions))
    return UndoResult(entry=entry, deltas=deltas)
