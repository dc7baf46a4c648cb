"""
Score Reconstruction: per-round balance snapshots replayed from the ledger

Algorithm:
1. Snapshot 0 = each player's origin
2. Entries sorted by time ascending
3. Running balances updated per transaction; the snapshot of the entry's
   round is overwritten with the balances after the entry
4. Rounds 0..max_round, rounds without entries carry the previous snapshot

Pure: reads players and history, never mutates them.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, NamedTuple

from score_ledger.core.domain import HistoryEntry, Player


logger = logging.getLogger(__name__)

START_LABEL = "Start"


class RoundSnapshot(NamedTuple):
    """Displayed balances (origin included) at the end of a round."""

    round: int
    balances: dict[str, int]


@dataclass(frozen=True)
class Timeline:
    """Snapshots for rounds 0..max_round, in round order."""

    snapshots: tuple[RoundSnapshot, ...]

    def __len__(self) -> int:
        return len(self.snapshots)

    def __getitem__(self, round_number: int) -> RoundSnapshot:
        return self.snapshots[round_number]

    @property
    def max_round(self) -> int:
        return self.snapshots[-1].round

    def labels(self) -> list[str]:
        """Axis labels: "Start", "R1", "R2", ..."""
        return [START_LABEL if s.round == 0 else f"R{s.round}" for s in self.snapshots]

    def series(self, name: str) -> list[int]:
        """Balance of one player per round (0 where the player is absent)."""
        return [s.balances.get(name, 0) for s in self.snapshots]


def reconstruct_timeline(
    players: Iterable[Player], history: Iterable[HistoryEntry]
) -> Timeline:
    """
    Replay history into per-round balance snapshots.

    Args:
        players: registered players (their origins seed snapshot 0)
        history: ledger entries in any order

    Returns:
        Timeline indexed 0..max_round

    Transactions naming players that are not registered are ignored.
    """
    initial = {p.name: p.origin for p in players}
    by_round: dict[int, dict[str, int]] = {0: dict(initial)}
    running = dict(initial)

    # Stable sort: entries are newest-first, reversing restores recording order
    ordered = sorted(reversed(list(history)), key=lambda entry: entry.time)
    for entry in ordered:
        for tx in entry.transactions:
            if tx.from_player in running:
                running[tx.from_player] -= tx.amount
            if tx.to_player in running:
                running[tx.to_player] += tx.amount
        by_round[entry.round] = dict(running)

    max_round = max(by_round)
    snapshots = []
    last = by_round[0]
    for round_number in range(max_round + 1):
        last = by_round.get(round_number, last)
        snapshots.append(RoundSnapshot(round_number, dict(last)))

    logger.debug("Timeline rebuilt: %d entries, max_round=%d", len(ordered), max_round)
    return Timeline(snapshots=tuple(snapshots))
