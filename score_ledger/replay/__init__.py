"""Read-only replay of the ledger into per-round snapshots."""

from .timeline import RoundSnapshot, Timeline, reconstruct_timeline

__all__ = [
    "RoundSnapshot",
    "Timeline",
    "reconstruct_timeline",
]
