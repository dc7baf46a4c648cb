"""Persisted-state codec (load with per-field recovery, serialize)."""

from .codec import LoadResult, load_state, serialize_state

__all__ = [
    "LoadResult",
    "load_state",
    "serialize_state",
]
