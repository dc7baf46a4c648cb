"""
Seating Assignment: 4 fixed seat slots bound to player names

A seat holds a player name (a reference into the registry) or None.
Uniqueness of a name across seats is not enforced: the host keeps a name in
at most one seat, and transient states with duplicates are tolerated.
"""

from typing import NamedTuple, Optional, Sequence

from score_ledger.core.domain import SEAT_COUNT
from score_ledger.registry import PlayerRegistry


class SeatAssignment(NamedTuple):
    """Occupied seat: seat index and player name."""

    index: int
    name: str


def check_seat_index(index: int) -> int:
    """Validate a seat index (0..SEAT_COUNT-1)."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"Seat index must be an int, got {index!r}")
    if not 0 <= index < SEAT_COUNT:
        raise ValueError(f"Seat index must be in [0, {SEAT_COUNT - 1}], got {index}")
    return index


class Seating:
    """Seat slots 0..3; independent of registry order."""

    def __init__(self, seats: Optional[Sequence[Optional[str]]] = None):
        if seats is None:
            self._seats: list[Optional[str]] = [None] * SEAT_COUNT
        else:
            if len(seats) != SEAT_COUNT:
                raise ValueError(f"Expected {SEAT_COUNT} seats, got {len(seats)}")
            self._seats = list(seats)

    def seat(self, index: int, name: str) -> None:
        """Bind name to seat index, replacing any previous occupant."""
        self._seats[check_seat_index(index)] = name

    def occupant(self, index: int) -> Optional[str]:
        return self._seats[check_seat_index(index)]

    def seats(self) -> list[Optional[str]]:
        """Copy of the 4 slots in seat order."""
        return list(self._seats)

    def active_occupants(self) -> tuple[SeatAssignment, ...]:
        """Non-empty seats in seat order."""
        return tuple(
            SeatAssignment(index, name) for index, name in enumerate(self._seats) if name
        )

    def unassigned_players(self, registry: PlayerRegistry) -> list[str]:
        """Registry players (in registry order) not present in any seat."""
        seated = set(name for name in self._seats if name)
        return [name for name in registry.names() if name not in seated]

    def seat_of(self, name: str) -> Optional[int]:
        """First seat holding name, or None."""
        for index, occupant in enumerate(self._seats):
            if occupant == name:
                return index
        return None

    def has_empty_seat(self) -> bool:
        return any(not name for name in self._seats)

    def is_full(self) -> bool:
        return not self.has_empty_seat()
