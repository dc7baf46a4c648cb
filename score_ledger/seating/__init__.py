"""Seat slots and their player bindings."""

from .seating import SeatAssignment, Seating, check_seat_index

__all__ = [
    "Seating",
    "SeatAssignment",
    "check_seat_index",
]
