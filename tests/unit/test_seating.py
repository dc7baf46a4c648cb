"""Unit tests for seating assignment."""

import pytest

from score_ledger.registry import PlayerRegistry
from score_ledger.seating import SeatAssignment, Seating


@pytest.fixture
def registry():
    reg = PlayerRegistry()
    for name in ["Alice", "Bob", "Carl", "Dora", "Eve"]:
        reg.add_player(name)
    return reg


def test_new_seating_is_empty():
    seating = Seating()
    assert seating.seats() == [None, None, None, None]
    assert seating.active_occupants() == ()
    assert seating.has_empty_seat()
    assert not seating.is_full()


def test_seat_and_occupant():
    seating = Seating()
    seating.seat(2, "Alice")
    assert seating.occupant(2) == "Alice"
    assert seating.occupant(0) is None


def test_active_occupants_in_seat_order():
    seating = Seating()
    seating.seat(3, "Dora")
    seating.seat(1, "Bob")
    assert seating.active_occupants() == (
        SeatAssignment(1, "Bob"),
        SeatAssignment(3, "Dora"),
    )


def test_reseating_replaces_occupant():
    seating = Seating()
    seating.seat(0, "Alice")
    seating.seat(0, "Bob")
    assert seating.occupant(0) == "Bob"


def test_same_name_in_two_seats_is_tolerated():
    seating = Seating()
    seating.seat(0, "Alice")
    seating.seat(1, "Alice")
    assert seating.seats() == ["Alice", "Alice", None, None]
    assert seating.seat_of("Alice") == 0


def test_full_table():
    seating = Seating(["Alice", "Bob", "Carl", "Dora"])
    assert seating.is_full()
    assert not seating.has_empty_seat()


def test_unassigned_players(registry):
    seating = Seating()
    seating.seat(0, "Bob")
    seating.seat(2, "Dora")
    assert seating.unassigned_players(registry) == ["Alice", "Carl", "Eve"]


def test_seat_of_missing_name():
    assert Seating().seat_of("Alice") is None


@pytest.mark.parametrize("index", [-1, 4, 10])
def test_seat_index_out_of_range(index):
    with pytest.raises(ValueError):
        Seating().seat(index, "Alice")


def test_seat_index_must_be_int():
    with pytest.raises(ValueError):
        Seating().seat("1", "Alice")


def test_wrong_seat_count_rejected():
    with pytest.raises(ValueError):
        Seating(["Alice", None])


def test_seats_returns_copy():
    seating = Seating()
    seats = seating.seats()
    seats[0] = "Mallory"
    assert seating.occupant(0) is None
