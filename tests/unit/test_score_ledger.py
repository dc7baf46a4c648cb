"""Scenario tests for the ScoreLedger facade.

Coverage:
- Table setup (players, seats, can_settle)
- Settlement, seat-to-seat settlement, undo
- Dealer rotation driven by seat occupancy
- has_settlement_for_round soft check
- Timeline over a played session
- Save / load / reset
"""

import itertools

import pytest

from score_ledger import (
    DuplicateNameError,
    EmptyHistoryError,
    InvalidAmountError,
    LedgerConfig,
    MissingParticipantError,
    NotFoundError,
    ScoreLedger,
)
from score_ledger.core.domain import RotationState
from score_ledger.rotation import RotationTrigger


NAMES = ["Alice", "Bob", "Carl", "Dora"]


@pytest.fixture
def config():
    ticks = itertools.count(1_700_000_000_000, 1000)
    return LedgerConfig(clock=lambda: next(ticks))


@pytest.fixture
def ledger(config):
    return ScoreLedger(config=config)


@pytest.fixture
def full_table(ledger):
    for index, name in enumerate(NAMES):
        ledger.add_player(name)
        ledger.seat(index, name)
    return ledger


def _raw_scores(ledger):
    return {p.name: p.score for p in ledger.players()}


# =============================================================================
# SETUP
# =============================================================================


class TestTableSetup:
    def test_duplicate_name_rejected(self, ledger):
        ledger.add_player("Alice")
        with pytest.raises(DuplicateNameError):
            ledger.add_player("Alice")
        assert len(ledger.players()) == 1

    def test_seat_unknown_player(self, ledger):
        with pytest.raises(NotFoundError):
            ledger.seat(0, "Ghost")
        assert ledger.seats() == [None, None, None, None]

    def test_unassigned_players(self, ledger):
        for name in NAMES + ["Eve"]:
            ledger.add_player(name)
        ledger.seat(1, "Bob")
        ledger.seat(3, "Eve")
        assert ledger.unassigned_players() == ["Alice", "Carl", "Dora"]
        assert [a.name for a in ledger.active_occupants()] == ["Bob", "Eve"]

    def test_can_settle_needs_two_seated_players(self, ledger):
        ledger.add_player("Alice")
        ledger.add_player("Bob")
        assert not ledger.can_settle()
        ledger.seat(0, "Alice")
        assert not ledger.can_settle()
        ledger.seat(2, "Bob")
        assert ledger.can_settle()

    def test_dealer_name(self, full_table):
        assert full_table.dealer_name() == "Alice"
        full_table.designate_dealer(2)
        assert full_table.dealer_name() == "Carl"


# =============================================================================
# SETTLEMENTS
# =============================================================================


class TestSettlements:
    def test_settlement_and_undo_round_trip(self, full_table):
        full_table.set_origin("Alice", 500)
        full_table.designate_dealer(1)
        rotation_before = full_table.rotation
        scores_before = _raw_scores(full_table)
        size_before = len(full_table.history)

        full_table.propose_settlement("Alice", "Bob", 40)
        full_table.undo_last()

        assert _raw_scores(full_table) == scores_before
        assert len(full_table.history) == size_before
        assert full_table.rotation == rotation_before
        assert full_table.players()[0].origin == 500

    def test_undo_after_round_advance_keeps_rotation(self, full_table):
        full_table.propose_settlement("Alice", "Bob", 40)
        full_table.advance_dealer()

        full_table.undo_last()

        assert full_table.rotation == RotationState(round=2, dealer_seat=1, dealer_streak=0)
        assert _raw_scores(full_table) == {name: 0 for name in NAMES}

    def test_undo_with_empty_history(self, full_table):
        with pytest.raises(EmptyHistoryError):
            full_table.undo_last()

    def test_entry_tagged_with_round_and_dealer(self, full_table):
        full_table.designate_dealer(2)
        full_table.propose_settlement("Dora", "Carl", 8)
        entry = full_table.history[0]
        assert entry.round == 2
        assert entry.dealer_index == 2

    def test_settle_between_seats(self, full_table):
        result = full_table.settle_between_seats(3, 0, "25")
        assert result.deltas == {"Dora": -25, "Alice": 25}
        assert full_table.raw_score("Alice") == 25

    def test_settle_between_same_seat(self, full_table):
        with pytest.raises(ValueError):
            full_table.settle_between_seats(1, 1, 10)
        assert len(full_table.history) == 0

    def test_settle_with_empty_seat(self, ledger):
        ledger.add_player("Alice")
        ledger.seat(0, "Alice")
        with pytest.raises(MissingParticipantError) as exc_info:
            ledger.settle_between_seats(0, 1, 10)
        assert exc_info.value.to_missing

    def test_invalid_amount_leaves_state(self, full_table):
        for amount in (0, -5):
            with pytest.raises(InvalidAmountError):
                full_table.propose_settlement("Alice", "Bob", amount)
        assert len(full_table.history) == 0
        assert _raw_scores(full_table) == {name: 0 for name in NAMES}

    def test_seven_digit_settlement(self, full_table):
        full_table.propose_settlement("Alice", "Bob", 1234567)
        assert full_table.raw_score("Alice") == -1234567
        assert full_table.raw_score("Bob") == 1234567

    def test_display_score_fallback(self, full_table):
        assert full_table.display_score("Ghost", missing_ok=True) == 0
        with pytest.raises(NotFoundError):
            full_table.display_score("Ghost")


# =============================================================================
# DEALER ROTATION
# =============================================================================


class TestDealerRotation:
    def test_designation_before_full_table_is_setup(self, ledger):
        ledger.add_player("Alice")
        ledger.seat(0, "Alice")

        result = ledger.designate_dealer(2)

        assert result.trigger == RotationTrigger.DEALER_SETUP
        assert ledger.rotation == RotationState(round=1, dealer_seat=2, dealer_streak=0)

    def test_dealer_change_on_full_table(self, full_table):
        full_table.confirm_dealer()
        full_table.confirm_dealer()
        assert full_table.rotation == RotationState(round=3, dealer_seat=0, dealer_streak=2)

        full_table.designate_dealer(2)

        assert full_table.rotation == RotationState(round=4, dealer_seat=2, dealer_streak=0)

    def test_simple_advance_wraps(self, full_table):
        full_table.designate_dealer(3)
        round_before = full_table.rotation.round

        full_table.advance_dealer()

        assert full_table.rotation.dealer_seat == 0
        assert full_table.rotation.round == round_before + 1
        assert full_table.rotation.dealer_streak == 0

    def test_has_settlement_for_round(self, full_table):
        assert not full_table.has_settlement_for_round()
        full_table.propose_settlement("Alice", "Bob", 10)
        assert full_table.has_settlement_for_round()
        full_table.advance_dealer()
        assert not full_table.has_settlement_for_round()
        assert full_table.has_settlement_for_round(1)

    def test_advance_not_blocked_without_settlement(self, full_table):
        full_table.advance_dealer()
        assert full_table.rotation.round == 2


# =============================================================================
# TIMELINE
# =============================================================================


class TestTimeline:
    def test_session_timeline(self, full_table):
        full_table.set_origin("Alice", 100)
        full_table.propose_settlement("Alice", "Bob", 50)
        full_table.advance_dealer()
        full_table.advance_dealer()
        full_table.propose_settlement("Carl", "Alice", 20)

        timeline = full_table.reconstruct_timeline()

        assert timeline.labels() == ["Start", "R1", "R2", "R3"]
        assert timeline.series("Alice") == [100, 50, 50, 70]
        assert timeline.series("Bob") == [0, 50, 50, 50]
        assert timeline.series("Carl") == [0, 0, 0, -20]
        assert full_table.reconstruct_timeline() == timeline

    def test_timeline_final_snapshot_matches_display_scores(self, full_table):
        full_table.set_origin("Dora", -40)
        full_table.propose_settlement("Dora", "Bob", 15)
        full_table.confirm_dealer()
        full_table.propose_settlement("Bob", "Carl", 5)

        last = full_table.reconstruct_timeline().snapshots[-1]

        assert last.balances == {name: full_table.display_score(name) for name in NAMES}


# =============================================================================
# PERSISTENCE
# =============================================================================


class TestPersistence:
    def test_save_and_load(self, full_table, config):
        full_table.set_origin("Bob", 30)
        full_table.propose_settlement("Alice", "Bob", 50)
        full_table.designate_dealer(1)
        snapshot = full_table.serialize_state()

        restored = ScoreLedger(config=config)
        result = restored.load_state(snapshot)

        assert result.clean
        assert restored.serialize_state() == snapshot
        assert restored.display_score("Bob") == 80
        restored.undo_last()
        assert restored.raw_score("Alice") == 0

    def test_load_malformed_recovers(self, ledger):
        result = ledger.load_state({"currentRound": "three", "players": [{"name": "A", "score": 0}]})
        assert result.malformed_fields == ("currentRound",)
        assert ledger.rotation.round == 1
        assert [p.name for p in ledger.players()] == ["A"]

    def test_load_keeps_seated_players_with_bad_fields(self, ledger):
        result = ledger.load_state(
            {
                "players": [{"name": "A", "origin": 5}, {"name": "B", "score": 0, "origin": "x"}],
                "seats": ["A", "B", None, None],
            }
        )

        assert result.malformed_fields == ("players[0].score", "players[1].origin")
        assert [p.name for p in ledger.players()] == ["A", "B"]
        assert ledger.display_score("A") == 5
        ledger.propose_settlement(ledger.seats()[0], ledger.seats()[1], 10)
        assert ledger.raw_score("B") == 10

    def test_reset(self, full_table):
        full_table.propose_settlement("Alice", "Bob", 50)
        full_table.advance_dealer()

        full_table.reset()

        assert full_table.players() == []
        assert full_table.seats() == [None, None, None, None]
        assert full_table.history == ()
        assert full_table.rotation == RotationState.initial()
