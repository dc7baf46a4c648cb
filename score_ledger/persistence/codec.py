"""
State codec: persisted ledger state to and from LedgerState

Persisted shape (contract: core/contracts/schema/ledger_state.json):

    {
      "players": [{"name", "score", "origin"}, ...],
      "seats": [str | null] * 4,
      "currentRound": int, "dealerIndex": int, "dealerStreak": int,
      "history": [{"time", "round", "dealerIndex", "transactions": [...]}, ...]
    }

Loading fails closed per field: a missing field takes its default, a
malformed field is replaced by its default and reported. A player keeps
its name with a malformed score/origin set to 0; only nameless or
duplicate players and malformed history entries are dropped. Falsy
currentRound/dealerIndex/dealerStreak/origin values read as their defaults.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from score_ledger.core.contracts import LedgerStateValidator
from score_ledger.core.domain import (
    INITIAL_ROUND,
    HistoryEntry,
    Player,
    RotationState,
)
from score_ledger.core.errors import MalformedStateError
from score_ledger.history import HistoryLedger
from score_ledger.registry import PlayerRegistry
from score_ledger.seating import Seating
from score_ledger.state import LedgerState


logger = logging.getLogger(__name__)

DOCUMENT_FIELD = "<document>"


@dataclass(frozen=True)
class LoadResult:
    """Loaded state plus the fields that had to be recovered."""

    state: LedgerState
    malformed_fields: tuple[str, ...]

    @property
    def clean(self) -> bool:
        return not self.malformed_fields


class _Recovery:
    """Collects malformed fields; raises instead when loading strictly."""

    def __init__(self, strict: bool):
        self.strict = strict
        self.fields: list[str] = []

    def report(self, field: str, message: str, action: str = "replaced by default") -> None:
        if self.strict:
            raise MalformedStateError(field, message)
        logger.warning("Malformed state field %s %s: %s", field, action, message)
        self.fields.append(field)


def _decode_document(blob: Any, recovery: _Recovery) -> Mapping[str, Any]:
    if blob is None:
        return {}
    if isinstance(blob, (str, bytes, bytearray)):
        try:
            blob = json.loads(blob)
        except ValueError as e:
            recovery.report(DOCUMENT_FIELD, f"invalid JSON: {e}")
            return {}
    if not isinstance(blob, Mapping):
        recovery.report(DOCUMENT_FIELD, f"expected an object, got {type(blob).__name__}")
        return {}
    return blob


def _load_player_int(
    item: Mapping[str, Any],
    index: int,
    prop: str,
    validator: LedgerStateValidator,
    recovery: _Recovery,
) -> int:
    raw = item.get(prop)
    if prop == "origin" and not raw:
        return 0
    if raw is None:
        recovery.report(f"players[{index}].{prop}", "missing", action="set to 0")
        return 0
    errors = validator.item_field_errors("player", prop, raw)
    if errors:
        recovery.report(f"players[{index}].{prop}", "; ".join(errors), action="set to 0")
        return 0
    return int(raw)


def _load_players(
    data: Mapping[str, Any], validator: LedgerStateValidator, recovery: _Recovery
) -> PlayerRegistry:
    raw = data.get("players")
    if raw is None:
        return PlayerRegistry()
    if not isinstance(raw, list):
        recovery.report("players", f"expected an array, got {type(raw).__name__}")
        return PlayerRegistry()

    players: list[Player] = []
    seen: set[str] = set()
    for index, item in enumerate(raw):
        field = f"players[{index}]"
        if not isinstance(item, Mapping):
            recovery.report(
                field, f"expected an object, got {type(item).__name__}", action="dropped"
            )
            continue
        name = item.get("name")
        errors = validator.item_field_errors("player", "name", name)
        if name is None or errors:
            recovery.report(field, "; ".join(errors) or "name missing", action="dropped")
            continue
        if name in seen:
            recovery.report(field, f"duplicate player name {name!r}", action="dropped")
            continue
        seen.add(name)
        players.append(
            Player(
                name=name,
                score=_load_player_int(item, index, "score", validator, recovery),
                origin=_load_player_int(item, index, "origin", validator, recovery),
            )
        )

    registry = PlayerRegistry(players)
    if registry.total_score() != 0:
        logger.warning("Loaded scores sum to %d, expected 0", registry.total_score())
    return registry


def _load_seats(
    data: Mapping[str, Any], validator: LedgerStateValidator, recovery: _Recovery
) -> Seating:
    raw = data.get("seats")
    if raw is None:
        return Seating()
    errors = validator.field_errors("seats", raw)
    if errors:
        recovery.report("seats", "; ".join(errors))
        return Seating()
    return Seating([name or None for name in raw])


def _load_counter(
    data: Mapping[str, Any],
    field: str,
    default: int,
    validator: LedgerStateValidator,
    recovery: _Recovery,
) -> int:
    raw = data.get(field)
    if not raw:
        return default
    errors = validator.field_errors(field, raw)
    if errors:
        recovery.report(field, "; ".join(errors))
        return default
    return int(raw)


def _load_history(
    data: Mapping[str, Any], validator: LedgerStateValidator, recovery: _Recovery
) -> HistoryLedger:
    raw = data.get("history")
    if raw is None:
        return HistoryLedger()
    if not isinstance(raw, list):
        recovery.report("history", f"expected an array, got {type(raw).__name__}")
        return HistoryLedger()

    entries: list[HistoryEntry] = []
    for index, item in enumerate(raw):
        errors = validator.item_errors("historyEntry", item)
        if errors:
            recovery.report(f"history[{index}]", "; ".join(errors), action="dropped")
            continue
        entries.append(HistoryEntry.model_validate(item))
    return HistoryLedger(entries)


def load_state(
    blob: Any,
    strict: bool = False,
    validator: Optional[LedgerStateValidator] = None,
) -> LoadResult:
    """
    Restore a LedgerState from a persisted snapshot.

    Args:
        blob: mapping, JSON text, or None (nothing saved yet)
        strict: raise on the first malformed field instead of recovering
        validator: contract validator (defaults to ledger_state)

    Returns:
        LoadResult with the restored state and the recovered field names

    Raises:
        MalformedStateError: only with strict=True
    """
    validator = validator or LedgerStateValidator()
    recovery = _Recovery(strict)
    data = _decode_document(blob, recovery)

    registry = _load_players(data, validator, recovery)
    seating = _load_seats(data, validator, recovery)

    rotation = RotationState(
        round=_load_counter(data, "currentRound", INITIAL_ROUND, validator, recovery),
        dealer_seat=_load_counter(data, "dealerIndex", 0, validator, recovery),
        dealer_streak=_load_counter(data, "dealerStreak", 0, validator, recovery),
    )
    history = _load_history(data, validator, recovery)

    state = LedgerState(
        registry=registry,
        seating=seating,
        history=history,
        rotation=rotation,
    )
    logger.info(
        "State loaded: players=%d history=%d round=%d malformed=%d",
        len(state.registry), len(state.history), rotation.round, len(recovery.fields),
    )
    return LoadResult(state=state, malformed_fields=tuple(recovery.fields))


def serialize_state(state: LedgerState) -> dict[str, Any]:
    """Snapshot of a LedgerState in the persisted shape (JSON-compatible)."""
    return {
        "players": [p.model_dump(mode="json") for p in state.registry.players()],
        "seats": state.seating.seats(),
        "currentRound": state.rotation.round,
        "dealerIndex": state.rotation.dealer_seat,
        "dealerStreak": state.rotation.dealer_streak,
        "history": [
            entry.model_dump(mode="json", by_alias=True) for entry in state.history.entries
        ],
    }
