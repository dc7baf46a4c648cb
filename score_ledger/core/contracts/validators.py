"""
JSON Schema Contract Validators

Contract: schema/ledger_state.json (draft 2020-12)
- #/properties/*: top-level fields (players, seats, counters, history)
- #/$defs/player, #/$defs/transaction, #/$defs/historyEntry: items

Validation of persisted ledger state with jsonschema. Besides the whole
document, a single top-level field, a single $defs item or a single
property of a $defs item can be checked; the fail-closed loader uses these
to recover field by field.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from jsonschema import Draft202012Validator, SchemaError, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


SCHEMA_DIR = Path(__file__).parent / "schema"


class SchemaLoader:
    """
    Reads contract files from a schema directory and keeps them cached.

    The default directory is the package data next to this module.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Contract by name ('ledger_state' reads ledger_state.json).

        Raises:
            FileNotFoundError: no such contract file
            ValueError: the file is not a valid draft 2020-12 schema
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid contract {path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base contract validator.

    Wraps a Draft 2020-12 validator for one schema, plus validators for its
    top-level properties and $defs built on demand.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)
        self._part_validators: Dict[str, Draft202012Validator] = {}

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate a whole document.

        Raises:
            ValidationError: data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def property_validator(self, name: str) -> Draft202012Validator:
        """Validator for one top-level property ($refs resolve against the root $defs)."""
        return self._part_validator(f"properties/{name}", self.schema["properties"][name])

    def definition_validator(self, name: str) -> Draft202012Validator:
        """Validator for one $defs entry."""
        return self._part_validator(f"$defs/{name}", self.schema["$defs"][name])

    def definition_property_validator(self, name: str, prop: str) -> Draft202012Validator:
        """Validator for one property of a $defs entry (e.g. player.score)."""
        subschema = self.schema["$defs"][name]["properties"][prop]
        return self._part_validator(f"$defs/{name}/properties/{prop}", subschema)

    def _part_validator(self, key: str, subschema: Dict[str, Any]) -> Draft202012Validator:
        if key not in self._part_validators:
            part = dict(subschema)
            part["$defs"] = self.schema.get("$defs", {})
            self._part_validators[key] = Draft202012Validator(part)
        return self._part_validators[key]


class LedgerStateValidator(ContractValidator):
    """Validator for the ledger_state contract."""

    def __init__(self, schema_name: str = "ledger_state"):
        super().__init__(schema_name)

    def field_errors(self, field: str, value: Any) -> list[str]:
        """Messages of all violations of one top-level field."""
        return [e.message for e in self.property_validator(field).iter_errors(value)]

    def item_errors(self, definition: str, value: Any) -> list[str]:
        """Messages of all violations of one $defs item (player, historyEntry)."""
        return [e.message for e in self.definition_validator(definition).iter_errors(value)]

    def item_field_errors(self, definition: str, field: str, value: Any) -> list[str]:
        """Messages of all violations of one property of a $defs item."""
        validator = self.definition_property_validator(definition, field)
        return [e.message for e in validator.iter_errors(value)]


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_ledger_state(data: Dict[str, Any]) -> None:
    """
    Validate ledger_state data.

    Raises:
        ValidationError: data does not match the schema
    """
    LedgerStateValidator().validate(data)
