"""
Contract Validation Module

Validation of persisted ledger state against its JSON Schema contract.
"""

from .validators import (
    ContractValidator,
    LedgerStateValidator,
    SchemaLoader,
    validate_ledger_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LedgerStateValidator",
    # Functions
    "validate_ledger_state",
]
