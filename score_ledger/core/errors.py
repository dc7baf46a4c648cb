"""
Ledger errors

Every error is local and recoverable: operations validate fully before
mutating, so a raised error always leaves the ledger unchanged.
"""


class LedgerError(Exception):
    """Base class for all ledger errors."""


class DuplicateNameError(LedgerError):
    """Player name already registered, or empty after trimming."""


class NotFoundError(LedgerError):
    """Unknown player name in a context that requires one."""


class InvalidAmountError(LedgerError):
    """Settlement amount is non-numeric or not strictly positive."""


class EmptyHistoryError(LedgerError):
    """Undo requested with nothing to undo."""


class MalformedStateError(LedgerError):
    """
    Persisted state field of the wrong shape.

    Recovered by the loader (field replaced with its default) unless
    strict loading was requested.
    """

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class MissingParticipantError(LedgerError):
    """
    Settlement without a payer and/or payee.

    Both flags are reported together so the host can mark each
    missing field independently.
    """

    def __init__(self, from_missing: bool, to_missing: bool):
        missing = [
            side for side, flag in (("from", from_missing), ("to", to_missing)) if flag
        ]
        super().__init__(f"Settlement participant missing: {', '.join(missing)}")
        self.from_missing = from_missing
        self.to_missing = to_missing
