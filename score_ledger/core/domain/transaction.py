"""
Transaction / HistoryEntry: settlement records

Contract: ledger_state.json#/$defs/transaction, #/$defs/historyEntry

Immutable Pydantic models. Field aliases match the persisted state shape
("from", "to", "dealerIndex"), since `from` is a Python keyword.
"""

from pydantic import BaseModel, Field

from .rotation_state import SEAT_COUNT


class Transaction(BaseModel):
    """Single point transfer between two players."""

    from_player: str = Field(..., alias="from", min_length=1, description="Payer")
    to_player: str = Field(..., alias="to", min_length=1, description="Payee")
    amount: int = Field(..., gt=0, description="Transferred points (strictly positive)")

    model_config = {"frozen": True, "populate_by_name": True}

    def deltas(self) -> dict[str, int]:
        """Per-player balance change caused by this transaction."""
        changes: dict[str, int] = {}
        changes[self.from_player] = changes.get(self.from_player, 0) - self.amount
        changes[self.to_player] = changes.get(self.to_player, 0) + self.amount
        return changes


class HistoryEntry(BaseModel):
    """
    Ledger entry recorded by one settlement.

    Only single-transaction entries are produced, but the transactions
    sequence is kept for entries carrying several transfers.
    """

    time: int = Field(..., ge=0, description="Record time (epoch, milliseconds)")
    round: int = Field(..., ge=1, description="Round active when recorded")
    dealer_index: int = Field(
        ..., alias="dealerIndex", ge=0, lt=SEAT_COUNT, description="Dealer seat at record time"
    )
    transactions: tuple[Transaction, ...] = Field(
        ..., min_length=1, description="Ordered transfers of this entry"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def deltas(self) -> dict[str, int]:
        """Combined per-player balance change of all transactions."""
        changes: dict[str, int] = {}
        for tx in self.transactions:
            for name, delta in tx.deltas().items():
                changes[name] = changes.get(name, 0) + delta
        return changes
