"""Pydantic schemas for pm_ledger API."""

from pydantic import BaseModel, Field

from src.pm_common.datetime_utils import to_iso
from src.pm_common.lamports import lamports_to_display
from src.pm_ledger.domain.models import LedgerAccount, LedgerEntry
from src.pm_ledger.infrastructure.ledger import LEDGER_BALANCE_MAX


class DepositRequest(BaseModel):
    identity: str = Field(..., min_length=1, max_length=64)
    amount_lamports: int = Field(..., gt=0, le=LEDGER_BALANCE_MAX, description="Amount to deposit in lamports")


class LedgerEntryItem(BaseModel):
    id: int
    entry_type: str
    amount_lamports: int
    amount_display: str
    balance_after_lamports: int
    counterparty: str | None
    reference_id: str | None
    created_at: str  # ISO8601 string

    @classmethod
    def from_entry(cls, entry: LedgerEntry) -> "LedgerEntryItem":
        return cls(
            id=entry.id,
            entry_type=entry.entry_type,
            amount_lamports=entry.amount,
            amount_display=lamports_to_display(entry.amount),
            balance_after_lamports=entry.balance_after,
            counterparty=entry.counterparty,
            reference_id=entry.reference_id,
            created_at=to_iso(entry.created_at),
        )


class AccountResponse(BaseModel):
    identity: str
    balance_lamports: int
    balance_display: str
    entries: list[LedgerEntryItem] = []

    @classmethod
    def from_account(
        cls, account: LedgerAccount, entries: list[LedgerEntry] | None = None
    ) -> "AccountResponse":
        return cls(
            identity=account.identity,
            balance_lamports=account.balance,
            balance_display=lamports_to_display(account.balance),
            entries=[LedgerEntryItem.from_entry(e) for e in entries or []],
        )
