"""Domain models for pm_ledger — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class LedgerAccount:
    identity: str
    balance: int  # lamports
    version: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class LedgerEntry:
    id: int
    identity: str
    entry_type: str                  # LedgerEntryType value
    amount: int                      # lamports, positive=credit negative=debit
    balance_after: int
    counterparty: str | None = None
    reference_id: str | None = None  # payment id grouping the transfers of one payment
    created_at: datetime | None = None
