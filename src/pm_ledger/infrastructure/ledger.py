"""SqlLedger — lamport balances and append-only ledger entries.

Implements the TransferPort used by PayoutExecutor. Every mutation is a single
guarded UPDATE/UPSERT ... RETURNING; a debit returning no row means the
account is missing or underfunded.

Transaction ownership: The CALLER is responsible for committing or rolling
back the session. All transfers of one payment share that transaction.
"""

from sqlalchemy import select, text
from sqlalchemy.orm import Session

from src.pm_common.enums import LedgerEntryType
from src.pm_common.errors import (
    ArithmeticOverflowError,
    InsufficientBalanceError,
    LedgerAccountNotFoundError,
)
from src.pm_ledger.domain.models import LedgerAccount, LedgerEntry
from src.pm_ledger.infrastructure.db_models import LedgerAccountORM, LedgerEntryORM

_ACCOUNTS = LedgerAccountORM.__table__
_ENTRIES = LedgerEntryORM.__table__

# Balances are stored in signed BIGINT columns
LEDGER_BALANCE_MAX = 2**63 - 1

_DEBIT_SQL = text("""
    UPDATE ledger_accounts
    SET balance = balance - :amount,
        version = version + 1,
        updated_at = CURRENT_TIMESTAMP
    WHERE identity = :identity AND balance >= :amount
    RETURNING balance
""")

_CREDIT_SQL = text("""
    INSERT INTO ledger_accounts (identity, balance, version)
    VALUES (:identity, :amount, 1)
    ON CONFLICT (identity) DO UPDATE
    SET balance = ledger_accounts.balance + excluded.balance,
        version = ledger_accounts.version + 1,
        updated_at = CURRENT_TIMESTAMP
    RETURNING balance
""")

_INSERT_ENTRY_SQL = text("""
    INSERT INTO ledger_entries
        (identity, entry_type, amount, balance_after, counterparty, reference_id)
    VALUES
        (:identity, :entry_type, :amount, :balance_after, :counterparty, :reference_id)
    RETURNING id
""")


def _row_to_account(row: object) -> LedgerAccount:
    return LedgerAccount(
        identity=row.identity,  # type: ignore[attr-defined]
        balance=row.balance,  # type: ignore[attr-defined]
        version=row.version,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
        updated_at=row.updated_at,  # type: ignore[attr-defined]
    )


def _row_to_entry(row: object) -> LedgerEntry:
    return LedgerEntry(
        id=row.id,  # type: ignore[attr-defined]
        identity=row.identity,  # type: ignore[attr-defined]
        entry_type=row.entry_type,  # type: ignore[attr-defined]
        amount=row.amount,  # type: ignore[attr-defined]
        balance_after=row.balance_after,  # type: ignore[attr-defined]
        counterparty=row.counterparty,  # type: ignore[attr-defined]
        reference_id=row.reference_id,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
    )


class SqlLedger:
    def __init__(self, db: Session, reference_id: str | None = None) -> None:
        self._db = db
        self._reference_id = reference_id

    # ------------------------------------------------------------------
    # TransferPort
    # ------------------------------------------------------------------

    def transfer(self, source: str, destination: str, amount: int) -> None:
        """Debit source, credit destination (created on first credit)."""
        debited = self._db.execute(
            _DEBIT_SQL, {"identity": source, "amount": amount}
        ).scalar_one_or_none()
        if debited is None:
            account = self.get_account(source)
            if account is None:
                raise LedgerAccountNotFoundError(source)
            raise InsufficientBalanceError(required=amount, available=account.balance)
        self._write_entry(source, LedgerEntryType.TRANSFER_OUT, -amount, debited, destination)

        credited = self._credit(destination, amount)
        self._write_entry(destination, LedgerEntryType.TRANSFER_IN, amount, credited, source)

    # ------------------------------------------------------------------
    # Funding and reads
    # ------------------------------------------------------------------

    def deposit(self, identity: str, amount: int) -> LedgerAccount:
        balance = self._credit(identity, amount)
        self._write_entry(identity, LedgerEntryType.DEPOSIT, amount, balance, None)
        account = self.get_account(identity)
        if account is None:
            raise LedgerAccountNotFoundError(identity)
        return account

    def get_account(self, identity: str) -> LedgerAccount | None:
        row = self._db.execute(
            select(_ACCOUNTS).where(_ACCOUNTS.c.identity == identity)
        ).first()
        if row is None:
            return None
        return _row_to_account(row)

    def list_entries(self, identity: str, limit: int = 50) -> list[LedgerEntry]:
        rows = self._db.execute(
            select(_ENTRIES)
            .where(_ENTRIES.c.identity == identity)
            .order_by(_ENTRIES.c.id.desc())
            .limit(limit)
        ).fetchall()
        return [_row_to_entry(r) for r in rows]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _credit(self, identity: str, amount: int) -> int:
        """Credit identity, refusing balances the BIGINT column cannot hold."""
        current = self.get_account(identity)
        balance = current.balance if current is not None else 0
        if balance + amount > LEDGER_BALANCE_MAX:
            raise ArithmeticOverflowError(f"balance of {identity}: {balance} + {amount}")
        return self._db.execute(
            _CREDIT_SQL, {"identity": identity, "amount": amount}
        ).scalar_one()

    def _write_entry(
        self,
        identity: str,
        entry_type: LedgerEntryType,
        amount: int,
        balance_after: int,
        counterparty: str | None,
    ) -> None:
        self._db.execute(
            _INSERT_ENTRY_SQL,
            {
                "identity": identity,
                "entry_type": entry_type.value,
                "amount": amount,
                "balance_after": balance_after,
                "counterparty": counterparty,
                "reference_id": self._reference_id,
            },
        )
