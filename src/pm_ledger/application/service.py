"""LedgerApplicationService — funding and balance reads for ledger accounts.

deposit commits its own transaction; reads run without one.
"""

from sqlalchemy.orm import Session

from src.pm_common.errors import LedgerAccountNotFoundError
from src.pm_ledger.application.schemas import AccountResponse
from src.pm_ledger.infrastructure.ledger import SqlLedger


class LedgerApplicationService:
    def deposit(self, db: Session, identity: str, amount: int) -> AccountResponse:
        try:
            account = SqlLedger(db).deposit(identity, amount)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return AccountResponse.from_account(account)

    def get_account(self, db: Session, identity: str, limit: int = 20) -> AccountResponse:
        ledger = SqlLedger(db)
        account = ledger.get_account(identity)
        if account is None:
            raise LedgerAccountNotFoundError(identity)
        return AccountResponse.from_account(account, ledger.list_entries(identity, limit))
