"""PaymentManagerRepository — concrete implementation of PaymentManagerRepositoryProtocol.

Writes are raw SQL; a duplicate name on insert surfaces as IntegrityError and
is mapped to PaymentManagerExistsError.

Transaction ownership: The CALLER (application service) commits or rolls back.
"""

from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.pm_common.errors import PaymentManagerExistsError, PaymentManagerNotFoundError
from src.pm_manager.domain.models import PaymentManager
from src.pm_manager.infrastructure.db_models import PaymentManagerORM

_MANAGERS = PaymentManagerORM.__table__

_INSERT_SQL = text("""
    INSERT INTO payment_managers
        (name, authority, fee_collector, maker_fee_bps, taker_fee_bps,
         include_seller_fee, royalty_fee_share)
    VALUES
        (:name, :authority, :fee_collector, :maker_fee_bps, :taker_fee_bps,
         :include_seller_fee, :royalty_fee_share)
""")

_UPDATE_SQL = text("""
    UPDATE payment_managers
    SET authority          = :authority,
        fee_collector      = :fee_collector,
        maker_fee_bps      = :maker_fee_bps,
        taker_fee_bps      = :taker_fee_bps,
        royalty_fee_share  = :royalty_fee_share,
        updated_at = CURRENT_TIMESTAMP
    WHERE name = :name
""")

_DELETE_SQL = text("DELETE FROM payment_managers WHERE name = :name")


def _params(manager: PaymentManager) -> dict[str, object]:
    return {
        "name": manager.name,
        "authority": manager.authority,
        "fee_collector": manager.fee_collector,
        "maker_fee_bps": manager.maker_fee_bps,
        "taker_fee_bps": manager.taker_fee_bps,
        "include_seller_fee": manager.include_seller_fee,
        "royalty_fee_share": manager.royalty_fee_share,
    }


class PaymentManagerRepository:
    def get(self, db: Session, name: str) -> PaymentManager | None:
        row = db.execute(select(_MANAGERS).where(_MANAGERS.c.name == name)).first()
        if row is None:
            return None
        return PaymentManager(
            name=row.name,
            authority=row.authority,
            fee_collector=row.fee_collector,
            maker_fee_bps=row.maker_fee_bps,
            taker_fee_bps=row.taker_fee_bps,
            include_seller_fee=bool(row.include_seller_fee),
            royalty_fee_share=row.royalty_fee_share,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def insert(self, db: Session, manager: PaymentManager) -> PaymentManager:
        try:
            db.execute(_INSERT_SQL, _params(manager))
        except IntegrityError as exc:
            raise PaymentManagerExistsError(manager.name) from exc
        return self._reload(db, manager.name)

    def update(self, db: Session, manager: PaymentManager) -> PaymentManager:
        result = db.execute(_UPDATE_SQL, _params(manager))
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise PaymentManagerNotFoundError(manager.name)
        return self._reload(db, manager.name)

    def delete(self, db: Session, name: str) -> None:
        result = db.execute(_DELETE_SQL, {"name": name})
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise PaymentManagerNotFoundError(name)

    def _reload(self, db: Session, name: str) -> PaymentManager:
        manager = self.get(db, name)
        if manager is None:
            raise PaymentManagerNotFoundError(name)
        return manager
