"""PaymentManagerService — init / update / close of payment manager fee configs.

Mutations commit on success and roll back on any error.
Only the current authority may update or close a manager.
"""

import logging

from sqlalchemy.orm import Session

from src.pm_common.errors import InvalidAuthorityError, PaymentManagerExistsError, PaymentManagerNotFoundError
from src.pm_manager.application.schemas import (
    InitPaymentManagerRequest,
    PaymentManagerResponse,
    UpdatePaymentManagerRequest,
)
from src.pm_manager.domain.models import PaymentManager
from src.pm_manager.domain.repository import PaymentManagerRepositoryProtocol
from src.pm_manager.infrastructure.persistence import PaymentManagerRepository

logger = logging.getLogger(__name__)


class PaymentManagerService:
    def __init__(self, repo: PaymentManagerRepositoryProtocol | None = None) -> None:
        self._repo: PaymentManagerRepositoryProtocol = repo or PaymentManagerRepository()

    def load(self, db: Session, name: str) -> PaymentManager:
        manager = self._repo.get(db, name)
        if manager is None:
            raise PaymentManagerNotFoundError(name)
        return manager

    def get(self, db: Session, name: str) -> PaymentManagerResponse:
        return PaymentManagerResponse.from_domain(self.load(db, name))

    def init(self, db: Session, body: InitPaymentManagerRequest) -> PaymentManagerResponse:
        manager = PaymentManager(
            name=body.name,
            authority=body.authority,
            fee_collector=body.fee_collector,
            maker_fee_bps=body.maker_fee_bps,
            taker_fee_bps=body.taker_fee_bps,
            include_seller_fee=body.include_seller_fee,
            royalty_fee_share=body.royalty_fee_share,
        )
        manager.validate()
        try:
            if self._repo.get(db, manager.name) is not None:
                raise PaymentManagerExistsError(manager.name)
            saved = self._repo.insert(db, manager)
            db.commit()
        except Exception:
            db.rollback()
            raise
        logger.info("Payment manager created: name=%s authority=%s", saved.name, saved.authority)
        return PaymentManagerResponse.from_domain(saved)

    def update(
        self, db: Session, name: str, body: UpdatePaymentManagerRequest
    ) -> PaymentManagerResponse:
        try:
            current = self.load(db, name)
            if body.caller != current.authority:
                raise InvalidAuthorityError(name)
            updated = PaymentManager(
                name=current.name,
                authority=body.authority or current.authority,
                fee_collector=body.fee_collector or current.fee_collector,
                maker_fee_bps=(
                    current.maker_fee_bps if body.maker_fee_bps is None else body.maker_fee_bps
                ),
                taker_fee_bps=(
                    current.taker_fee_bps if body.taker_fee_bps is None else body.taker_fee_bps
                ),
                include_seller_fee=current.include_seller_fee,
                royalty_fee_share=(
                    current.royalty_fee_share
                    if body.royalty_fee_share is None
                    else body.royalty_fee_share
                ),
            )
            updated.validate()
            saved = self._repo.update(db, updated)
            db.commit()
        except Exception:
            db.rollback()
            raise
        logger.info("Payment manager updated: name=%s", name)
        return PaymentManagerResponse.from_domain(saved)

    def close(self, db: Session, name: str, caller: str) -> None:
        try:
            current = self.load(db, name)
            if caller != current.authority:
                raise InvalidAuthorityError(name)
            self._repo.delete(db, name)
            db.commit()
        except Exception:
            db.rollback()
            raise
        logger.info("Payment manager closed: name=%s", name)
