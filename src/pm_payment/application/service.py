"""PaymentApplicationService — quote and apply payments for a payment manager.

apply runs every transfer of the payment inside the caller's session and
commits once at the end; any error rolls back all of them.
"""

import uuid

from sqlalchemy.orm import Session

from config.settings import settings
from src.pm_ledger.infrastructure.ledger import SqlLedger
from src.pm_manager.application.service import PaymentManagerService
from src.pm_payment.application.schemas import (
    PaymentReceiptResponse,
    PaymentRequestBody,
    PayoutPlanResponse,
)
from src.pm_payment.domain.models import FeeConfig
from src.pm_payment.domain.payment import apply_payment, prepare_payout_plan
from src.pm_payment.domain.protocols import MetadataVerifierProtocol
from src.pm_payment.infrastructure.metadata_verifier import PdaMetadataVerifier


class PaymentApplicationService:
    def __init__(
        self,
        managers: PaymentManagerService | None = None,
        verifier: MetadataVerifierProtocol | None = None,
        metadata_program: str | None = None,
    ) -> None:
        self._managers = managers or PaymentManagerService()
        self._verifier: MetadataVerifierProtocol = verifier or PdaMetadataVerifier()
        self._metadata_program = metadata_program or settings.TOKEN_METADATA_PROGRAM_ID

    def _fee_config(self, db: Session, manager_name: str) -> FeeConfig:
        manager = self._managers.load(db, manager_name)
        return manager.fee_config(
            buy_side_fee_share_bps=settings.BUY_SIDE_FEE_SHARE_BPS,
            remainder_policy=settings.REMAINDER_POLICY,
        )

    def quote(self, db: Session, body: PaymentRequestBody) -> PayoutPlanResponse:
        """Compute the payout plan without moving any funds."""
        plan = prepare_payout_plan(
            body.to_domain(),
            self._fee_config(db, body.payment_manager),
            body.mint_metadata.to_domain() if body.mint_metadata is not None else None,
            verifier=self._verifier,
            metadata_program=self._metadata_program,
        )
        return PayoutPlanResponse.from_plan(plan)

    def apply(self, db: Session, body: PaymentRequestBody) -> PaymentReceiptResponse:
        payment_id = f"pay_{uuid.uuid4().hex[:16]}"
        try:
            plan = apply_payment(
                body.to_domain(),
                self._fee_config(db, body.payment_manager),
                body.mint_metadata.to_domain() if body.mint_metadata is not None else None,
                verifier=self._verifier,
                transfer_port=SqlLedger(db, reference_id=payment_id),
                metadata_program=self._metadata_program,
            )
            db.commit()
        except Exception:
            db.rollback()
            raise
        return PaymentReceiptResponse(payment_id=payment_id, plan=PayoutPlanResponse.from_plan(plan))
