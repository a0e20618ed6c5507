"""apply_payment — the single inbound operation of the payment core.

Order of checks:
  1. supplied fee collector matches the manager's configured one
  2. metadata account derivation / owner / mint cross-check
  3. fee pipeline (u64 checks, creator recipient alignment) → PayoutPlan
  4. transfers, in plan order
Steps 1-3 fail before any lamport moves.
"""

import logging

from src.pm_common.errors import InvalidFeeCollectorError
from src.pm_payment.domain.executor import PayoutExecutor
from src.pm_payment.domain.metadata import resolve_royalty_metadata
from src.pm_payment.domain.models import FeeConfig, MetadataAccount, PaymentRequest, PayoutPlan
from src.pm_payment.domain.planner import build_payout_plan
from src.pm_payment.domain.protocols import MetadataVerifierProtocol, TransferPort

logger = logging.getLogger(__name__)


def prepare_payout_plan(
    request: PaymentRequest,
    config: FeeConfig,
    metadata_account: MetadataAccount | None,
    *,
    verifier: MetadataVerifierProtocol,
    metadata_program: str,
) -> PayoutPlan:
    """Validate the request and compute its plan without moving funds.

    metadata_account=None is treated like an empty metadata account whose
    derivation is not checked (no handle supplied at all).
    """
    if request.fee_collector != config.fee_collector:
        raise InvalidFeeCollectorError(config.fee_collector, request.fee_collector)

    metadata = None
    if metadata_account is not None:
        metadata = resolve_royalty_metadata(
            metadata_account, request.mint, verifier, metadata_program
        )
    return build_payout_plan(request, config, metadata)


def apply_payment(
    request: PaymentRequest,
    config: FeeConfig,
    metadata_account: MetadataAccount | None,
    *,
    verifier: MetadataVerifierProtocol,
    transfer_port: TransferPort,
    metadata_program: str,
) -> PayoutPlan:
    """Plan and execute one payment. Raises the first AppError encountered."""
    plan = prepare_payout_plan(
        request,
        config,
        metadata_account,
        verifier=verifier,
        metadata_program=metadata_program,
    )
    PayoutExecutor(transfer_port).execute(plan)
    logger.info(
        "Payment applied: payer=%s target=%s amount=%d debited=%d creators=%d",
        plan.payer,
        plan.payment_target,
        plan.amount,
        plan.total_debit,
        len(plan.creator_payouts),
    )
    return plan
