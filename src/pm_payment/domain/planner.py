"""Payout planner — runs the fee pipeline and freezes the result into a PayoutPlan.

Every check that can fail (u64 overflow/underflow, missing creator recipient)
fails here, before the executor moves any funds.
"""

import logging

from src.pm_common.errors import InternalError
from src.pm_common.lamports import checked_add, checked_sub, ensure_u64
from src.pm_payment.domain.fee_schedule import calculate_fee_schedule
from src.pm_payment.domain.fee_settlement import settle_fees
from src.pm_payment.domain.invariants import verify_payout_conservation
from src.pm_payment.domain.models import FeeConfig, PaymentRequest, PayoutPlan, RoyaltyMetadata
from src.pm_payment.domain.royalties import apportion_royalties

logger = logging.getLogger(__name__)


def calculate_target_amount(amount: int, taker_fee: int, total_fees: int, buy_side_fee: int) -> int:
    """target = amount + taker_fee - total_fees - buy_side_fee."""
    return checked_sub(
        checked_sub(checked_add(amount, taker_fee), total_fees),
        buy_side_fee,
    )


def build_payout_plan(
    request: PaymentRequest,
    config: FeeConfig,
    metadata: RoyaltyMetadata | None,
) -> PayoutPlan:
    """Compute the complete payout for one payment.

    metadata must already be verified against the payment's mint (see
    resolve_royalty_metadata); None means no royalty metadata is registered.
    """
    amount = ensure_u64(request.amount, "amount")

    schedule = calculate_fee_schedule(amount, config.maker_fee_bps, config.taker_fee_bps)
    royalties = apportion_royalties(
        amount,
        schedule.total_fees,
        metadata,
        include_seller_fee=config.include_seller_fee,
        royalty_fee_share=config.effective_royalty_fee_share,
        creator_recipients=request.creator_recipients,
        remainder_policy=config.remainder_policy,
    )
    settlement = settle_fees(
        amount,
        royalties.total_fees,
        royalties.fees_paid_out,
        request.buy_side_recipient,
        config.buy_side_fee_share_bps,
    )
    target_amount = calculate_target_amount(
        amount,
        schedule.taker_fee,
        royalties.total_fees,
        settlement.buy_side_fee,
    )

    plan = PayoutPlan(
        amount=amount,
        payer=request.payer,
        payment_target=request.payment_target,
        fee_collector=request.fee_collector,
        maker_fee=schedule.maker_fee,
        taker_fee=schedule.taker_fee,
        seller_fee=royalties.seller_fee,
        total_creators_fee=royalties.total_creators_fee,
        total_fees=royalties.total_fees,
        creator_payouts=royalties.creator_payouts,
        buy_side_recipient=request.buy_side_recipient,
        buy_side_fee=settlement.buy_side_fee,
        buy_side_amount=settlement.buy_side_amount,
        fee_collector_amount=settlement.fee_collector_fee,
        target_amount=target_amount,
    )

    violations = verify_payout_conservation(plan)
    if violations:
        raise InternalError(violations[0])

    logger.debug(
        "Payout plan: amount=%d, maker=%d, taker=%d, seller=%d, creators=%d, "
        "buy_side=%d, fee_collector=%d, target=%d",
        plan.amount,
        plan.maker_fee,
        plan.taker_fee,
        plan.seller_fee,
        plan.fees_paid_out,
        plan.buy_side_amount,
        plan.fee_collector_amount,
        plan.target_amount,
    )
    return plan
