"""Payout plan conservation check."""

import logging

from src.pm_common.lamports import U64_MAX
from src.pm_payment.domain.models import PayoutPlan

logger = logging.getLogger(__name__)


def verify_payout_conservation(plan: PayoutPlan) -> list[str]:
    """Check the plan moves exactly amount + taker_fee. Returns list of violation strings.

    creators + buy_side + fee_collector + target == amount + taker_fee
    """
    violations: list[str] = []
    expected = plan.amount + plan.taker_fee
    moved = plan.total_debit
    if moved != expected:
        msg = (
            f"Conservation violated: creators({plan.fees_paid_out}) + "
            f"buy_side({plan.buy_side_amount}) + fee_collector({plan.fee_collector_amount}) + "
            f"target({plan.target_amount}) = {moved} != amount + taker_fee = {expected}"
        )
        violations.append(msg)
        logger.error(msg)

    for transfer in plan.transfers():
        if not 0 <= transfer.amount <= U64_MAX:
            msg = f"Transfer out of u64 range: {transfer.kind.value} {transfer.amount}"
            violations.append(msg)
            logger.error(msg)
    return violations
