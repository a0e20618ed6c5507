"""Buy-side fee and residual fee-collector fee."""

from dataclasses import dataclass

from src.pm_common.lamports import apply_bps, checked_add, checked_sub


@dataclass(frozen=True)
class FeeSettlement:
    buy_side_fee: int
    buy_side_amount: int  # paid to the buy-side recipient, 0 without one
    fee_collector_fee: int


def settle_fees(
    amount: int,
    total_fees: int,
    fees_paid_out: int,
    buy_side_recipient: str | None,
    buy_side_fee_share_bps: int,
) -> FeeSettlement:
    """fee_collector = total_fees + buy_side_fee - fees_paid_out [- buy_side_fee].

    The buy-side fee is carved out of the fee collector's cut when a buy-side
    recipient is present; otherwise the fee collector keeps it.
    """
    buy_side_fee = apply_bps(amount, buy_side_fee_share_bps)
    fee_collector_fee = checked_sub(checked_add(total_fees, buy_side_fee), fees_paid_out)

    buy_side_amount = 0
    if buy_side_recipient is not None:
        buy_side_amount = buy_side_fee
        fee_collector_fee = checked_sub(fee_collector_fee, buy_side_fee)

    return FeeSettlement(
        buy_side_fee=buy_side_fee,
        buy_side_amount=buy_side_amount,
        fee_collector_fee=fee_collector_fee,
    )
