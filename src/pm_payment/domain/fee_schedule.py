"""Maker/taker fee schedule for a gross payment amount."""

from dataclasses import dataclass

from src.pm_common.lamports import apply_bps, checked_add


@dataclass(frozen=True)
class FeeSchedule:
    maker_fee: int
    taker_fee: int
    total_fees: int


def calculate_fee_schedule(amount: int, maker_fee_bps: int, taker_fee_bps: int) -> FeeSchedule:
    """maker/taker = floor(amount * bps / 10000); total = maker + taker, all u64-checked."""
    maker_fee = apply_bps(amount, maker_fee_bps)
    taker_fee = apply_bps(amount, taker_fee_bps)
    return FeeSchedule(
        maker_fee=maker_fee,
        taker_fee=taker_fee,
        total_fees=checked_add(maker_fee, taker_fee),
    )
