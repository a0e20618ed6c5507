"""Tests for maker/taker fee schedule."""

import pytest

from src.pm_common.errors import ArithmeticOverflowError
from src.pm_common.lamports import U64_MAX
from src.pm_payment.domain.fee_schedule import calculate_fee_schedule


class TestCalculateFeeSchedule:
    def test_basic(self) -> None:
        schedule = calculate_fee_schedule(1_000_000, 200, 100)
        assert schedule.maker_fee == 20_000
        assert schedule.taker_fee == 10_000
        assert schedule.total_fees == 30_000

    def test_floors_each_fee(self) -> None:
        schedule = calculate_fee_schedule(999, 150, 150)
        assert schedule.maker_fee == 14
        assert schedule.taker_fee == 14
        assert schedule.total_fees == 28

    def test_zero_amount(self) -> None:
        schedule = calculate_fee_schedule(0, 500, 300)
        assert schedule.total_fees == 0

    def test_zero_rates(self) -> None:
        assert calculate_fee_schedule(1_000_000, 0, 0).total_fees == 0

    def test_max_amount_one_bps(self) -> None:
        schedule = calculate_fee_schedule(U64_MAX, 1, 0)
        assert schedule.maker_fee == U64_MAX // 10000

    def test_overflow_raises(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            calculate_fee_schedule(U64_MAX, 200, 100)
