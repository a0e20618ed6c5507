"""Tests for royalty apportionment and the creator split."""

import pytest

from src.pm_common.enums import RemainderPolicy
from src.pm_common.errors import ArithmeticUnderflowError, MissingAccountError
from src.pm_payment.domain.models import Creator, RoyaltyMetadata
from src.pm_payment.domain.royalties import (
    apportion_royalties,
    seed_remainder,
    split_creator_fees,
)


def _creators(*shares: int) -> tuple[Creator, ...]:
    return tuple(Creator(address=f"creator-{i}", share=s) for i, s in enumerate(shares))


def _recipients(n: int) -> tuple[str, ...]:
    return tuple(f"recipient-{i}" for i in range(n))


class TestSplitCreatorFees:
    def test_two_creators_exact(self) -> None:
        payouts = split_creator_fees(1000, _creators(60, 40), ("A", "B"))
        assert [(p.recipient, p.amount) for p in payouts] == [("A", 600), ("B", 400)]

    def test_zero_share_creator_consumes_no_recipient(self) -> None:
        payouts = split_creator_fees(1000, _creators(0, 60, 40), ("A", "B"))
        assert [(p.creator, p.recipient) for p in payouts] == [
            ("creator-1", "A"),
            ("creator-2", "B"),
        ]

    def test_missing_recipient_raises(self) -> None:
        with pytest.raises(MissingAccountError, match="creator-1"):
            split_creator_fees(1000, _creators(60, 40), ("A",))

    def test_extra_recipients_ignored(self) -> None:
        payouts = split_creator_fees(1000, _creators(100), ("A", "B", "C"))
        assert len(payouts) == 1
        assert payouts[0].amount == 1000

    def test_zero_fee_creator_consumes_recipient_without_payout(self) -> None:
        # pool of 1 lamport: floor(1 * 50 / 100) = 0 for both, remainder 0
        payouts = split_creator_fees(1, _creators(50, 50), ("A", "B"))
        assert payouts == ()

    def test_zero_fee_creator_still_needs_recipient(self) -> None:
        with pytest.raises(MissingAccountError):
            split_creator_fees(1, _creators(50, 50), ("A",))

    def test_unreduced_sum_leaves_floor_residue_unassigned(self) -> None:
        payouts = split_creator_fees(10, _creators(33, 33, 34), _recipients(3))
        assert [p.amount for p in payouts] == [3, 3, 3]

    def test_floored_sum_hands_out_residue(self) -> None:
        payouts = split_creator_fees(
            10, _creators(33, 33, 34), _recipients(3), RemainderPolicy.FLOORED_SUM
        )
        assert [p.amount for p in payouts] == [4, 3, 3]
        assert sum(p.amount for p in payouts) == 10

    def test_shares_below_hundred_bump_every_creator(self) -> None:
        # remainder = 1000 - 800 = 200, each creator takes +1 in order
        payouts = split_creator_fees(1000, _creators(50, 30), _recipients(2))
        assert [p.amount for p in payouts] == [501, 301]

    def test_shares_above_hundred_underflow(self) -> None:
        with pytest.raises(ArithmeticUnderflowError):
            split_creator_fees(100, _creators(60, 60), _recipients(2))

    def test_shares_above_hundred_underflow_floored(self) -> None:
        with pytest.raises(ArithmeticUnderflowError):
            split_creator_fees(100, _creators(60, 60), _recipients(2), RemainderPolicy.FLOORED_SUM)


class TestSeedRemainder:
    def test_full_shares_unreduced_is_zero(self) -> None:
        assert seed_remainder(7, _creators(33, 33, 34)) == 0

    def test_floored(self) -> None:
        assert seed_remainder(7, _creators(33, 33, 34), RemainderPolicy.FLOORED_SUM) == 1


class TestApportionRoyalties:
    def test_no_metadata_passes_total_through(self) -> None:
        result = apportion_royalties(
            1_000_000,
            30_000,
            None,
            include_seller_fee=True,
            royalty_fee_share=5000,
            creator_recipients=(),
        )
        assert result.seller_fee == 0
        assert result.total_creators_fee == 0
        assert result.total_fees == 30_000
        assert result.fees_paid_out == 0

    def test_seller_fee_excluded(self) -> None:
        metadata = RoyaltyMetadata(mint="mint", seller_fee_bps=500, creators=_creators(100))
        result = apportion_royalties(
            1_000_000,
            30_000,
            metadata,
            include_seller_fee=False,
            royalty_fee_share=5000,
            creator_recipients=("A",),
        )
        assert result.seller_fee == 0
        assert result.total_creators_fee == 15_000
        assert result.total_fees == 30_000
        assert result.fees_paid_out == 15_000

    def test_seller_fee_included(self) -> None:
        metadata = RoyaltyMetadata(mint="mint", seller_fee_bps=500, creators=_creators(60, 40))
        result = apportion_royalties(
            1_000_000,
            30_000,
            metadata,
            include_seller_fee=True,
            royalty_fee_share=5000,
            creator_recipients=("A", "B"),
        )
        # seller = 50_000; pool = 15_000 + 50_000
        assert result.seller_fee == 50_000
        assert result.total_creators_fee == 65_000
        assert result.total_fees == 80_000
        assert [p.amount for p in result.creator_payouts] == [39_000, 26_000]

    def test_metadata_without_creators_pays_nobody(self) -> None:
        metadata = RoyaltyMetadata(mint="mint", seller_fee_bps=500, creators=None)
        result = apportion_royalties(
            1_000_000,
            30_000,
            metadata,
            include_seller_fee=True,
            royalty_fee_share=5000,
            creator_recipients=(),
        )
        assert result.total_creators_fee == 65_000
        assert result.creator_payouts == ()
        assert result.total_fees == 80_000
