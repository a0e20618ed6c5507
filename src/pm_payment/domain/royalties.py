"""Royalty apportionment — seller fee, creator pool, and per-creator split.

The creator pool is the royalty share of (maker + taker) fees plus the seller
fee. It is split across creators by whole-percent share, each creator's cut
floored, with a shared remainder counter handing out +1 lamport per creator in
list order until it runs out. Zero-share creators are skipped entirely and do
not consume a recipient.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from src.pm_common.enums import RemainderPolicy
from src.pm_common.errors import MissingAccountError
from src.pm_common.lamports import (
    apply_bps,
    apply_percent,
    checked_add,
    checked_mul,
    checked_sub,
)
from src.pm_payment.domain.models import Creator, CreatorPayout, RoyaltyMetadata


@dataclass(frozen=True)
class RoyaltyApportionment:
    seller_fee: int
    total_creators_fee: int
    total_fees: int  # incoming total_fees + seller_fee
    creator_payouts: tuple[CreatorPayout, ...]

    @property
    def fees_paid_out(self) -> int:
        return sum(p.amount for p in self.creator_payouts)


def apportion_royalties(
    amount: int,
    total_fees: int,
    metadata: RoyaltyMetadata | None,
    *,
    include_seller_fee: bool,
    royalty_fee_share: int,
    creator_recipients: Sequence[str],
    remainder_policy: RemainderPolicy = RemainderPolicy.UNREDUCED_SUM,
) -> RoyaltyApportionment:
    """Compute seller fee, creator pool and creator payouts.

    Without metadata nothing is owed to creators and total_fees passes through.
    """
    if metadata is None:
        return RoyaltyApportionment(
            seller_fee=0,
            total_creators_fee=0,
            total_fees=total_fees,
            creator_payouts=(),
        )

    seller_fee = apply_bps(amount, metadata.seller_fee_bps) if include_seller_fee else 0
    total_creators_fee = checked_add(apply_bps(total_fees, royalty_fee_share), seller_fee)

    payouts: tuple[CreatorPayout, ...] = ()
    if metadata.creators is not None:
        payouts = split_creator_fees(
            total_creators_fee,
            metadata.creators,
            creator_recipients,
            remainder_policy,
        )

    return RoyaltyApportionment(
        seller_fee=seller_fee,
        total_creators_fee=total_creators_fee,
        total_fees=checked_add(total_fees, seller_fee),
        creator_payouts=payouts,
    )


def split_creator_fees(
    pool: int,
    creators: Sequence[Creator],
    recipients: Sequence[str],
    policy: RemainderPolicy = RemainderPolicy.UNREDUCED_SUM,
) -> tuple[CreatorPayout, ...]:
    """Split pool across creators; recipients align with non-zero-share creators.

    Creators whose computed fee is 0 still consume their recipient but get no payout.
    Recipients beyond the last non-zero-share creator are ignored.
    """
    remainder = seed_remainder(pool, creators, policy)
    recipient_iter = iter(recipients)
    payouts: list[CreatorPayout] = []

    for creator in creators:
        if creator.share == 0:
            continue
        recipient = next(recipient_iter, None)
        if recipient is None:
            raise MissingAccountError(f"no recipient supplied for creator {creator.address}")

        bump = 1 if remainder > 0 else 0
        creator_fee = checked_add(apply_percent(pool, creator.share), bump)
        remainder = checked_sub(remainder, bump)

        if creator_fee > 0:
            payouts.append(
                CreatorPayout(
                    creator=creator.address,
                    recipient=recipient,
                    share=creator.share,
                    amount=creator_fee,
                )
            )
    return tuple(payouts)


def seed_remainder(
    pool: int,
    creators: Sequence[Creator],
    policy: RemainderPolicy = RemainderPolicy.UNREDUCED_SUM,
) -> int:
    """Initial value of the shared +1 remainder counter.

    With shares summing to 100, UNREDUCED_SUM always yields 0. Shares summing
    above 100 underflow under either policy.
    """
    if policy is RemainderPolicy.FLOORED_SUM:
        floored = 0
        for creator in creators:
            floored = checked_add(floored, apply_percent(pool, creator.share))
        return checked_sub(pool, floored)

    unreduced = 0
    for creator in creators:
        unreduced = checked_add(unreduced, checked_mul(pool, creator.share))
    return checked_sub(pool, unreduced // 100)
