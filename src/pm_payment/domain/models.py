"""Domain models for pm_payment — pure dataclasses, no SQLAlchemy dependency.

Identities (payer, creators, programs, mints) are base58 account addresses
carried as plain strings; amounts are int lamports.
"""

from dataclasses import dataclass

from src.pm_common.enums import RemainderPolicy, TransferKind
from src.pm_payment.domain.constants import DEFAULT_BUY_SIDE_FEE_SHARE, DEFAULT_ROYALTY_FEE_SHARE


@dataclass(frozen=True)
class FeeConfig:
    """Fee settings of one payment manager, read-only for a payment."""

    fee_collector: str
    maker_fee_bps: int
    taker_fee_bps: int
    include_seller_fee: bool = False
    royalty_fee_share: int | None = None  # None → DEFAULT_ROYALTY_FEE_SHARE
    buy_side_fee_share_bps: int = DEFAULT_BUY_SIDE_FEE_SHARE
    remainder_policy: RemainderPolicy = RemainderPolicy.UNREDUCED_SUM

    @property
    def effective_royalty_fee_share(self) -> int:
        if self.royalty_fee_share is None:
            return DEFAULT_ROYALTY_FEE_SHARE
        return self.royalty_fee_share


@dataclass(frozen=True)
class Creator:
    address: str
    share: int  # percent of the creator pool, 0-100


@dataclass(frozen=True)
class RoyaltyMetadata:
    mint: str
    seller_fee_bps: int
    creators: tuple[Creator, ...] | None = None


@dataclass(frozen=True)
class MetadataAccount:
    """Metadata account handle as supplied by the caller, not yet trusted."""

    address: str
    owner: str
    data: RoyaltyMetadata | None = None  # None: account holds no data

    @property
    def is_empty(self) -> bool:
        return self.data is None


@dataclass(frozen=True)
class PaymentRequest:
    amount: int
    payer: str
    payment_target: str
    fee_collector: str
    mint: str
    buy_side_recipient: str | None = None
    # Aligned one-to-one with the metadata creators whose share is non-zero
    creator_recipients: tuple[str, ...] = ()


@dataclass(frozen=True)
class CreatorPayout:
    creator: str
    recipient: str
    share: int
    amount: int


@dataclass(frozen=True)
class Transfer:
    kind: TransferKind
    source: str
    destination: str
    amount: int


@dataclass(frozen=True)
class PayoutPlan:
    """Fully computed payout for one payment. Consumed once by PayoutExecutor."""

    amount: int
    payer: str
    payment_target: str
    fee_collector: str
    maker_fee: int
    taker_fee: int
    seller_fee: int
    total_creators_fee: int
    total_fees: int  # maker + taker + seller
    creator_payouts: tuple[CreatorPayout, ...]
    buy_side_recipient: str | None
    buy_side_fee: int
    buy_side_amount: int  # 0 when no buy-side recipient
    fee_collector_amount: int
    target_amount: int

    @property
    def fees_paid_out(self) -> int:
        return sum(p.amount for p in self.creator_payouts)

    @property
    def creator_amounts(self) -> dict[str, int]:
        amounts: dict[str, int] = {}
        for payout in self.creator_payouts:
            amounts[payout.recipient] = amounts.get(payout.recipient, 0) + payout.amount
        return amounts

    @property
    def total_debit(self) -> int:
        """Lamports leaving the payer across every transfer of the plan."""
        return (
            self.fees_paid_out
            + self.buy_side_amount
            + self.fee_collector_amount
            + self.target_amount
        )

    def transfers(self) -> list[Transfer]:
        """Transfers in execution order: creators, buy side, fee collector, target."""
        ordered = [
            Transfer(TransferKind.CREATOR_ROYALTY, self.payer, p.recipient, p.amount)
            for p in self.creator_payouts
        ]
        if self.buy_side_recipient is not None:
            ordered.append(
                Transfer(
                    TransferKind.BUY_SIDE_FEE,
                    self.payer,
                    self.buy_side_recipient,
                    self.buy_side_amount,
                )
            )
        if self.fee_collector_amount > 0:
            ordered.append(
                Transfer(
                    TransferKind.FEE_COLLECTOR_FEE,
                    self.payer,
                    self.fee_collector,
                    self.fee_collector_amount,
                )
            )
        ordered.append(
            Transfer(
                TransferKind.PAYMENT_TARGET,
                self.payer,
                self.payment_target,
                self.target_amount,
            )
        )
        return ordered
