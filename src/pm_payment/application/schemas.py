"""Pydantic schemas for pm_payment API."""

from pydantic import BaseModel, Field

from src.pm_common.lamports import BASIS_POINTS_DIVISOR, U64_MAX, lamports_to_display
from src.pm_payment.domain.models import (
    Creator,
    MetadataAccount,
    PaymentRequest,
    PayoutPlan,
    RoyaltyMetadata,
    Transfer,
)

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CreatorBody(BaseModel):
    address: str = Field(..., min_length=1, max_length=64)
    share: int = Field(..., ge=0, le=100)


class RoyaltyMetadataBody(BaseModel):
    mint: str = Field(..., min_length=1, max_length=64)
    seller_fee_bps: int = Field(..., ge=0, le=BASIS_POINTS_DIVISOR)
    creators: list[CreatorBody] | None = None

    def to_domain(self) -> RoyaltyMetadata:
        creators = None
        if self.creators is not None:
            creators = tuple(Creator(address=c.address, share=c.share) for c in self.creators)
        return RoyaltyMetadata(mint=self.mint, seller_fee_bps=self.seller_fee_bps, creators=creators)


class MetadataAccountBody(BaseModel):
    address: str = Field(..., min_length=1, max_length=64)
    owner: str = Field(..., min_length=1, max_length=64)
    data: RoyaltyMetadataBody | None = Field(default=None, description="null for an empty account")

    def to_domain(self) -> MetadataAccount:
        return MetadataAccount(
            address=self.address,
            owner=self.owner,
            data=self.data.to_domain() if self.data is not None else None,
        )


class PaymentRequestBody(BaseModel):
    payment_manager: str = Field(..., min_length=1, max_length=32)
    amount_lamports: int = Field(..., ge=0, le=U64_MAX)
    payer: str = Field(..., min_length=1, max_length=64)
    payment_target: str = Field(..., min_length=1, max_length=64)
    fee_collector: str = Field(..., min_length=1, max_length=64)
    mint: str = Field(..., min_length=1, max_length=64)
    mint_metadata: MetadataAccountBody | None = None
    buy_side_recipient: str | None = Field(default=None, min_length=1, max_length=64)
    creator_recipients: list[str] = []

    def to_domain(self) -> PaymentRequest:
        return PaymentRequest(
            amount=self.amount_lamports,
            payer=self.payer,
            payment_target=self.payment_target,
            fee_collector=self.fee_collector,
            mint=self.mint,
            buy_side_recipient=self.buy_side_recipient,
            creator_recipients=tuple(self.creator_recipients),
        )


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class TransferItem(BaseModel):
    kind: str
    destination: str
    amount_lamports: int
    amount_display: str

    @classmethod
    def from_transfer(cls, transfer: Transfer) -> "TransferItem":
        return cls(
            kind=transfer.kind.value,
            destination=transfer.destination,
            amount_lamports=transfer.amount,
            amount_display=lamports_to_display(transfer.amount),
        )


class PayoutPlanResponse(BaseModel):
    amount_lamports: int
    maker_fee: int
    taker_fee: int
    seller_fee: int
    total_creators_fee: int
    total_fees: int
    fees_paid_out: int
    buy_side_fee: int
    fee_collector_amount: int
    target_amount: int
    total_debit_lamports: int
    total_debit_display: str
    transfers: list[TransferItem]

    @classmethod
    def from_plan(cls, plan: PayoutPlan) -> "PayoutPlanResponse":
        return cls(
            amount_lamports=plan.amount,
            maker_fee=plan.maker_fee,
            taker_fee=plan.taker_fee,
            seller_fee=plan.seller_fee,
            total_creators_fee=plan.total_creators_fee,
            total_fees=plan.total_fees,
            fees_paid_out=plan.fees_paid_out,
            buy_side_fee=plan.buy_side_fee,
            fee_collector_amount=plan.fee_collector_amount,
            target_amount=plan.target_amount,
            total_debit_lamports=plan.total_debit,
            total_debit_display=lamports_to_display(plan.total_debit),
            transfers=[TransferItem.from_transfer(t) for t in plan.transfers()],
        )


class PaymentReceiptResponse(BaseModel):
    payment_id: str
    plan: PayoutPlanResponse
