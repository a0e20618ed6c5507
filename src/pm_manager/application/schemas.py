"""Pydantic schemas for pm_manager API."""

from pydantic import BaseModel, Field

from src.pm_common.datetime_utils import to_iso
from src.pm_manager.domain.models import PaymentManager

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class InitPaymentManagerRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=32)
    authority: str = Field(..., min_length=1, max_length=64)
    fee_collector: str = Field(..., min_length=1, max_length=64)
    maker_fee_bps: int = Field(..., ge=0)
    taker_fee_bps: int = Field(..., ge=0)
    include_seller_fee: bool = False
    royalty_fee_share: int | None = Field(default=None, ge=0)


class UpdatePaymentManagerRequest(BaseModel):
    """Omitted fields keep their current value."""

    caller: str = Field(..., min_length=1, max_length=64, description="Already authenticated identity")
    authority: str | None = Field(default=None, min_length=1, max_length=64)
    fee_collector: str | None = Field(default=None, min_length=1, max_length=64)
    maker_fee_bps: int | None = Field(default=None, ge=0)
    taker_fee_bps: int | None = Field(default=None, ge=0)
    royalty_fee_share: int | None = Field(default=None, ge=0)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class PaymentManagerResponse(BaseModel):
    name: str
    authority: str
    fee_collector: str
    maker_fee_bps: int
    taker_fee_bps: int
    include_seller_fee: bool
    royalty_fee_share: int | None
    created_at: str
    updated_at: str

    @classmethod
    def from_domain(cls, manager: PaymentManager) -> "PaymentManagerResponse":
        return cls(
            name=manager.name,
            authority=manager.authority,
            fee_collector=manager.fee_collector,
            maker_fee_bps=manager.maker_fee_bps,
            taker_fee_bps=manager.taker_fee_bps,
            include_seller_fee=manager.include_seller_fee,
            royalty_fee_share=manager.royalty_fee_share,
            created_at=to_iso(manager.created_at),
            updated_at=to_iso(manager.updated_at),
        )
