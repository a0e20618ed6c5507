"""Domain models for pm_manager — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime

from src.pm_common.enums import RemainderPolicy
from src.pm_common.errors import InvalidBasisPointsError
from src.pm_common.lamports import BASIS_POINTS_DIVISOR
from src.pm_payment.domain.constants import DEFAULT_BUY_SIDE_FEE_SHARE
from src.pm_payment.domain.models import FeeConfig


def validate_basis_points(field: str, value: int | None) -> None:
    """Basis-point settings are fractions of the whole: 0..10000."""
    if value is None:
        return
    if not (0 <= value <= BASIS_POINTS_DIVISOR):
        raise InvalidBasisPointsError(field, value)


@dataclass
class PaymentManager:
    name: str
    authority: str
    fee_collector: str
    maker_fee_bps: int
    taker_fee_bps: int
    include_seller_fee: bool = False
    royalty_fee_share: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def validate(self) -> None:
        validate_basis_points("maker_fee_bps", self.maker_fee_bps)
        validate_basis_points("taker_fee_bps", self.taker_fee_bps)
        validate_basis_points("royalty_fee_share", self.royalty_fee_share)

    def fee_config(
        self,
        buy_side_fee_share_bps: int = DEFAULT_BUY_SIDE_FEE_SHARE,
        remainder_policy: RemainderPolicy = RemainderPolicy.UNREDUCED_SUM,
    ) -> FeeConfig:
        return FeeConfig(
            fee_collector=self.fee_collector,
            maker_fee_bps=self.maker_fee_bps,
            taker_fee_bps=self.taker_fee_bps,
            include_seller_fee=self.include_seller_fee,
            royalty_fee_share=self.royalty_fee_share,
            buy_side_fee_share_bps=buy_side_fee_share_bps,
            remainder_policy=remainder_policy,
        )
