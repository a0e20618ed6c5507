"""SQLAlchemy ORM model for the payment_managers table (DDL reference; writes use raw SQL)."""

from datetime import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from src.pm_common.database import Base


class PaymentManagerORM(Base):
    __tablename__ = "payment_managers"

    name: Mapped[str] = mapped_column(String(32), primary_key=True)
    authority: Mapped[str] = mapped_column(String(64), nullable=False)
    fee_collector: Mapped[str] = mapped_column(String(64), nullable=False)
    maker_fee_bps: Mapped[int] = mapped_column(Integer, nullable=False)
    taker_fee_bps: Mapped[int] = mapped_column(Integer, nullable=False)
    include_seller_fee: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    royalty_fee_share: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
