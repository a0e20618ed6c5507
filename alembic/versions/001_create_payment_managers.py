"""001: create payment_managers table

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE payment_managers (
            name                VARCHAR(32)     PRIMARY KEY,
            authority           VARCHAR(64)     NOT NULL,
            fee_collector       VARCHAR(64)     NOT NULL,
            maker_fee_bps       INTEGER         NOT NULL,
            taker_fee_bps       INTEGER         NOT NULL,
            include_seller_fee  BOOLEAN         NOT NULL DEFAULT FALSE,
            royalty_fee_share   BIGINT,
            created_at          TIMESTAMP       NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at          TIMESTAMP       NOT NULL DEFAULT CURRENT_TIMESTAMP,
            CONSTRAINT ck_pm_maker_fee_bps CHECK (maker_fee_bps BETWEEN 0 AND 10000),
            CONSTRAINT ck_pm_taker_fee_bps CHECK (taker_fee_bps BETWEEN 0 AND 10000),
            CONSTRAINT ck_pm_royalty_fee_share CHECK (
                royalty_fee_share IS NULL OR royalty_fee_share BETWEEN 0 AND 10000
            )
        );
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS payment_managers;")
