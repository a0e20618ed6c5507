"""002: create ledger_accounts table

Revision ID: 002
Revises: 001
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE ledger_accounts (
            identity        VARCHAR(64)     PRIMARY KEY,
            balance         BIGINT          NOT NULL DEFAULT 0,
            version         BIGINT          NOT NULL DEFAULT 0,
            created_at      TIMESTAMP       NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at      TIMESTAMP       NOT NULL DEFAULT CURRENT_TIMESTAMP,
            CONSTRAINT ck_ledger_accounts_balance_gte_0 CHECK (balance >= 0)
        );
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS ledger_accounts;")
