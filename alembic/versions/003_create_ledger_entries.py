"""003: create ledger_entries table

Revision ID: 003
Revises: 002
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    if op.get_bind().dialect.name == "sqlite":
        id_column = "INTEGER PRIMARY KEY AUTOINCREMENT"
    else:
        id_column = "BIGSERIAL PRIMARY KEY"
    # Append-only: one row per deposit and per side of every transfer
    op.execute(f"""
        CREATE TABLE ledger_entries (
            id              {id_column},
            identity        VARCHAR(64)     NOT NULL,
            entry_type      VARCHAR(20)     NOT NULL,
            amount          BIGINT          NOT NULL,
            balance_after   BIGINT          NOT NULL,
            counterparty    VARCHAR(64),
            reference_id    VARCHAR(64),
            created_at      TIMESTAMP       NOT NULL DEFAULT CURRENT_TIMESTAMP,
            CONSTRAINT ck_ledger_entry_type CHECK (
                entry_type IN ('DEPOSIT', 'TRANSFER_OUT', 'TRANSFER_IN')
            ),
            CONSTRAINT ck_ledger_balance_after_gte_0 CHECK (balance_after >= 0)
        );
    """)
    op.execute("CREATE INDEX idx_ledger_entries_identity ON ledger_entries (identity, id);")
    op.execute("""
        CREATE INDEX idx_ledger_entries_reference
        ON ledger_entries (reference_id)
        WHERE reference_id IS NOT NULL;
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS ledger_entries;")
