"""Member connections and memorial candles

Revision ID: 002
Revises: 001
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TZ = sa.DateTime(timezone=True)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", TZ, server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", TZ, server_default=sa.func.now(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "user_connections",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False, primary_key=True),
        sa.Column("requester_id", sa.Integer(), sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("addressee_id", sa.Integer(), sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("responded_at", TZ, nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("requester_id", "addressee_id", name="uq_user_connections_requester_addressee"),
    )
    op.create_index("ix_user_connections_requester_id", "user_connections", ["requester_id"])
    op.create_index("ix_user_connections_addressee_id", "user_connections", ["addressee_id"])
    op.create_index("ix_user_connections_status", "user_connections", ["status"])

    op.create_table(
        "memorial_candles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False, primary_key=True),
        sa.Column("memorial_id", sa.Integer(), sa.ForeignKey("memorials.id", ondelete="CASCADE"), nullable=False),
        sa.Column("lit_by", sa.Integer(), sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("message", sa.String(500), nullable=True),
        sa.Column("expires_at", TZ, nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_memorial_candles_memorial_id", "memorial_candles", ["memorial_id"])
    op.create_index("ix_memorial_candles_lit_by", "memorial_candles", ["lit_by"])
    op.create_index("ix_memorial_candles_expires_at", "memorial_candles", ["expires_at"])


def downgrade() -> None:
    op.drop_table("memorial_candles")
    op.drop_table("user_connections")
