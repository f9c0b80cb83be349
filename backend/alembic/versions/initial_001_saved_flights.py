"""Initial: saved_flights table

Revision ID: initial_001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, UUID

revision = "initial_001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # --- saved_flights ---
    op.create_table(
        "saved_flights",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("user_id", sa.String(100), nullable=False),
        sa.Column("airline", sa.String(200), nullable=False),
        sa.Column("airline_logo_url", sa.String(500)),
        sa.Column("flight_number", sa.String(20)),
        sa.Column("carrier_code", sa.String(10)),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("currency", sa.String(3), server_default="GBP"),
        sa.Column("depart", JSONB, nullable=False),
        sa.Column("return", JSONB),
        sa.Column("trend", JSONB, server_default="[]"),
        sa.Column("notifications", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("idx_saved_flights_user", "saved_flights", ["user_id", "created_at"])


def downgrade() -> None:
    op.drop_index("idx_saved_flights_user", table_name="saved_flights")
    op.drop_table("saved_flights")
