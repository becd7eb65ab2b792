"""Initial schema — users, devices, repairs.

Revision ID: 001_initial_schema
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(50), nullable=False, unique=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
    )

    op.create_table(
        "devices",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("brand", sa.String(50), nullable=False),
        sa.Column("model", sa.String(100), nullable=False),
        sa.Column(
            "owner_id", UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
        ),
    )
    op.create_index("ix_devices_owner_id", "devices", ["owner_id"])

    op.create_table(
        "repairs",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("request_date", sa.Date, nullable=False),
        sa.Column("estimated_date", sa.Date, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column("cost", sa.Float, nullable=False),
        sa.Column(
            "device_id", UUID(as_uuid=True),
            sa.ForeignKey("devices.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "technician_id", UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True,
        ),
    )
    op.create_index("ix_repairs_device_id", "repairs", ["device_id"])
    op.create_index("ix_repairs_technician_id", "repairs", ["technician_id"])


def downgrade() -> None:
    op.drop_index("ix_repairs_technician_id", table_name="repairs")
    op.drop_index("ix_repairs_device_id", table_name="repairs")
    op.drop_table("repairs")
    op.drop_index("ix_devices_owner_id", table_name="devices")
    op.drop_table("devices")
    op.drop_table("users")
