"""per-organization competitor exclusions

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op


revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "org_competitor_exclusions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("org_id", sa.String(36), sa.ForeignKey("organizations.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("normalized_name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("org_id", "normalized_name", name="uq_org_competitor_exclusions_org_name"),
    )
    op.create_index("ix_org_competitor_exclusions_org_id", "org_competitor_exclusions", ["org_id"])


def downgrade() -> None:
    op.drop_index("ix_org_competitor_exclusions_org_id", table_name="org_competitor_exclusions")
    op.drop_table("org_competitor_exclusions")
