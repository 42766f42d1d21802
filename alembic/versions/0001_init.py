"""organizations, brand catalog and provider responses

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "organizations",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("domain", sa.String(255), nullable=True),
        sa.Column("metadata", sa.JSON(none_as_null=True), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        "brand_catalog",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("org_id", sa.String(36), sa.ForeignKey("organizations.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("variants_json", sa.JSON(), nullable=False),
        sa.Column("is_org_brand", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_brand_catalog_org_id", "brand_catalog", ["org_id"])
    op.create_table(
        "prompt_provider_responses",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("org_id", sa.String(36), sa.ForeignKey("organizations.id"), nullable=False),
        sa.Column("provider", sa.String(50), nullable=False, server_default="openai"),
        sa.Column("raw_ai_response", sa.Text(), nullable=True),
        sa.Column("competitors_json", sa.JSON(none_as_null=True), nullable=True),
        sa.Column("brands_json", sa.JSON(none_as_null=True), nullable=True),
        sa.Column("run_at", sa.DateTime(), nullable=False),
    )
    op.create_index(
        "ix_prompt_provider_responses_org_run_at",
        "prompt_provider_responses",
        ["org_id", "run_at"],
    )


def downgrade() -> None:
    op.drop_index("ix_prompt_provider_responses_org_run_at", table_name="prompt_provider_responses")
    op.drop_table("prompt_provider_responses")
    op.drop_index("ix_brand_catalog_org_id", table_name="brand_catalog")
    op.drop_table("brand_catalog")
    op.drop_table("organizations")
