import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Organization(Base):
    __tablename__ = "organizations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    domain: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    # {"competitorsSeed": ["Pipedrive", ...]}
    metadata_json: Mapped[Optional[dict]] = mapped_column("metadata", JSON(none_as_null=True), nullable=True, default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), nullable=False)

    catalog_entries: Mapped[List["BrandCatalogEntry"]] = relationship(
        "BrandCatalogEntry", back_populates="organization", cascade="all, delete-orphan"
    )
    responses: Mapped[List["PromptProviderResponse"]] = relationship(
        "PromptProviderResponse", back_populates="organization", cascade="all, delete-orphan"
    )
    competitor_exclusions: Mapped[List["CompetitorExclusion"]] = relationship(
        "CompetitorExclusion", back_populates="organization", cascade="all, delete-orphan"
    )


class BrandCatalogEntry(Base):
    __tablename__ = "brand_catalog"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    org_id: Mapped[str] = mapped_column(ForeignKey("organizations.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    variants_json: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_org_brand: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), nullable=False)

    organization: Mapped["Organization"] = relationship(Organization, back_populates="catalog_entries")


class PromptProviderResponse(Base):
    __tablename__ = "prompt_provider_responses"
    __table_args__ = (Index("ix_prompt_provider_responses_org_run_at", "org_id", "run_at"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    org_id: Mapped[str] = mapped_column(ForeignKey("organizations.id"), nullable=False)
    provider: Mapped[str] = mapped_column(String(50), nullable=False, default="openai")
    raw_ai_response: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    competitors_json: Mapped[Optional[list]] = mapped_column(JSON(none_as_null=True), nullable=True)
    brands_json: Mapped[Optional[list]] = mapped_column(JSON(none_as_null=True), nullable=True)
    # naive UTC
    run_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)

    organization: Mapped["Organization"] = relationship(Organization, back_populates="responses")


class CompetitorExclusion(Base):
    """A name the organization never wants reported as a competitor."""

    __tablename__ = "org_competitor_exclusions"
    __table_args__ = (
        UniqueConstraint("org_id", "normalized_name", name="uq_org_competitor_exclusions_org_name"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    org_id: Mapped[str] = mapped_column(ForeignKey("organizations.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    normalized_name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)

    organization: Mapped["Organization"] = relationship(Organization, back_populates="competitor_exclusions")
