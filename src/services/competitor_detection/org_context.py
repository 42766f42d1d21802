"""
Organization context sources.

The gazetteer is bootstrapped from four collaborator tables: the brand
catalog, the organization record, past AI responses and the competitor
exclusions an organization has recorded. Sources hide where those rows come
from; the SQL source reads the SQLAlchemy models, the static source serves
fixed rows for tests and scripts.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional, Protocol, Tuple

from sqlalchemy.orm import Session

from models import BrandCatalogEntry, CompetitorExclusion, Organization, PromptProviderResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogRow:
    name: str
    variants: Tuple[str, ...] = ()
    is_org_brand: bool = False


@dataclass(frozen=True)
class OrganizationRecord:
    name: str = ""
    domain: Optional[str] = None
    competitors_seed: Tuple[str, ...] = ()


@dataclass(frozen=True)
class HistoricalRow:
    competitors: Tuple[str, ...]
    run_at: Optional[datetime] = None


class OrganizationContextSource(Protocol):
    def load_catalog(self, org_id: str) -> List[CatalogRow]:
        ...

    def load_organization(self, org_id: str) -> Optional[OrganizationRecord]:
        ...

    def load_history(self, org_id: str, since: datetime, limit: int) -> List[HistoricalRow]:
        ...

    def load_exclusions(self, org_id: str) -> List[str]:
        ...


@dataclass
class StaticOrganizationContextSource:
    catalogs: Dict[str, List[CatalogRow]] = field(default_factory=dict)
    organizations: Dict[str, OrganizationRecord] = field(default_factory=dict)
    history: Dict[str, List[HistoricalRow]] = field(default_factory=dict)
    exclusions: Dict[str, List[str]] = field(default_factory=dict)

    def load_catalog(self, org_id: str) -> List[CatalogRow]:
        return list(self.catalogs.get(org_id, []))

    def load_organization(self, org_id: str) -> Optional[OrganizationRecord]:
        return self.organizations.get(org_id)

    def load_history(self, org_id: str, since: datetime, limit: int) -> List[HistoricalRow]:
        rows = [r for r in self.history.get(org_id, []) if r.run_at is None or r.run_at >= since]
        return rows[:limit]

    def load_exclusions(self, org_id: str) -> List[str]:
        return list(self.exclusions.get(org_id, []))


class SQLOrganizationContextSource:
    """Reads organization context from the collaborator tables."""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    @classmethod
    def for_session(cls, db: Session) -> "SQLOrganizationContextSource":
        return cls(lambda: db)

    def load_catalog(self, org_id: str) -> List[CatalogRow]:
        db = self._session_factory()
        rows = db.query(BrandCatalogEntry).filter(BrandCatalogEntry.org_id == org_id).all()
        return [
            CatalogRow(
                name=row.name,
                variants=_string_tuple(row.variants_json),
                is_org_brand=bool(row.is_org_brand),
            )
            for row in rows
        ]

    def load_organization(self, org_id: str) -> Optional[OrganizationRecord]:
        db = self._session_factory()
        org = db.query(Organization).filter(Organization.id == org_id).first()
        if not org:
            return None
        metadata = org.metadata_json if isinstance(org.metadata_json, dict) else {}
        return OrganizationRecord(
            name=org.name or "",
            domain=org.domain,
            competitors_seed=_string_tuple(metadata.get("competitorsSeed")),
        )

    def load_history(self, org_id: str, since: datetime, limit: int) -> List[HistoricalRow]:
        db = self._session_factory()
        rows = (
            db.query(PromptProviderResponse.competitors_json, PromptProviderResponse.run_at)
            .filter(
                PromptProviderResponse.org_id == org_id,
                PromptProviderResponse.competitors_json.isnot(None),
                PromptProviderResponse.run_at >= since,
            )
            .order_by(PromptProviderResponse.run_at.desc())
            .limit(limit)
            .all()
        )
        return [HistoricalRow(competitors=_string_tuple(c), run_at=run_at) for c, run_at in rows]

    def load_exclusions(self, org_id: str) -> List[str]:
        db = self._session_factory()
        rows = db.query(CompetitorExclusion.name).filter(CompetitorExclusion.org_id == org_id).all()
        return [name for (name,) in rows]


def _string_tuple(value) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(_entry_name(v) for v in value if _entry_name(v))


def _entry_name(value) -> str:
    # competitors_json rows hold either plain names or serialized matches
    if isinstance(value, dict):
        value = value.get("name", "")
    return value.strip() if isinstance(value, str) else ""
