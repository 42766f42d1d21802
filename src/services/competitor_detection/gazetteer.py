"""
Gazetteer store for competitor detection.

An organization's gazetteer maps normalized brand names to canonical entries,
split into the organization's own brand family and known competitors. It is
built once per organization from the catalog, the organization record, the
seed list and recent history, then read-only while texts are classified.
Names the organization has excluded never become competitor entries.
The global gazetteer is a static list of well-known SaaS companies consulted
after the account-level lookups.
"""

import logging
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from constants import GLOBAL_COMPETITORS, PRODUCT_FAMILY_SUFFIXES
from services.competitor_detection.config import DetectionConfig
from services.competitor_detection.models import GazetteerEntry, GazetteerSource
from services.competitor_detection.org_context import OrganizationContextSource
from services.competitor_detection.text_utils import (
    brand_from_domain,
    name_words,
    normalize_brand_name,
)

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class GlobalGazetteer:
    """Immutable lookup of well-known company names and aliases."""

    def __init__(self, entries: Mapping[str, GazetteerEntry]):
        self._entries = dict(entries)

    @classmethod
    def from_competitors(cls, competitors: Iterable[dict] = GLOBAL_COMPETITORS) -> "GlobalGazetteer":
        entries: Dict[str, GazetteerEntry] = {}
        for competitor in competitors:
            entry = GazetteerEntry(name=competitor["name"], source=GazetteerSource.GLOBAL_LIST)
            for key in [entry.normalized_name, *competitor.get("aliases", [])]:
                normalized = normalize_brand_name(key)
                if normalized and normalized not in entries:
                    entries[normalized] = entry
        return cls(entries)

    def lookup(self, name: str) -> Optional[GazetteerEntry]:
        return self._entries.get(normalize_brand_name(name))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        return self.lookup(name) is not None


DEFAULT_GLOBAL_GAZETTEER = GlobalGazetteer.from_competitors()


class GazetteerStore:
    def __init__(
        self,
        source: OrganizationContextSource,
        global_gazetteer: GlobalGazetteer = DEFAULT_GLOBAL_GAZETTEER,
        config: Optional[DetectionConfig] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._source = source
        self._global = global_gazetteer
        self._config = config or DetectionConfig()
        self._clock = clock
        self._entries: Dict[str, GazetteerEntry] = {}
        self._own_alias_words: List[Tuple[str, ...]] = []
        self._excluded: Set[str] = set()
        self.org_id: Optional[str] = None

    @property
    def is_initialized(self) -> bool:
        return self.org_id is not None

    def initialize(self, org_id: str) -> None:
        if self.org_id == org_id:
            return
        self._entries = {}
        self._own_alias_words = []
        self._excluded = set()

        self._load_exclusions(org_id)
        self._load_catalog(org_id)
        self._load_organization(org_id)
        self._expand_own_brand_aliases()
        self._load_history(org_id)
        self.org_id = org_id

        own = sum(1 for e in self._entries.values() if e.is_own_brand)
        logger.info(
            f"Gazetteer initialized for org {org_id}: "
            f"{len(self._entries) - own} competitor entries, {own} own-brand aliases, "
            f"{len(self._excluded)} exclusions"
        )

    def lookup_account(self, normalized_name: str) -> Optional[GazetteerEntry]:
        return self._entries.get(normalize_brand_name(normalized_name))

    def lookup_global(self, name: str) -> Optional[GazetteerEntry]:
        return self._global.lookup(name)

    def is_own_brand(self, normalized_name: str) -> bool:
        """Exact own-brand alias, or a phrase containing every word of one."""
        key = normalize_brand_name(normalized_name)
        entry = self._entries.get(key)
        if entry is not None:
            return entry.is_own_brand
        words = set(name_words(key))
        if not words:
            return False
        return any(
            len(alias) <= len(words) and words.issuperset(alias)
            for alias in self._own_alias_words
        )

    def is_excluded(self, name: str) -> bool:
        return normalize_brand_name(name) in self._excluded

    def knows(self, name: str) -> bool:
        """Whether ``name`` is an account alias or a global-list name."""
        return self.lookup_account(name) is not None or self.lookup_global(name) is not None

    def own_brand_names(self) -> List[str]:
        return list(dict.fromkeys(e.name for e in self._entries.values() if e.is_own_brand))

    def __len__(self) -> int:
        return len(self._entries)

    def _add(
        self,
        alias: str,
        source: GazetteerSource,
        is_own_brand: bool,
        canonical: Optional[str] = None,
    ) -> bool:
        normalized = normalize_brand_name(alias or "")
        if not normalized or normalized in self._entries:
            return False
        if not is_own_brand and (normalized in self._excluded or self.is_excluded(canonical or "")):
            logger.debug(f"Skipping excluded competitor alias {alias!r}")
            return False
        self._entries[normalized] = GazetteerEntry(
            name=(canonical or alias).strip(),
            source=source,
            is_own_brand=is_own_brand,
            normalized_name=normalized,
        )
        return True

    def _load_exclusions(self, org_id: str) -> None:
        try:
            names = self._source.load_exclusions(org_id)
        except Exception as e:
            logger.error(f"Failed to load competitor exclusions for org {org_id}: {e}")
            return
        self._excluded = {key for key in (normalize_brand_name(n) for n in names) if key}

    def _load_catalog(self, org_id: str) -> None:
        try:
            rows = self._source.load_catalog(org_id)
        except Exception as e:
            logger.error(f"Failed to load brand catalog for org {org_id}: {e}")
            return
        if not rows:
            logger.warning(f"No brand catalog for org {org_id}; continuing with global gazetteer only")
        for row in rows:
            self._add(row.name, GazetteerSource.CATALOG, row.is_org_brand)
            for variant in row.variants:
                self._add(variant, GazetteerSource.CATALOG_VARIANT, row.is_org_brand, canonical=row.name)

    def _load_organization(self, org_id: str) -> None:
        try:
            org = self._source.load_organization(org_id)
        except Exception as e:
            logger.error(f"Failed to load organization {org_id}: {e}")
            return
        if org is None:
            logger.warning(f"Organization {org_id} not found; skipping name and seed competitors")
            return

        if org.name:
            self._add(org.name, GazetteerSource.CATALOG_VARIANT, True)
        domain_brand = brand_from_domain(org.domain)
        if domain_brand:
            self._add(domain_brand, GazetteerSource.CATALOG_VARIANT, True, canonical=org.name or None)

        for competitor in org.competitors_seed:
            self._add(competitor, GazetteerSource.SEED, False)

    def _load_history(self, org_id: str) -> None:
        since = self._clock() - timedelta(days=self._config.history_window_days)
        try:
            rows = self._source.load_history(org_id, since, self._config.history_row_limit)
        except Exception as e:
            logger.error(f"Failed to load response history for org {org_id}: {e}")
            return

        counts: Counter = Counter()
        spelling: Dict[str, str] = {}
        for row in rows:
            for name in row.competitors:
                normalized = normalize_brand_name(name)
                if not normalized or self.is_own_brand(normalized):
                    continue
                counts[normalized] += 1
                spelling.setdefault(normalized, name.strip())

        for normalized, count in counts.most_common(self._config.history_top_n):
            if count < self._config.history_min_mentions:
                break
            self._add(spelling[normalized], GazetteerSource.HISTORICAL, False)

    def _expand_own_brand_aliases(self) -> None:
        bases = [e for e in list(self._entries.values()) if e.is_own_brand]
        for entry in bases:
            words = tuple(name_words(entry.normalized_name))
            if words and words not in self._own_alias_words:
                self._own_alias_words.append(words)
            if len(words) > 1:
                self._add("".join(words), entry.source, True, canonical=entry.name)
                self._add("-".join(words), entry.source, True, canonical=entry.name)
            for suffix in PRODUCT_FAMILY_SUFFIXES:
                self._add(f"{entry.normalized_name} {suffix}", entry.source, True, canonical=entry.name)


class GazetteerCache:
    """One gazetteer per organization, populated on first use."""

    def __init__(
        self,
        global_gazetteer: GlobalGazetteer = DEFAULT_GLOBAL_GAZETTEER,
        config: Optional[DetectionConfig] = None,
    ):
        self._global = global_gazetteer
        self._config = config or DetectionConfig()
        self._stores: Dict[str, GazetteerStore] = {}

    def get(self, org_id: str, source: OrganizationContextSource) -> GazetteerStore:
        store = self._stores.get(org_id)
        if store is not None:
            return store
        store = GazetteerStore(source, self._global, self._config)
        store.initialize(org_id)
        return self._stores.setdefault(org_id, store)

    def invalidate(self, org_id: str) -> bool:
        return self._stores.pop(org_id, None) is not None

    def __contains__(self, org_id: str) -> bool:
        return org_id in self._stores
