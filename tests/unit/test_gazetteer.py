"""Tests for the gazetteer store, global gazetteer and per-org cache."""

import logging
from datetime import datetime, timedelta
from unittest.mock import Mock

import pytest

from services.competitor_detection.config import DetectionConfig
from services.competitor_detection.gazetteer import (
    DEFAULT_GLOBAL_GAZETTEER,
    GazetteerCache,
    GazetteerStore,
    GlobalGazetteer,
)
from services.competitor_detection.models import GazetteerSource
from services.competitor_detection.org_context import (
    CatalogRow,
    HistoricalRow,
    OrganizationRecord,
    StaticOrganizationContextSource,
)

NOW = datetime(2026, 10, 1, 12, 0, 0)
ORG = "org-1"


def build_store(source, config=None) -> GazetteerStore:
    store = GazetteerStore(source, config=config, clock=lambda: NOW)
    store.initialize(ORG)
    return store


def history(*names, days_ago=1):
    return HistoricalRow(competitors=tuple(names), run_at=NOW - timedelta(days=days_ago))


class TestAccountLookup:
    def test_catalog_competitor(self, acme_gazetteer):
        entry = acme_gazetteer.lookup_account("nimble")

        assert entry.name == "Nimble"
        assert entry.source == GazetteerSource.CATALOG
        assert entry.is_own_brand is False

    def test_catalog_variant_maps_to_canonical_name(self, acme_gazetteer):
        entry = acme_gazetteer.lookup_account("Nimble CRM")

        assert entry.name == "Nimble"
        assert entry.source == GazetteerSource.CATALOG_VARIANT

    def test_seed_competitor(self, acme_gazetteer):
        entry = acme_gazetteer.lookup_account("nutshell")

        assert entry.source == GazetteerSource.SEED
        assert entry.is_own_brand is False

    def test_unknown_name(self, acme_gazetteer):
        assert acme_gazetteer.lookup_account("salesforce") is None

    def test_catalog_wins_over_seed(self):
        source = StaticOrganizationContextSource(
            catalogs={ORG: [CatalogRow(name="Nutshell")]},
            organizations={ORG: OrganizationRecord(name="Acme", competitors_seed=("Nutshell",))},
        )
        assert build_store(source).lookup_account("nutshell").source == GazetteerSource.CATALOG


class TestOwnBrand:
    def test_exact_alias(self, acme_gazetteer):
        assert acme_gazetteer.is_own_brand("acme")
        assert acme_gazetteer.is_own_brand("acme crm")

    def test_product_family_suffix_alias(self, acme_gazetteer):
        entry = acme_gazetteer.lookup_account("acme platform")

        assert entry.is_own_brand
        assert entry.name == "Acme"

    def test_containment_of_own_alias_words(self, acme_gazetteer):
        assert acme_gazetteer.is_own_brand("acme crm platform")
        assert acme_gazetteer.is_own_brand("platform acme")

    def test_competitors_are_not_own_brand(self, acme_gazetteer):
        assert not acme_gazetteer.is_own_brand("nimble")
        assert not acme_gazetteer.is_own_brand("")

    def test_domain_guess_is_own_brand_alias(self):
        source = StaticOrganizationContextSource(
            organizations={ORG: OrganizationRecord(name="Initech", domain="initrode.com")},
        )
        store = build_store(source)

        assert store.is_own_brand("initrode")
        assert store.lookup_account("initrode").name == "Initech"

    def test_multi_word_brand_gets_joined_spellings(self):
        source = StaticOrganizationContextSource(
            organizations={ORG: OrganizationRecord(name="Vandelay Industries")},
        )
        store = build_store(source)

        assert store.is_own_brand("vandelayindustries")
        assert store.is_own_brand("vandelay-industries")
        assert store.own_brand_names() == ["Vandelay Industries"]


class TestHistoricalCompetitors:
    def test_frequent_recent_names_are_added(self):
        rows = [history("Pipedrive", "Copper") for _ in range(2)] + [history("Pipedrive")]
        source = StaticOrganizationContextSource(history={ORG: rows})
        store = build_store(source)

        assert store.lookup_account("pipedrive").source == GazetteerSource.HISTORICAL
        assert store.lookup_account("copper") is None

    def test_rows_outside_window_are_ignored(self):
        rows = [history("Freshsales", days_ago=120) for _ in range(5)]
        source = StaticOrganizationContextSource(history={ORG: rows})

        assert build_store(source).lookup_account("freshsales") is None

    def test_own_brand_is_never_historical_competitor(self):
        rows = [history("Acme", "Pipedrive") for _ in range(3)]
        source = StaticOrganizationContextSource(
            catalogs={ORG: [CatalogRow(name="Acme", is_org_brand=True)]},
            history={ORG: rows},
        )
        store = build_store(source)

        assert store.lookup_account("acme").is_own_brand
        assert store.lookup_account("acme").source == GazetteerSource.CATALOG

    def test_top_n_limits_historical_entries(self):
        rows = [history("Pipedrive", "Copper")] + [history("Pipedrive")]
        source = StaticOrganizationContextSource(history={ORG: rows})
        config = DetectionConfig(history_min_mentions=1, history_top_n=1)
        store = build_store(source, config)

        assert store.lookup_account("pipedrive") is not None
        assert store.lookup_account("copper") is None


class TestInitialization:
    def test_initialize_is_idempotent(self, acme_source):
        source = Mock(wraps=acme_source)
        store = GazetteerStore(source)

        store.initialize("org-acme")
        store.initialize("org-acme")

        assert source.load_catalog.call_count == 1
        assert store.is_initialized

    def test_missing_context_gives_empty_gazetteer(self, caplog):
        with caplog.at_level(logging.WARNING):
            store = build_store(StaticOrganizationContextSource())

        assert len(store) == 0
        assert store.is_initialized
        assert "not found" in caplog.text

    def test_source_failure_keeps_other_data(self, acme_source, caplog):
        class BrokenCatalogSource(StaticOrganizationContextSource):
            def load_catalog(self, org_id):
                raise RuntimeError("database is locked")

        source = BrokenCatalogSource(organizations=acme_source.organizations)
        with caplog.at_level(logging.ERROR):
            store = GazetteerStore(source)
            store.initialize("org-acme")

        assert "database is locked" in caplog.text
        assert store.is_own_brand("acme")
        assert store.lookup_account("nutshell") is not None
        assert store.lookup_account("nimble") is None


class TestGlobalGazetteer:
    def test_alias_lookup_returns_canonical(self):
        entry = DEFAULT_GLOBAL_GAZETTEER.lookup("SFDC")

        assert entry.name == "Salesforce"
        assert entry.source == GazetteerSource.GLOBAL_LIST

    def test_store_delegates_global_lookup(self, acme_gazetteer):
        assert acme_gazetteer.lookup_global("zoho crm").name == "Zoho CRM"
        assert acme_gazetteer.lookup_global("nimble") is None

    def test_custom_list(self):
        gazetteer = GlobalGazetteer.from_competitors(
            [{"name": "Globex", "aliases": ["globex corp"]}]
        )

        assert len(gazetteer) == 2
        assert "Globex Corp" in gazetteer
        assert "Salesforce" not in gazetteer


class TestGazetteerCache:
    def test_get_reuses_store(self, acme_source):
        cache = GazetteerCache()

        first = cache.get("org-acme", acme_source)
        second = cache.get("org-acme", acme_source)

        assert first is second
        assert "org-acme" in cache

    def test_invalidate(self, acme_source):
        cache = GazetteerCache()
        first = cache.get("org-acme", acme_source)

        assert cache.invalidate("org-acme") is True
        assert cache.invalidate("org-acme") is False
        assert cache.get("org-acme", acme_source) is not first

    @pytest.mark.parametrize("org_id", ["org-a", "org-b"])
    def test_stores_are_per_org(self, acme_source, org_id):
        cache = GazetteerCache()
        store = cache.get(org_id, acme_source)

        assert store.org_id == org_id
        assert len(store) == 0


class TestExclusions:
    def source(self, exclusions):
        return StaticOrganizationContextSource(
            catalogs={
                ORG: [
                    CatalogRow(name="Acme", is_org_brand=True),
                    CatalogRow(name="Nimble", variants=("Nimble CRM",)),
                ]
            },
            organizations={ORG: OrganizationRecord(name="Acme", competitors_seed=("Nutshell", "Copper"))},
            history={ORG: [history("Zentro", "Pipedrive")] * 3},
            exclusions={ORG: exclusions},
        )

    def test_excluded_names_never_become_competitors(self):
        store = build_store(self.source(["Nutshell", "nimble", "Zentro"]))

        assert store.lookup_account("nutshell") is None
        assert store.lookup_account("nimble") is None
        assert store.lookup_account("nimble crm") is None
        assert store.lookup_account("zentro") is None
        assert store.lookup_account("copper").name == "Copper"
        assert store.lookup_account("pipedrive") is not None
        assert store.is_excluded("NUTSHELL")
        assert not store.is_excluded("Copper")

    def test_exclusion_does_not_touch_own_brand(self):
        store = build_store(self.source(["Acme"]))

        assert store.is_own_brand("acme")
        assert store.own_brand_names() == ["Acme"]

    def test_exclusion_failure_is_logged(self, caplog):
        class BrokenExclusions(StaticOrganizationContextSource):
            def load_exclusions(self, org_id):
                raise RuntimeError("no such table")

        with caplog.at_level(logging.ERROR):
            store = build_store(BrokenExclusions(organizations={ORG: OrganizationRecord(name="Acme")}))

        assert "no such table" in caplog.text
        assert store.is_own_brand("acme")


class TestKnownNames:
    def test_account_and_global_names_are_known(self, acme_gazetteer):
        assert acme_gazetteer.knows("Nimble CRM")
        assert acme_gazetteer.knows("Acme")
        assert acme_gazetteer.knows("Sprout Social")
        assert acme_gazetteer.knows("monday.com")
        assert not acme_gazetteer.knows("Sprout")
        assert not acme_gazetteer.knows("Monday")
