"""Integration tests for the SQLAlchemy-backed organization context."""

from datetime import datetime, timedelta

from models import BrandCatalogEntry, CompetitorExclusion, Organization, PromptProviderResponse
from services.competitor_detection import GazetteerSource, GazetteerStore, SQLOrganizationContextSource

ORG_ID = "org-sql"
NOW = datetime(2026, 10, 1, 12, 0, 0)


def add_response(db_session, competitors, days_ago=1):
    db_session.add(
        PromptProviderResponse(
            org_id=ORG_ID,
            raw_ai_response="...",
            competitors_json=competitors,
            run_at=NOW - timedelta(days=days_ago),
        )
    )


def seed(db_session, metadata=None):
    db_session.add(Organization(id=ORG_ID, name="Acme", domain="acme.io", metadata_json=metadata))
    db_session.add(BrandCatalogEntry(org_id=ORG_ID, name="Nimble", variants_json=["Nimble CRM", ""]))
    db_session.commit()


def test_load_catalog(db_session):
    seed(db_session)
    rows = SQLOrganizationContextSource.for_session(db_session).load_catalog(ORG_ID)

    assert len(rows) == 1
    assert rows[0].name == "Nimble"
    assert rows[0].variants == ("Nimble CRM",)
    assert rows[0].is_org_brand is False


def test_load_organization(db_session):
    seed(db_session, metadata={"competitorsSeed": ["Nutshell", {"name": "Copper"}]})
    org = SQLOrganizationContextSource.for_session(db_session).load_organization(ORG_ID)

    assert org.name == "Acme"
    assert org.domain == "acme.io"
    assert org.competitors_seed == ("Nutshell", "Copper")


def test_organization_without_metadata(db_session):
    seed(db_session, metadata=None)
    source = SQLOrganizationContextSource.for_session(db_session)

    assert source.load_organization(ORG_ID).competitors_seed == ()
    assert source.load_organization("missing") is None


def test_load_history_window_and_limit(db_session):
    seed(db_session)
    add_response(db_session, ["Pipedrive"], days_ago=1)
    add_response(db_session, [{"name": "Copper"}], days_ago=2)
    add_response(db_session, None, days_ago=3)
    add_response(db_session, ["Freshsales"], days_ago=200)
    db_session.commit()
    source = SQLOrganizationContextSource.for_session(db_session)

    rows = source.load_history(ORG_ID, NOW - timedelta(days=90), limit=10)
    assert [r.competitors for r in rows] == [("Pipedrive",), ("Copper",)]

    limited = source.load_history(ORG_ID, NOW - timedelta(days=90), limit=1)
    assert [r.competitors for r in limited] == [("Pipedrive",)]


def test_gazetteer_from_database(db_session):
    seed(db_session, metadata={"competitorsSeed": ["Nutshell"]})
    for _ in range(3):
        add_response(db_session, ["Pipedrive", "Acme"])
    db_session.commit()

    store = GazetteerStore(SQLOrganizationContextSource.for_session(db_session), clock=lambda: NOW)
    store.initialize(ORG_ID)

    assert store.is_own_brand("acme")
    assert store.lookup_account("nimble crm").name == "Nimble"
    assert store.lookup_account("nutshell").source == GazetteerSource.SEED
    assert store.lookup_account("pipedrive").source == GazetteerSource.HISTORICAL


def test_load_exclusions(db_session):
    seed(db_session, metadata={"competitorsSeed": ["Nutshell", "Copper"]})
    db_session.add(CompetitorExclusion(org_id=ORG_ID, name="Nutshell", normalized_name="nutshell"))
    db_session.commit()
    source = SQLOrganizationContextSource.for_session(db_session)

    assert source.load_exclusions(ORG_ID) == ["Nutshell"]
    assert source.load_exclusions("missing") == []

    store = GazetteerStore(source, clock=lambda: NOW)
    store.initialize(ORG_ID)
    assert store.lookup_account("nutshell") is None
    assert store.lookup_account("copper").source == GazetteerSource.SEED
