"""Shared fixtures for detection and API tests."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool
import sys
from pathlib import Path
import os


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

os.environ.setdefault("ENABLE_NER_FALLBACK", "false")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from api.routers import detection
from models import Base, get_db
from services.competitor_detection import (
    CatalogRow,
    CompetitorDetector,
    DetectionConfig,
    GazetteerStore,
    OrganizationRecord,
    StaticOrganizationContextSource,
)
from services.competitor_detection.orchestrator import get_detector

ACME_ORG_ID = "org-acme"


@pytest.fixture
def acme_source() -> StaticOrganizationContextSource:
    return StaticOrganizationContextSource(
        catalogs={
            ACME_ORG_ID: [
                CatalogRow(name="Acme", variants=("Acme CRM",), is_org_brand=True),
                CatalogRow(name="Nimble", variants=("Nimble CRM",)),
            ]
        },
        organizations={
            ACME_ORG_ID: OrganizationRecord(
                name="Acme",
                domain="https://www.acme.io",
                competitors_seed=("Nutshell",),
            )
        },
    )


@pytest.fixture
def acme_gazetteer(acme_source) -> GazetteerStore:
    store = GazetteerStore(acme_source)
    store.initialize(ACME_ORG_ID)
    return store


@pytest.fixture
def empty_gazetteer() -> GazetteerStore:
    store = GazetteerStore(StaticOrganizationContextSource())
    store.initialize("org-empty")
    return store


@pytest.fixture(scope="function")
def db_engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    connection = db_engine.connect()
    transaction = connection.begin()
    session = Session(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def detector() -> CompetitorDetector:
    return CompetitorDetector(config=DetectionConfig(enable_ner_fallback=False))


@pytest.fixture(scope="function")
def test_app():
    @asynccontextmanager
    async def test_lifespan(app: FastAPI) -> AsyncGenerator:
        yield

    app = FastAPI(
        title="Llumos Test",
        description="Detect competitor and own-brand mentions in AI answers",
        version="0.1.0",
        lifespan=test_lifespan,
    )

    app.include_router(detection.router, prefix="/api/v1/detection", tags=["detection"])

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


@pytest.fixture(scope="function")
def client(db_session: Session, test_app: FastAPI, detector: CompetitorDetector):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    test_app.dependency_overrides[get_db] = override_get_db
    test_app.dependency_overrides[get_detector] = lambda: detector
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()
