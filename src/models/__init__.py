from models.database import Base, SessionLocal, engine, get_db, init_db
from models.domain import BrandCatalogEntry, CompetitorExclusion, Organization, PromptProviderResponse

__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "init_db",
    "Organization",
    "BrandCatalogEntry",
    "PromptProviderResponse",
    "CompetitorExclusion",
]
