"""
Competitor and brand detection for AI response text.

Raw answers from AI assistants are scanned for brand-like terms, which are
then classified as the organization's own brand, a competitor, or noise,
using a per-organization gazetteer, a global list of well-known companies and
an optional NER confirmation step.
"""

from services.competitor_detection.blacklist import (
    DEFAULT_BLACKLIST,
    Blacklist,
    is_blacklisted,
    is_generic_business_term,
    is_spam_phrase,
    is_valid_brand_name,
)
from services.competitor_detection.candidate_extractor import extract_candidates
from services.competitor_detection.classifier import Classifier
from services.competitor_detection.config import DetectionConfig
from services.competitor_detection.gazetteer import (
    DEFAULT_GLOBAL_GAZETTEER,
    GazetteerCache,
    GazetteerStore,
    GlobalGazetteer,
)
from services.competitor_detection.models import (
    BrandMatch,
    Candidate,
    ClassificationResult,
    DetectionMetadata,
    GazetteerEntry,
    GazetteerSource,
    MatchSource,
)
from services.competitor_detection.ner_fallback import (
    NERAuthFailure,
    NERError,
    NERMalformedResponse,
    NERRateLimited,
    NERTimeout,
    NERUnavailable,
    NullNERResolver,
    OpenAINERResolver,
    resolve_via_ner,
)
from services.competitor_detection.org_context import (
    CatalogRow,
    HistoricalRow,
    OrganizationRecord,
    SQLOrganizationContextSource,
    StaticOrganizationContextSource,
)
from services.competitor_detection.orchestrator import CompetitorDetector, detect_competitors
from services.competitor_detection.ranking import rank

__all__ = [
    # Data models
    "BrandMatch",
    "Candidate",
    "ClassificationResult",
    "DetectionMetadata",
    "GazetteerEntry",
    "GazetteerSource",
    "MatchSource",

    # Pipeline
    "CompetitorDetector",
    "detect_competitors",
    "extract_candidates",
    "Classifier",
    "rank",
    "resolve_via_ner",

    # Gazetteer
    "GazetteerCache",
    "GazetteerStore",
    "GlobalGazetteer",
    "DEFAULT_GLOBAL_GAZETTEER",
    "CatalogRow",
    "HistoricalRow",
    "OrganizationRecord",
    "SQLOrganizationContextSource",
    "StaticOrganizationContextSource",

    # Filtering
    "Blacklist",
    "DEFAULT_BLACKLIST",
    "is_blacklisted",
    "is_generic_business_term",
    "is_spam_phrase",
    "is_valid_brand_name",

    # NER
    "NERError",
    "NERTimeout",
    "NERAuthFailure",
    "NERRateLimited",
    "NERMalformedResponse",
    "NERUnavailable",
    "NullNERResolver",
    "OpenAINERResolver",

    # Configuration
    "DetectionConfig",
]
