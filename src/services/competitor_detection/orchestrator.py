import logging
import time
from typing import Optional

from services.competitor_detection.blacklist import DEFAULT_BLACKLIST
from services.competitor_detection.candidate_extractor import extract_candidates
from services.competitor_detection.classifier import Classifier
from services.competitor_detection.config import DetectionConfig
from services.competitor_detection.gazetteer import GazetteerCache
from services.competitor_detection.models import ClassificationResult
from services.competitor_detection.ner_fallback import build_ner_resolver
from services.competitor_detection.org_context import OrganizationContextSource
from services.competitor_detection.ranking import rank

logger = logging.getLogger(__name__)


class CompetitorDetector:
    """Runs extraction, classification and ranking for one organization's text."""

    def __init__(
        self,
        cache: Optional[GazetteerCache] = None,
        classifier: Optional[Classifier] = None,
        config: Optional[DetectionConfig] = None,
    ):
        self.config = config or DetectionConfig()
        self.cache = cache or GazetteerCache(config=self.config)
        self.classifier = classifier or Classifier(config=self.config)

    @classmethod
    def from_settings(cls, cache: Optional[GazetteerCache] = None) -> "CompetitorDetector":
        config = DetectionConfig.from_settings()
        classifier = Classifier(DEFAULT_BLACKLIST, build_ner_resolver(config), config)
        return cls(cache=cache or GazetteerCache(config=config), classifier=classifier, config=config)

    async def detect(
        self,
        text: str,
        org_id: str,
        source: OrganizationContextSource,
        use_ner: Optional[bool] = None,
        max_results: Optional[int] = None,
    ) -> ClassificationResult:
        start = time.perf_counter()
        limit = self.config.max_competitors if max_results is None else max_results

        if not text or not text.strip():
            result = ClassificationResult()
        else:
            gazetteer = self.cache.get(org_id, source)
            candidates = extract_candidates(text, self.classifier.blacklist, is_known=gazetteer.knows)
            result = await self.classifier.classify(candidates, gazetteer, text=text, use_ner=use_ner)
            result.competitors = rank(result.competitors, limit)
            result.own_brand_mentions = rank(result.own_brand_mentions, limit)

        result.metadata.processing_time_ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            f"Detection for org {org_id}: {len(result.competitors)} competitors, "
            f"{len(result.own_brand_mentions)} own-brand mentions, "
            f"{len(result.rejected_terms)} rejected "
            f"(gazetteer={result.metadata.gazetteer_matches}, global={result.metadata.global_matches}, "
            f"ner={result.metadata.ner_matches}) in {result.metadata.processing_time_ms}ms"
        )
        return result


_default_detector: Optional[CompetitorDetector] = None


def get_detector() -> CompetitorDetector:
    global _default_detector
    if _default_detector is None:
        _default_detector = CompetitorDetector.from_settings()
    return _default_detector


async def detect_competitors(
    text: str,
    org_id: str,
    source: OrganizationContextSource,
    use_ner: Optional[bool] = None,
    max_results: Optional[int] = None,
) -> ClassificationResult:
    return await get_detector().detect(text, org_id, source, use_ner=use_ner, max_results=max_results)
