"""
Candidate classification.

Each candidate is checked, in order, against the blacklist, the organization's
own-brand aliases, its competitor exclusions, the account gazetteer and the
global gazetteer. Whatever is left unresolved is offered to the NER fallback
in one batch; candidates it does not confirm are rejected.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from services.competitor_detection.blacklist import DEFAULT_BLACKLIST, Blacklist
from services.competitor_detection.config import DetectionConfig
from services.competitor_detection.gazetteer import GazetteerStore
from services.competitor_detection.models import (
    BrandMatch,
    Candidate,
    ClassificationResult,
    DetectionMetadata,
    MatchSource,
)
from services.competitor_detection.ner_fallback import (
    NEREntityResolver,
    NullNERResolver,
    resolve_via_ner,
)
from services.competitor_detection.text_utils import normalize_brand_name

logger = logging.getLogger(__name__)


@dataclass
class _Accumulator:
    competitors: Dict[str, BrandMatch] = field(default_factory=dict)
    own_brand: Dict[str, BrandMatch] = field(default_factory=dict)
    rejected: List[str] = field(default_factory=list)
    unresolved: List[Candidate] = field(default_factory=list)
    metadata: DetectionMetadata = field(default_factory=DetectionMetadata)

    def add_competitor(self, match: BrandMatch) -> None:
        existing = self.competitors.get(match.normalized_name)
        if existing is None:
            self.competitors[match.normalized_name] = match
        else:
            existing.absorb(match)

    def add_own_brand(self, match: BrandMatch) -> None:
        existing = self.own_brand.get(match.normalized_name)
        if existing is None:
            self.own_brand[match.normalized_name] = match
        else:
            existing.absorb(match)


class Classifier:
    def __init__(
        self,
        blacklist: Blacklist = DEFAULT_BLACKLIST,
        ner_resolver: Optional[NEREntityResolver] = None,
        config: Optional[DetectionConfig] = None,
    ):
        self.blacklist = blacklist
        self.ner_resolver = ner_resolver or NullNERResolver()
        self.config = config or DetectionConfig()

    async def classify(
        self,
        candidates: Sequence[Candidate],
        gazetteer: GazetteerStore,
        text: str = "",
        use_ner: Optional[bool] = None,
    ) -> ClassificationResult:
        acc = _Accumulator()
        acc.metadata.total_candidates = len(candidates)

        for candidate in candidates:
            try:
                self._classify_candidate(candidate, gazetteer, acc)
            except ValueError as e:
                logger.warning(f"Skipping candidate {candidate.raw_name!r}: {e}")
                acc.rejected.append(candidate.raw_name)

        if acc.unresolved:
            await self._resolve_unresolved(acc, text, use_ner)

        return _build_result(acc)

    def _classify_candidate(self, candidate: Candidate, gazetteer: GazetteerStore, acc: _Accumulator) -> None:
        reason = self.blacklist.rejection_reason(candidate.raw_name)
        if reason:
            logger.debug(f"Rejected {candidate.raw_name!r}: {reason}")
            acc.rejected.append(candidate.raw_name)
            return

        normalized = candidate.normalized_name
        if gazetteer.is_own_brand(normalized):
            acc.add_own_brand(BrandMatch.from_candidate(candidate, MatchSource.OWN_BRAND))
            return

        if gazetteer.is_excluded(normalized):
            logger.debug(f"Rejected {candidate.raw_name!r}: excluded by organization")
            acc.rejected.append(candidate.raw_name)
            return

        entry = gazetteer.lookup_account(normalized)
        if entry is not None and not entry.is_own_brand:
            acc.add_competitor(BrandMatch.from_candidate(candidate, MatchSource.CATALOG, name=entry.name))
            acc.metadata.gazetteer_matches += 1
            return

        entry = gazetteer.lookup_global(normalized)
        if entry is not None:
            if gazetteer.is_own_brand(entry.normalized_name):
                acc.add_own_brand(BrandMatch.from_candidate(candidate, MatchSource.OWN_BRAND))
            elif gazetteer.is_excluded(entry.name):
                logger.debug(f"Rejected {candidate.raw_name!r}: {entry.name!r} excluded by organization")
                acc.rejected.append(candidate.raw_name)
            else:
                acc.add_competitor(BrandMatch.from_candidate(candidate, MatchSource.GLOBAL, name=entry.name))
                acc.metadata.global_matches += 1
            return

        acc.unresolved.append(candidate)

    async def _resolve_unresolved(self, acc: _Accumulator, text: str, use_ner: Optional[bool]) -> None:
        enabled = self.config.enable_ner_fallback if use_ner is None else use_ner
        confirmed: List[Candidate] = []
        if enabled:
            confirmed = await resolve_via_ner(text, acc.unresolved, self.ner_resolver, self.config)

        confirmed_keys = {c.normalized_name for c in confirmed}
        for candidate in acc.unresolved:
            if candidate.normalized_name in confirmed_keys:
                acc.add_competitor(BrandMatch.from_candidate(candidate, MatchSource.NER))
                acc.metadata.ner_matches += 1
            else:
                acc.rejected.append(candidate.raw_name)


def _build_result(acc: _Accumulator) -> ClassificationResult:
    own_keys = set(acc.own_brand)
    competitors = []
    for key, match in acc.competitors.items():
        if key in own_keys:
            logger.warning(f"Competitor {match.name!r} is also an own-brand alias, keeping it as own brand")
            continue
        competitors.append(match)

    accepted = own_keys | {m.normalized_name for m in competitors}
    accepted |= {normalize_brand_name(c.name) for c in competitors}
    rejected: List[str] = []
    seen = set()
    for term in acc.rejected:
        key = normalize_brand_name(term)
        if key in accepted or key in seen:
            continue
        seen.add(key)
        rejected.append(term)

    return ClassificationResult(
        competitors=competitors,
        own_brand_mentions=list(acc.own_brand.values()),
        rejected_terms=rejected,
        metadata=acc.metadata,
    )
