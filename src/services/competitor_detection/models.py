"""
Data models for competitor detection.

This module contains the value objects that flow through the detection
pipeline: gazetteer entries, text candidates, classified matches and the
final classification result.
"""

import enum
from dataclasses import asdict, dataclass, field
from typing import List, Optional

from services.competitor_detection.text_utils import normalize_brand_name

NOT_FOUND_POSITION = 1.0


class GazetteerSource(str, enum.Enum):
    CATALOG = "catalog"
    CATALOG_VARIANT = "catalog_variant"
    GLOBAL_LIST = "global_list"
    HISTORICAL = "historical"
    SEED = "seed"


class MatchSource(str, enum.Enum):
    OWN_BRAND = "own_brand"
    CATALOG = "catalog"
    GLOBAL = "global"
    NER = "ner"


@dataclass(frozen=True)
class GazetteerEntry:
    """A known brand name mapped to its canonical spelling."""
    name: str
    source: GazetteerSource
    is_own_brand: bool = False
    normalized_name: str = ""

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("GazetteerEntry.name must not be empty")
        if not self.normalized_name:
            object.__setattr__(self, "normalized_name", normalize_brand_name(self.name))
        if not self.normalized_name:
            raise ValueError(f"GazetteerEntry.name normalizes to nothing: {self.name!r}")


@dataclass
class Candidate:
    """A capitalized span found in a response, before classification."""
    raw_name: str
    mention_count: int = 1
    first_position_ratio: float = NOT_FOUND_POSITION

    def __post_init__(self):
        if not self.raw_name or not self.raw_name.strip():
            raise ValueError("Candidate.raw_name must not be empty")
        if self.mention_count < 1:
            raise ValueError(f"Candidate.mention_count must be >= 1, got {self.mention_count}")
        if not 0.0 <= self.first_position_ratio <= 1.0:
            raise ValueError(
                f"Candidate.first_position_ratio must be within [0, 1], got {self.first_position_ratio}"
            )

    @property
    def normalized_name(self) -> str:
        return normalize_brand_name(self.raw_name)


@dataclass
class BrandMatch:
    """A candidate accepted as an own-brand mention or a competitor."""
    name: str
    mention_count: int
    first_position_ratio: float
    source: MatchSource
    normalized_name: str = ""

    def __post_init__(self):
        if not self.normalized_name:
            self.normalized_name = normalize_brand_name(self.name)

    @classmethod
    def from_candidate(
        cls,
        candidate: Candidate,
        source: MatchSource,
        name: Optional[str] = None,
    ) -> "BrandMatch":
        display = name or candidate.raw_name
        return cls(
            name=display,
            mention_count=candidate.mention_count,
            first_position_ratio=candidate.first_position_ratio,
            source=source,
        )

    def absorb(self, other: "BrandMatch") -> None:
        self.mention_count += other.mention_count
        self.first_position_ratio = min(self.first_position_ratio, other.first_position_ratio)


@dataclass
class DetectionMetadata:
    gazetteer_matches: int = 0
    ner_matches: int = 0
    global_matches: int = 0
    total_candidates: int = 0
    processing_time_ms: int = 0


@dataclass
class ClassificationResult:
    """Final result of classifying one response text."""
    competitors: List[BrandMatch] = field(default_factory=list)
    own_brand_mentions: List[BrandMatch] = field(default_factory=list)
    rejected_terms: List[str] = field(default_factory=list)
    metadata: DetectionMetadata = field(default_factory=DetectionMetadata)

    def competitor_names(self) -> List[str]:
        return [m.name for m in self.competitors]

    def own_brand_names(self) -> List[str]:
        return [m.name for m in self.own_brand_mentions]

    def to_dict(self) -> dict:
        return {
            "competitors": [_match_dict(m) for m in self.competitors],
            "own_brand_mentions": [_match_dict(m) for m in self.own_brand_mentions],
            "rejected_terms": list(self.rejected_terms),
            "metadata": asdict(self.metadata),
        }


def _match_dict(match: BrandMatch) -> dict:
    return {
        "name": match.name,
        "normalized_name": match.normalized_name,
        "mention_count": match.mention_count,
        "first_position_ratio": round(match.first_position_ratio, 4),
        "source": match.source.value,
    }
