"""
Candidate extraction from AI response text.

Three independent passes scan the whole text for spans that look like brand
names: runs of capitalized words, PascalCase tokens and bare domains. Hits are
merged by normalized name; a mention is a distinct start offset, so one span
found by two passes counts once.

When an ``is_known`` callback is given (normally the organization's gazetteer),
spans matching a known name are kept whole: a capitalized run keeps edge
stopwords that belong to a known name ("Sprout Social", "The Home Depot") and a
domain whose full text is a known alias ("Monday.com") is yielded as written.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Set, Tuple

from constants import CAPITALIZED_RUN_PATTERN, DOMAIN_PATTERN, PASCAL_CASE_PATTERN
from services.competitor_detection.blacklist import DEFAULT_BLACKLIST, Blacklist
from services.competitor_detection.models import Candidate
from services.competitor_detection.text_utils import normalize_brand_name

logger = logging.getLogger(__name__)

_WORD = re.compile(r"\S+")

Hit = Tuple[str, int]
KnownName = Callable[[str], bool]


@dataclass
class _Occurrences:
    raw_name: str
    first_offset: int
    offsets: Set[int] = field(default_factory=set)


def extract_candidates(
    text: str,
    blacklist: Blacklist = DEFAULT_BLACKLIST,
    is_known: Optional[KnownName] = None,
) -> List[Candidate]:
    """Return brand-like candidates ordered by first occurrence."""
    if not text or not text.strip():
        return []

    merged: Dict[str, _Occurrences] = {}
    for raw, offset in _all_hits(text, blacklist, is_known):
        normalized = normalize_brand_name(raw)
        if not normalized:
            continue
        seen = merged.get(normalized)
        if seen is None:
            merged[normalized] = _Occurrences(raw, offset, {offset})
            continue
        seen.offsets.add(offset)
        if offset < seen.first_offset:
            seen.raw_name = raw
            seen.first_offset = offset

    length = len(text)
    candidates = [
        Candidate(
            raw_name=occ.raw_name,
            mention_count=len(occ.offsets),
            first_position_ratio=min(occ.first_offset / length, 1.0),
        )
        for occ in sorted(merged.values(), key=lambda o: o.first_offset)
    ]
    logger.debug(f"Extracted {len(candidates)} candidates from {length} chars")
    return candidates


def _all_hits(text: str, blacklist: Blacklist, is_known: Optional[KnownName]) -> Iterator[Hit]:
    yield from capitalized_runs(text, blacklist, is_known)
    yield from pascal_case_tokens(text)
    yield from domain_names(text, is_known)


def capitalized_runs(
    text: str,
    blacklist: Blacklist = DEFAULT_BLACKLIST,
    is_known: Optional[KnownName] = None,
) -> Iterator[Hit]:
    """Runs of 1-4 capitalized words with edge stopwords trimmed."""
    for match in CAPITALIZED_RUN_PATTERN.finditer(text):
        words = [(w.group(), match.start() + w.start(), match.start() + w.end())
                 for w in _WORD.finditer(match.group())]
        first, last = 0, len(words) - 1
        while first <= last and blacklist.is_stopword(words[first][0]):
            first += 1
        while last >= first and blacklist.is_stopword(words[last][0]):
            last -= 1

        span = _widest_known_span(text, words, first, last, is_known) if is_known else None
        if span is None:
            if first > last:
                continue
            span = (words[first][1], words[last][2])
        start, end = span
        yield text[start:end], start


def _widest_known_span(
    text: str,
    words: List[Tuple[str, int, int]],
    first: int,
    last: int,
    is_known: KnownName,
) -> Optional[Tuple[int, int]]:
    # spans must cover the trimmed core; an all-stopword run may match anywhere
    if first > last:
        starts, ends = range(len(words)), range(len(words))
    else:
        starts, ends = range(first + 1), range(last, len(words))
    spans = [(i, j) for i in starts for j in ends if i <= j]
    for i, j in sorted(spans, key=lambda s: s[0] - s[1]):
        start, end = words[i][1], words[j][2]
        if is_known(text[start:end]):
            return start, end
    return None


def pascal_case_tokens(text: str) -> Iterator[Hit]:
    for match in PASCAL_CASE_PATTERN.finditer(text):
        yield match.group(), match.start()


def domain_names(text: str, is_known: Optional[KnownName] = None) -> Iterator[Hit]:
    """``salesforce.com`` yields ``Salesforce`` at the domain's offset.

    A domain whose full text is a known name (``Monday.com``) is yielded as
    written instead.
    """
    for match in DOMAIN_PATTERN.finditer(text):
        if is_known and is_known(match.group(0)):
            yield match.group(0), match.start()
            continue
        label = match.group(1)
        yield label[:1].upper() + label[1:], match.start(1)
