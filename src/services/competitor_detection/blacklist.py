"""
Stopword and blacklist filtering.

This module decides whether an extracted term can be a brand name at all.
Word lists live in an immutable ``Blacklist`` built once from ``constants``
and passed by reference to the classifier; tests can build their own.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Tuple

from constants import (
    BRACKET_QUOTE_CHARS,
    BUSINESS_GENERIC_TERMS,
    ENGLISH_STOPWORDS,
    GENERIC_CATEGORY_PHRASES,
    SPAM_PHRASES,
)
from services.competitor_detection.text_utils import normalize_brand_name, normalize_lookup_key

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 30


@dataclass(frozen=True)
class Blacklist:
    stopwords: FrozenSet[str]
    generic_terms: FrozenSet[str]
    category_phrases: FrozenSet[str]
    spam_phrases: Tuple[str, ...]

    @classmethod
    def default(cls) -> "Blacklist":
        return cls(
            stopwords=frozenset(ENGLISH_STOPWORDS),
            generic_terms=frozenset(BUSINESS_GENERIC_TERMS),
            category_phrases=frozenset(GENERIC_CATEGORY_PHRASES),
            spam_phrases=tuple(SPAM_PHRASES),
        )

    def extended(
        self,
        stopwords: Iterable[str] = (),
        generic_terms: Iterable[str] = (),
    ) -> "Blacklist":
        return Blacklist(
            stopwords=self.stopwords | {normalize_lookup_key(t) for t in stopwords},
            generic_terms=self.generic_terms | {normalize_lookup_key(t) for t in generic_terms},
            category_phrases=self.category_phrases,
            spam_phrases=self.spam_phrases,
        )

    def is_stopword(self, term: str) -> bool:
        return normalize_lookup_key(term) in self.stopwords

    def is_generic_business_term(self, term: str) -> bool:
        key = normalize_lookup_key(term)
        return key in self.generic_terms or key in self.category_phrases

    def is_spam_phrase(self, term: str) -> bool:
        key = normalize_lookup_key(term)
        return any(phrase in key for phrase in self.spam_phrases)

    def is_blacklisted(self, term: str) -> bool:
        key = normalize_lookup_key(term)
        return key in self.stopwords or key in self.generic_terms or key in self.category_phrases

    def rejection_reason(self, raw_name: str) -> Optional[str]:
        """Return why ``raw_name`` cannot be a brand, or None when it can."""
        if any(ch in BRACKET_QUOTE_CHARS for ch in raw_name):
            return "formatting"
        normalized = normalize_brand_name(raw_name)
        if len(normalized) < MIN_NAME_LENGTH or len(normalized) > MAX_NAME_LENGTH:
            return "length"
        if normalized.replace(" ", "").replace("-", "").isdigit():
            return "numeric"
        lookup = normalize_lookup_key(raw_name)
        if self.is_stopword(lookup) or self.is_stopword(normalized):
            return "stopword"
        if self.is_generic_business_term(lookup) or self.is_generic_business_term(normalized):
            return "generic"
        if self.is_spam_phrase(lookup):
            return "spam"
        return None

    def is_valid_brand_name(self, raw_name: str) -> bool:
        return self.rejection_reason(raw_name) is None


DEFAULT_BLACKLIST = Blacklist.default()


def is_blacklisted(term: str) -> bool:
    return DEFAULT_BLACKLIST.is_blacklisted(term)


def is_generic_business_term(term: str) -> bool:
    return DEFAULT_BLACKLIST.is_generic_business_term(term)


def is_spam_phrase(term: str) -> bool:
    return DEFAULT_BLACKLIST.is_spam_phrase(term)


def is_valid_brand_name(raw_name: str) -> bool:
    return DEFAULT_BLACKLIST.is_valid_brand_name(raw_name)
