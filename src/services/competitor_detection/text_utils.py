"""
Text normalization helpers for brand names.

Every comparison in the detection pipeline goes through
``normalize_brand_name`` so that catalog rows, gazetteer entries and
extracted candidates agree on a single key per brand.
"""

import re
from typing import List, Optional

from constants import DOMAIN_TLDS

_NON_NAME_CHARS = re.compile(r"[^\w\s-]")
_WHITESPACE = re.compile(r"\s+")
_SPACED_HYPHEN = re.compile(r"\s*-\s*")


def normalize_brand_name(name: str) -> str:
    """Lowercase, drop punctuation except hyphens, collapse whitespace."""
    if not name:
        return ""
    normalized = name.lower().strip()
    normalized = _NON_NAME_CHARS.sub("", normalized)
    normalized = _WHITESPACE.sub(" ", normalized)
    normalized = _SPACED_HYPHEN.sub("-", normalized)
    return normalized.strip()


def normalize_lookup_key(term: str) -> str:
    """Lowercase and collapse whitespace, keeping punctuation intact."""
    return _WHITESPACE.sub(" ", (term or "").lower()).strip()


def name_words(normalized_name: str) -> List[str]:
    return [w for w in normalized_name.split(" ") if w]


def capitalize_words(value: str) -> str:
    return " ".join(w[:1].upper() + w[1:].lower() for w in re.split(r"[\s-]+", value) if w)


def brand_from_domain(domain: Optional[str]) -> Optional[str]:
    """Guess a brand name from a domain: ``https://www.hubspot.com`` -> ``Hubspot``."""
    if not domain:
        return None
    host = domain.strip().lower()
    host = re.sub(r"^[a-z]+://", "", host)
    host = host.split("/", 1)[0].split(":", 1)[0]
    if host.startswith("www."):
        host = host[4:]
    labels = [label for label in host.split(".") if label]
    while len(labels) > 1 and labels[-1] in DOMAIN_TLDS + ("uk", "de", "fr", "us", "ca", "au"):
        labels.pop()
    if not labels:
        return None
    stem = labels[-1]
    if len(stem) < 2:
        return None
    return capitalize_words(stem)
