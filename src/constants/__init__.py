from constants.stopwords import ENGLISH_STOPWORDS
from constants.generic_terms import BUSINESS_GENERIC_TERMS, GENERIC_CATEGORY_PHRASES, SPAM_PHRASES
from constants.known_brands import GLOBAL_COMPETITORS
from constants.text_patterns import (
    BRACKET_QUOTE_CHARS,
    CAPITALIZED_RUN_PATTERN,
    DOMAIN_PATTERN,
    DOMAIN_TLDS,
    PASCAL_CASE_PATTERN,
    PRODUCT_FAMILY_SUFFIXES,
)

__all__ = [
    "ENGLISH_STOPWORDS",
    "BUSINESS_GENERIC_TERMS",
    "GENERIC_CATEGORY_PHRASES",
    "SPAM_PHRASES",
    "GLOBAL_COMPETITORS",
    "BRACKET_QUOTE_CHARS",
    "CAPITALIZED_RUN_PATTERN",
    "DOMAIN_PATTERN",
    "DOMAIN_TLDS",
    "PASCAL_CASE_PATTERN",
    "PRODUCT_FAMILY_SUFFIXES",
]
