import re

CAPITALIZED_RUN_PATTERN = re.compile(r"\b[A-Z][A-Za-z0-9&]*(?:[ \t]+[A-Z][A-Za-z0-9&]*){0,3}\b")
PASCAL_CASE_PATTERN = re.compile(r"\b[A-Z][a-z0-9]+(?:[A-Z][a-z0-9]*)+\b")
DOMAIN_PATTERN = re.compile(r"\b([A-Za-z0-9][A-Za-z0-9-]{1,62})\.(com|io|net|org|co|ai)\b")

DOMAIN_TLDS = ("com", "io", "net", "org", "co", "ai")

BRACKET_QUOTE_CHARS = frozenset('<>{}[]()"`\'‘’“”„‚«»')

PRODUCT_FAMILY_SUFFIXES = (
    "crm", "platform", "suite", "hub", "software", "app", "cloud", "one", "pro",
    "enterprise", "marketing hub", "sales hub", "service hub", "marketing", "analytics",
)
