"""Tests for brand name normalization helpers."""

import pytest

from services.competitor_detection.text_utils import (
    brand_from_domain,
    capitalize_words,
    name_words,
    normalize_brand_name,
    normalize_lookup_key,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("HubSpot", "hubspot"),
        ("  Zoho   CRM ", "zoho crm"),
        ("HubSpot's", "hubspots"),
        ("Monday.com", "mondaycom"),
        ("Sales - Force", "sales-force"),
        ("", ""),
    ],
)
def test_normalize_brand_name(raw, expected):
    assert normalize_brand_name(raw) == expected


def test_lookup_key_keeps_punctuation():
    assert normalize_lookup_key("  Click   HERE! ") == "click here!"


def test_name_words():
    assert name_words("acme crm platform") == ["acme", "crm", "platform"]
    assert name_words("") == []


def test_capitalize_words():
    assert capitalize_words("zoho-crm one") == "Zoho Crm One"


@pytest.mark.parametrize(
    "domain,expected",
    [
        ("hubspot.com", "Hubspot"),
        ("https://www.hubspot.com/pricing", "Hubspot"),
        ("acme.co.uk", "Acme"),
        ("app.pipedrive.com:443", "Pipedrive"),
        ("x.io", None),
        ("", None),
        (None, None),
    ],
)
def test_brand_from_domain(domain, expected):
    assert brand_from_domain(domain) == expected
