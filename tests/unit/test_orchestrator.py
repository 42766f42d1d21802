"""Tests for the detection orchestrator."""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from services.competitor_detection.classifier import Classifier
from services.competitor_detection.config import DetectionConfig
from services.competitor_detection.orchestrator import CompetitorDetector, detect_competitors
from services.competitor_detection.org_context import StaticOrganizationContextSource

EXAMPLE = "Compare HubSpot to Salesforce and Zoho CRM for small teams."
EMPTY_SOURCE = StaticOrganizationContextSource()


@pytest.mark.asyncio
async def test_detects_example_competitors(detector):
    result = await detector.detect(EXAMPLE, "org-1", EMPTY_SOURCE)

    assert result.competitor_names() == ["HubSpot", "Salesforce", "Zoho CRM"]
    assert result.own_brand_mentions == []
    assert result.metadata.processing_time_ms >= 0


@pytest.mark.asyncio
async def test_ranks_by_mentions(detector):
    text = "Asana first. Then Trello, Trello and Trello. Asana again."

    result = await detector.detect(text, "org-1", EMPTY_SOURCE)

    assert result.competitor_names() == ["Trello", "Asana"]
    assert [m.mention_count for m in result.competitors] == [3, 2]


@pytest.mark.asyncio
async def test_max_results_override(detector):
    result = await detector.detect(EXAMPLE, "org-1", EMPTY_SOURCE, max_results=2)

    assert result.competitor_names() == ["HubSpot", "Salesforce"]


@pytest.mark.asyncio
async def test_config_caps_competitors():
    detector = CompetitorDetector(config=DetectionConfig(max_competitors=1, enable_ner_fallback=False))

    result = await detector.detect(EXAMPLE, "org-1", EMPTY_SOURCE)

    assert result.competitor_names() == ["HubSpot"]


@pytest.mark.asyncio
async def test_empty_text_does_not_touch_gazetteer(detector):
    result = await detector.detect("   ", "org-1", EMPTY_SOURCE)

    assert result.competitors == []
    assert result.own_brand_mentions == []
    assert result.rejected_terms == []
    assert "org-1" not in detector.cache


@pytest.mark.asyncio
async def test_own_brand_mentions(detector, acme_source):
    result = await detector.detect("Acme CRM Platform vs Nimble", "org-acme", acme_source)

    assert result.own_brand_names() == ["Acme CRM Platform"]
    assert result.competitor_names() == ["Nimble"]
    assert "org-acme" in detector.cache


@pytest.mark.asyncio
async def test_use_ner_override():
    resolver = Mock()
    resolver.confirm_organizations = AsyncMock(return_value=["Foobarly"])
    config = DetectionConfig(enable_ner_fallback=True)
    detector = CompetitorDetector(classifier=Classifier(ner_resolver=resolver, config=config), config=config)

    without = await detector.detect("Foobarly launched.", "org-1", EMPTY_SOURCE, use_ner=False)
    resolver.confirm_organizations.assert_not_awaited()
    with_ner = await detector.detect("Foobarly launched.", "org-1", EMPTY_SOURCE)

    assert without.competitor_names() == []
    assert with_ner.competitor_names() == ["Foobarly"]
    assert with_ner.metadata.ner_matches == 1


@pytest.mark.asyncio
async def test_module_level_convenience(detector):
    with patch("services.competitor_detection.orchestrator._default_detector", detector):
        result = await detect_competitors(EXAMPLE, "org-1", EMPTY_SOURCE)

    assert result.competitor_names() == ["HubSpot", "Salesforce", "Zoho CRM"]
