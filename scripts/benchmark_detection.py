"""Precision/recall of competitor detection on labelled answers, NER disabled.

Usage: python scripts/benchmark_detection.py
"""

import asyncio
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Set

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from services.competitor_detection import (
    CatalogRow,
    CompetitorDetector,
    DetectionConfig,
    OrganizationRecord,
    StaticOrganizationContextSource,
)

logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)

ORG_ID = "benchmark-org"

SOURCE = StaticOrganizationContextSource(
    catalogs={
        ORG_ID: [
            CatalogRow(name="Acme", variants=("Acme CRM",), is_org_brand=True),
            CatalogRow(name="Nimble", variants=("Nimble CRM",)),
        ]
    },
    organizations={
        ORG_ID: OrganizationRecord(name="Acme", domain="acme.io", competitors_seed=("Nutshell",)),
    },
)

TEST_CASES = [
    {
        "name": "CRM comparison",
        "text": """
Compare HubSpot to Salesforce and Zoho CRM for small teams.

1. HubSpot - Free CRM with strong Marketing automation
2. Salesforce - Enterprise-grade, very customizable
3. Pipedrive - Pipeline-focused sales CRM
4. Acme CRM Platform - Simple setup for startups

The Best Choice depends on your Budget. Many teams also shortlist Nimble.
""",
        "expected_competitors": {"HubSpot", "Salesforce", "Zoho CRM", "Pipedrive", "Nimble"},
        "expected_own": {"Acme CRM Platform"},
        "false_positives": {"Compare", "Marketing", "Best Choice", "Budget", "Enterprise", "Free CRM"},
    },
    {
        "name": "Email marketing tools",
        "text": """
For email marketing in 2024, Mailchimp remains the most popular option, while
ActiveCampaign offers deeper automation. Klaviyo is the go-to for ecommerce
stores on Shopify. If you prefer a lightweight tool, ConvertKit (now Kit) works
well for creators. Learn more at mailchimp.com or activecampaign.com.
""",
        "expected_competitors": {"Mailchimp", "ActiveCampaign", "Klaviyo", "Shopify", "ConvertKit"},
        "expected_own": set(),
        "false_positives": {"For", "If", "Learn", "Kit"},
    },
    {
        "name": "Project management with own brand",
        "text": """
Teams switching from Trello often evaluate Asana, ClickUp and Monday.com.
Acme also integrates with Slack and Notion, and Nutshell users
report that Acme's onboarding is faster than Asana's.
""",
        "expected_competitors": {"Trello", "Asana", "ClickUp", "Monday.com", "Slack", "Notion", "Nutshell"},
        "expected_own": {"Acme"},
        "false_positives": {"Teams", "Monday"},
    },
]


@dataclass
class CaseScore:
    name: str
    precision: float
    recall: float
    false_positives: Set[str]
    own_brand_ok: bool
    detected: List[str]


def _norm(values) -> Set[str]:
    return {v.lower().strip() for v in values}


def score_case(case: Dict, competitors: List[str], own_brand: List[str]) -> CaseScore:
    detected = _norm(competitors)
    expected = _norm(case["expected_competitors"])
    hits = len(detected & expected)
    return CaseScore(
        name=case["name"],
        precision=round(hits / len(detected), 2) if detected else 0.0,
        recall=round(hits / len(expected), 2) if expected else 0.0,
        false_positives=detected & _norm(case["false_positives"]),
        own_brand_ok=_norm(case["expected_own"]) <= _norm(own_brand),
        detected=competitors,
    )


async def run_benchmark() -> List[CaseScore]:
    detector = CompetitorDetector(config=DetectionConfig(enable_ner_fallback=False))
    scores = []
    for case in TEST_CASES:
        result = await detector.detect(case["text"], ORG_ID, SOURCE, use_ner=False)
        score = score_case(case, result.competitor_names(), result.own_brand_names())
        scores.append(score)

        print(f"\n--- {score.name} ---")
        print(f"  Precision: {score.precision}, Recall: {score.recall}")
        print(f"  Detected: {score.detected}")
        print(f"  Own brand: {result.own_brand_names()} ({'ok' if score.own_brand_ok else 'MISSING'})")
        if score.false_positives:
            print(f"  False positives: {sorted(score.false_positives)}")
        print(f"  Rejected: {result.rejected_terms}")

    avg_precision = sum(s.precision for s in scores) / len(scores)
    avg_recall = sum(s.recall for s in scores) / len(scores)
    print("\nSUMMARY")
    print(f"  Precision: {avg_precision:.2f}, Recall: {avg_recall:.2f}, "
          f"Total FP: {sum(len(s.false_positives) for s in scores)}")
    return scores


if __name__ == "__main__":
    asyncio.run(run_benchmark())
