"""Company insight enrichment from the public website, with a heuristic fallback."""

from datetime import datetime, timezone
from typing import Optional

import structlog

from leadgen.clients.website import PageContent, fetch_page
from leadgen.core.config import Settings
from leadgen.core.models import Candidate, EnrichedCandidate, InsightOutcome
from leadgen.outreach.pacing import Pacer

log = structlog.get_logger()

# Checked in declaration order; first key contained in the industry wins
INDUSTRY_INSIGHTS = {
    "Software": [
        "Uses cloud-based development infrastructure",
        "Recently expanded their engineering team",
        "Focuses on SaaS solutions for enterprise clients",
    ],
    "Data": [
        "Processes large datasets for analytics",
        "Offers real-time data visualization tools",
        "Serves clients in finance and healthcare sectors",
    ],
    "Cloud": [
        "Specializes in multi-cloud deployments",
        "Offers 24/7 infrastructure monitoring",
        "Recently achieved SOC 2 compliance",
    ],
    "AI": [
        "Develops machine learning models",
        "Requires high-performance computing resources",
        "Focus on computer vision and NLP applications",
    ],
    "Cyber": [
        "Provides enterprise security solutions",
        "Offers threat detection and response services",
        "Compliance with GDPR and HIPAA requirements",
    ],
}

TECH_KEYWORDS = [
    "cloud", "ai", "machine learning", "saas", "api",
    "software", "technology", "digital", "automation", "analytics",
]
BUSINESS_KEYWORDS = ["enterprise", "fortune", "clients", "customers", "global", "scale", "growth"]

LARGE_COMPANY_THRESHOLD = 100
DESCRIPTION_PREFIX_LENGTH = 100
TITLE_PREFIX_LENGTH = 80

NO_INDUSTRY_INSIGHT = "Limited industry information available"
NO_WEBSITE_INSIGHT = "Limited website information available"


def company_size_insight(employee_count: int) -> str:
    if employee_count > LARGE_COMPANY_THRESHOLD:
        return "Large team suggests significant IT infrastructure needs"
    return "Growing company likely expanding their tech stack"


def metadata_insights(page: PageContent) -> list[str]:
    insights = []
    if page.description:
        insights.append(f"Website focus: {page.description[:DESCRIPTION_PREFIX_LENGTH]}...")
    if page.title:
        insights.append(f"Company positioning: {page.title[:TITLE_PREFIX_LENGTH]}...")
    return insights


def keyword_insight(text: str, keywords: list[str], limit: int, label: str) -> Optional[str]:
    """Summarize the first `limit` keywords present in text, in keyword order."""
    found = [keyword for keyword in keywords if keyword in text]
    if not found:
        return None
    return f"{label}: {', '.join(found[:limit])}"


def website_insights(candidate: Candidate, page: PageContent) -> list[str]:
    """Derive insights from a fetched homepage."""
    text = page.text.lower()

    insights = metadata_insights(page)
    for keywords, limit, label in (
        (TECH_KEYWORDS, 3, "Technology focus"),
        (BUSINESS_KEYWORDS, 2, "Business indicators"),
    ):
        insight = keyword_insight(text, keywords, limit, label)
        if insight:
            insights.append(insight)
    insights.append(company_size_insight(candidate.employee_count))

    return insights or [NO_WEBSITE_INSIGHT]


def fallback_insights(candidate: Candidate) -> list[str]:
    """Deterministic insights from industry and headcount alone."""
    industry_key = next(
        (key for key in INDUSTRY_INSIGHTS if key in candidate.industry),
        None,
    )

    insights = list(INDUSTRY_INSIGHTS[industry_key]) if industry_key else [NO_INDUSTRY_INSIGHT]
    insights.append(company_size_insight(candidate.employee_count))
    return insights


async def derive_insights(candidate: Candidate, settings: Settings) -> InsightOutcome:
    """Try the website once; on any failure use the heuristic insights."""
    try:
        page = await fetch_page(candidate.website, timeout=settings.limits.request_timeout_seconds)
        return InsightOutcome(kind="website", insights=website_insights(candidate, page))

    except Exception as e:
        log.warning("website_fetch_failed", company=candidate.name, website=candidate.website, error=str(e))
        return InsightOutcome(kind="fallback", insights=fallback_insights(candidate))


async def enrich(candidate: Candidate, settings: Settings) -> EnrichedCandidate:
    """Enrich a candidate with insights.

    Returns a new record; the candidate itself is left untouched.
    """
    log.info("enriching_company", company=candidate.name)

    outcome = await derive_insights(candidate, settings)

    return EnrichedCandidate(
        **candidate.model_dump(),
        insights=outcome.insights,
        insight_source=outcome.kind,
        last_updated=datetime.now(timezone.utc),
    )


async def enrich_candidates(
    candidates: list[Candidate],
    settings: Settings,
    pacer: Optional[Pacer] = None,
) -> list[EnrichedCandidate]:
    """Enrich candidates one at a time, pausing after each website visit."""
    pacer = pacer or Pacer(settings.delays.website_scraping_ms, name="website_scraping")

    enriched = []
    for candidate in candidates:
        enriched.append(await enrich(candidate, settings))
        await pacer.wait()

    fallback_count = sum(1 for item in enriched if item.insight_source == "fallback")
    log.info("enrichment_complete", count=len(enriched), fallback=fallback_count)
    return enriched
