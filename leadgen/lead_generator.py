"""Lead generation orchestrator: Apollo -> website insights -> messages -> exports."""

from typing import Optional

import click
import structlog

from leadgen.clients.apollo import fetch_leads
from leadgen.core.config import Settings, validate_api_keys
from leadgen.core.models import FinalResult, SearchSpecification
from leadgen.outreach.composer import generate_messages
from leadgen.outreach.enricher import enrich_candidates
from leadgen.outreach.exporter import display_results, display_summary, persist
from leadgen.outreach.pacing import Pacer

log = structlog.get_logger()


def display_search_criteria(spec: SearchSpecification):
    click.echo("📋 Search Criteria:")
    click.echo(f"   - Company Size: {spec.company_size_min}-{spec.company_size_max} employees")
    click.echo(f"   - Industry: {spec.industry}")
    click.echo(f"   - Location: {spec.location}")
    click.echo("")


async def run_lead_generation(
    settings: Settings,
    scraping_pacer: Optional[Pacer] = None,
    api_pacer: Optional[Pacer] = None,
) -> list[FinalResult]:
    """Run the whole workflow once.

    Only SourceError and PersistError escape; per-company failures are
    absorbed by the enrichment and generation stages.
    """
    click.echo("🚀 Starting Lead Generation Automation System")
    click.echo("=" * 50)

    for warning in validate_api_keys(settings):
        log.warning("api_key_missing", detail=warning)
        click.echo(f"⚠️  Warning: {warning}")
    click.echo("")

    spec = settings.search
    display_search_criteria(spec)

    click.echo("🔍 Fetching leads from Apollo API...")
    candidates = await fetch_leads(spec, settings)
    click.echo(f"✅ Found {len(candidates)} potential leads from Apollo\n")

    click.echo("🔍 Enriching leads with website insights...")
    enriched = await enrich_candidates(candidates, settings, pacer=scraping_pacer)

    click.echo("🤖 Generating personalized outreach messages...")
    results = await generate_messages(enriched, settings, pacer=api_pacer)

    display_results(results)
    persist(results, settings)
    display_summary(results)

    log.info(
        "lead_generation_complete",
        leads=len(results),
        ai_generated=sum(1 for result in results if result.ai_generated),
    )
    return results
