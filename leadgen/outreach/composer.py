"""Outreach message composition using Claude, with a template fallback."""

from datetime import datetime, timezone
from typing import Optional

import anthropic
import structlog

from leadgen.core.config import Settings
from leadgen.core.models import EnrichedCandidate, FinalResult, MessageOutcome
from leadgen.outreach.pacing import Pacer

log = structlog.get_logger()

SYSTEM_PROMPT = "You are an expert B2B sales copywriter specializing in hardware sales."


def build_user_prompt(company: EnrichedCandidate, seller_name: str) -> str:
    """Build the user message describing the company to write to."""
    return f"""You are a sales representative from "{seller_name}", a hardware computer store that specializes in business solutions.

Company Information:
- Name: {company.name}
- Industry: {company.industry}
- Employee Count: {company.employee_count}
- Location: {company.location}
- Key Insights: {', '.join(company.insights)}

Write a professional, personalized outreach email that:
1. References specific details about their company
2. Highlights relevant hardware solutions we can provide
3. Shows understanding of their business needs
4. Includes a clear call-to-action
5. Keeps it concise (under 150 words)

The tone should be professional but friendly, and focus on how our hardware solutions can solve their specific challenges."""


def generate_fallback_message(company: EnrichedCandidate, seller_name: str) -> str:
    """Generate a templated message when Claude fails."""
    if company.insights:
        insight_text = (
            f"Given your {company.insights[0].lower()}, our high-performance servers "
            f"and workstations could significantly enhance your operations."
        )
    else:
        insight_text = "Our hardware solutions could significantly enhance your operations."

    return f"""Hi {company.name} team,

I noticed your company in the {company.industry} space with {company.employee_count} employees. Based on your growth and technical focus, I believe {seller_name} could help optimize your IT infrastructure with enterprise-grade hardware solutions.

{insight_text}

Would you be open to a brief conversation about your current hardware needs?

Best regards,
Sales Team - {seller_name}"""


async def compose_message(company: EnrichedCandidate, settings: Settings) -> MessageOutcome:
    """Ask Claude once for a message; on any failure use the template."""
    generation = settings.generation

    try:
        client = anthropic.AsyncAnthropic(
            api_key=settings.anthropic_api_key or None,
            timeout=settings.limits.api_timeout_seconds,
        )

        response = await client.messages.create(
            model=generation.model,
            max_tokens=settings.limits.max_tokens,
            temperature=generation.temperature,
            system=SYSTEM_PROMPT,
            messages=[{"role": "user", "content": build_user_prompt(company, generation.seller_name)}],
        )

        message = response.content[0].text.strip()
        if not message:
            raise ValueError("empty completion")

        return MessageOutcome(kind="ai", message=message)

    except Exception as e:
        log.error("message_generation_failed", company=company.name, error=str(e))
        return MessageOutcome(kind="template", message=generate_fallback_message(company, generation.seller_name))


async def generate(company: EnrichedCandidate, settings: Settings) -> FinalResult:
    """Generate the personalized message for an enriched company."""
    log.info("generating_message", company=company.name)

    outcome = await compose_message(company, settings)

    return FinalResult(
        **company.model_dump(),
        personalized_message=outcome.message,
        message_generated=datetime.now(timezone.utc),
        ai_generated=outcome.ai_generated,
    )


async def generate_messages(
    companies: list[EnrichedCandidate],
    settings: Settings,
    pacer: Optional[Pacer] = None,
) -> list[FinalResult]:
    """Generate messages one company at a time, pausing between API calls."""
    pacer = pacer or Pacer(settings.delays.api_calls_ms, name="api_calls")

    results = []
    for company in companies:
        results.append(await generate(company, settings))
        await pacer.wait()

    ai_count = sum(1 for result in results if result.ai_generated)
    log.info("message_generation_complete", count=len(results), ai_generated=ai_count)
    return results
