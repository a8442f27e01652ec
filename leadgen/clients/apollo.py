"""Apollo.io API client for organization search."""

import httpx
import structlog
from pydantic import ValidationError

from leadgen.core.config import Settings
from leadgen.core.errors import SourceError
from leadgen.core.models import Candidate, SearchSpecification

BASE_URL = "https://api.apollo.io/v1"

log = structlog.get_logger()


def build_search_payload(spec: SearchSpecification) -> dict:
    """Build the organization search body; always the first page."""
    return {
        "q_organization_size_min": spec.company_size_min,
        "q_organization_size_max": spec.company_size_max,
        "q_keywords": spec.industry,
        "page": 1,
        "per_page": spec.per_page,
    }


def _text(value) -> str:
    """Provider text field as a stripped string; numbers are kept, anything else is blank."""
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, (str, int, float)):
        return str(value).strip()
    return ""


def _employee_count(value) -> int:
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError, OverflowError):
        return 0


def format_location(org: dict) -> str:
    """Format as "City, State Country", leaving out whatever is missing."""
    region = " ".join(part for part in (_text(org.get("state")), _text(org.get("country"))) if part)
    return ", ".join(part for part in (_text(org.get("city")), region) if part)


def normalize_organizations(organizations: list[dict]) -> list[Candidate]:
    """Turn Apollo organization records into candidates.

    Records without a name or website are dropped, as are records whose
    fields cannot form a candidate.
    """
    candidates = []
    for org in organizations:
        if not isinstance(org, dict):
            continue

        name = _text(org.get("name"))
        website = _text(org.get("website_url"))
        if not name or not website:
            continue

        try:
            candidate = Candidate(
                name=name,
                website=website,
                employee_count=_employee_count(org.get("estimated_num_employees")),
                industry=_text(org.get("industry")),
                location=format_location(org),
            )
        except ValidationError as e:
            log.warning("apollo_record_skipped", name=name, error=str(e))
            continue

        candidates.append(candidate)

    return candidates


async def fetch_leads(spec: SearchSpecification, settings: Settings) -> list[Candidate]:
    """Search Apollo for organizations matching the search specification.

    Raises:
        SourceError: the request failed or the body had no organization list.
    """
    log.info(
        "apollo_search_started",
        size_min=spec.company_size_min,
        size_max=spec.company_size_max,
        industry=spec.industry,
        location=spec.location,
    )

    try:
        async with httpx.AsyncClient(timeout=settings.limits.api_timeout_seconds) as client:
            response = await client.post(
                f"{BASE_URL}/organizations/search",
                headers={
                    "Content-Type": "application/json",
                    "Cache-Control": "no-cache",
                    "X-Api-Key": settings.apollo_api_key,
                },
                json=build_search_payload(spec),
            )
            response.raise_for_status()
            data = response.json()

    except Exception as e:
        log.error("apollo_search_error", error=str(e))
        raise SourceError(f"Failed to fetch leads from Apollo API: {e}") from e

    organizations = data.get("organizations") if isinstance(data, dict) else None
    if not isinstance(organizations, list):
        log.error("apollo_search_error", error="invalid response format")
        raise SourceError("Invalid response format from Apollo API")

    candidates = normalize_organizations(organizations)
    log.info("apollo_search_complete", received=len(organizations), count=len(candidates))
    return candidates
