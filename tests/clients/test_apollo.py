"""Tests for Apollo.io API client."""

import pytest
from unittest.mock import patch, AsyncMock, MagicMock

from leadgen.clients.apollo import (
    build_search_payload,
    fetch_leads,
    format_location,
    normalize_organizations,
)
from leadgen.core.config import Settings
from leadgen.core.errors import SourceError
from leadgen.core.models import SearchSpecification


def mock_apollo_client(mock_client, payload):
    mock_response = MagicMock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status.return_value = None

    mock_instance = AsyncMock()
    mock_instance.post.return_value = mock_response
    mock_client.return_value.__aenter__.return_value = mock_instance
    return mock_instance


def test_build_search_payload():
    spec = SearchSpecification(company_size_min=20, company_size_max=80, industry="data", per_page=5)

    payload = build_search_payload(spec)

    assert payload == {
        "q_organization_size_min": 20,
        "q_organization_size_max": 80,
        "q_keywords": "data",
        "page": 1,
        "per_page": 5,
    }


def test_format_location():
    assert format_location({"city": "Austin", "state": "Texas", "country": "United States"}) == \
        "Austin, Texas United States"
    assert format_location({"city": None, "state": "Texas", "country": "United States"}) == \
        "Texas United States"
    assert format_location({"city": "Berlin", "country": "Germany"}) == "Berlin, Germany"
    assert format_location({}) == ""


def test_normalize_organizations_drops_records_without_name_or_website():
    organizations = [
        {"name": "Acme", "website_url": "http://acme.com", "estimated_num_employees": 120,
         "industry": "computer software", "city": "Austin", "state": "Texas", "country": "United States"},
        {"name": "", "website_url": "http://noname.com"},
        {"name": "No Site", "website_url": None},
        {"name": "Bare", "website_url": "http://bare.io"},
    ]

    candidates = normalize_organizations(organizations)

    assert len(candidates) <= len(organizations)
    assert [c.name for c in candidates] == ["Acme", "Bare"]
    assert all(c.name and c.website for c in candidates)
    assert candidates[0].employee_count == 120
    assert candidates[0].location == "Austin, Texas United States"
    assert candidates[1].employee_count == 0
    assert candidates[1].industry == ""
    assert candidates[1].location == ""


@pytest.mark.asyncio
async def test_fetch_leads_returns_candidates():
    settings = Settings(apollo_api_key="test-key")
    payload = {
        "organizations": [
            {"name": "Acme", "website_url": "http://acme.com", "estimated_num_employees": 75,
             "industry": "Enterprise Software", "city": "Denver", "state": "Colorado", "country": "United States"},
        ]
    }

    with patch("leadgen.clients.apollo.httpx.AsyncClient") as mock_client:
        mock_instance = mock_apollo_client(mock_client, payload)

        candidates = await fetch_leads(settings.search, settings)

        assert len(candidates) == 1
        assert candidates[0].name == "Acme"
        assert candidates[0].website == "http://acme.com"
        assert candidates[0].industry == "Enterprise Software"

        call_kwargs = mock_instance.post.call_args[1]
        assert call_kwargs["headers"]["X-Api-Key"] == "test-key"
        assert call_kwargs["json"]["q_keywords"] == "software"
        assert call_kwargs["json"]["page"] == 1


@pytest.mark.asyncio
async def test_fetch_leads_empty_list():
    settings = Settings()

    with patch("leadgen.clients.apollo.httpx.AsyncClient") as mock_client:
        mock_apollo_client(mock_client, {"organizations": []})

        candidates = await fetch_leads(settings.search, settings)

        assert candidates == []


@pytest.mark.asyncio
async def test_fetch_leads_missing_organizations_raises():
    settings = Settings()

    with patch("leadgen.clients.apollo.httpx.AsyncClient") as mock_client:
        mock_apollo_client(mock_client, {"error": "nope"})

        with pytest.raises(SourceError, match="Invalid response format"):
            await fetch_leads(settings.search, settings)


@pytest.mark.asyncio
async def test_fetch_leads_request_error_raises():
    settings = Settings()

    with patch("leadgen.clients.apollo.httpx.AsyncClient") as mock_client:
        mock_instance = AsyncMock()
        mock_instance.post.side_effect = Exception("API error")
        mock_client.return_value.__aenter__.return_value = mock_instance

        with pytest.raises(SourceError, match="API error"):
            await fetch_leads(settings.search, settings)


GOOD_ORG = {"name": "Acme", "website_url": "http://acme.com", "estimated_num_employees": 75,
            "industry": "Enterprise Software"}


@pytest.mark.parametrize("bad_org", [
    {"name": "Range", "website_url": "http://range.io", "estimated_num_employees": "51-200"},
    {"name": 123, "website_url": "http://numeric.io", "industry": "Data"},
    {"name": "Listy", "website_url": "http://listy.io", "industry": ["software"]},
    {"name": "Nested", "website_url": {"href": "http://nested.io"}},
    {"name": "Odd City", "website_url": "http://odd.io", "city": ["Austin"], "state": 7},
])
@pytest.mark.asyncio
async def test_fetch_leads_tolerates_odd_records(bad_org):
    settings = Settings()

    with patch("leadgen.clients.apollo.httpx.AsyncClient") as mock_client:
        mock_apollo_client(mock_client, {"organizations": [GOOD_ORG, bad_org]})

        candidates = await fetch_leads(settings.search, settings)

    assert candidates[0].name == "Acme"
    assert all(c.name and c.website for c in candidates)
    assert all(isinstance(c.industry, str) and isinstance(c.location, str) for c in candidates)
    assert all(c.employee_count >= 0 for c in candidates)


def test_normalize_organizations_coerces_fields():
    candidates = normalize_organizations([
        {"name": 123, "website_url": "http://numeric.io", "estimated_num_employees": "51-200",
         "industry": ["software"], "city": "Austin", "state": None, "country": "United States"},
    ])

    assert len(candidates) == 1
    assert candidates[0].name == "123"
    assert candidates[0].employee_count == 0
    assert candidates[0].industry == ""
    assert candidates[0].location == "Austin, United States"


def test_normalize_organizations_drops_non_text_website():
    candidates = normalize_organizations([
        {"name": "Nested", "website_url": {"href": "http://nested.io"}},
    ])

    assert candidates == []


@pytest.mark.asyncio
async def test_fetch_leads_non_json_body_raises():
    settings = Settings()

    with patch("leadgen.clients.apollo.httpx.AsyncClient") as mock_client:
        mock_response = MagicMock()
        mock_response.raise_for_status.return_value = None
        mock_response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")

        mock_instance = AsyncMock()
        mock_instance.post.return_value = mock_response
        mock_client.return_value.__aenter__.return_value = mock_instance

        with pytest.raises(SourceError, match="Expecting value"):
            await fetch_leads(settings.search, settings)


@pytest.mark.asyncio
async def test_fetch_leads_top_level_list_raises():
    settings = Settings()

    with patch("leadgen.clients.apollo.httpx.AsyncClient") as mock_client:
        mock_apollo_client(mock_client, [{"name": "Acme", "website_url": "http://acme.com"}])

        with pytest.raises(SourceError, match="Invalid response format"):
            await fetch_leads(settings.search, settings)
