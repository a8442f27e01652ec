"""External API clients: Apollo, company websites."""

from leadgen.clients.apollo import (
    fetch_leads,
    build_search_payload,
    normalize_organizations,
)
from leadgen.clients.website import PageContent, fetch_page, parse_page
