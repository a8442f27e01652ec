"""Outreach pipeline: enrich, compose, export."""

from leadgen.outreach.enricher import enrich, enrich_candidates, fallback_insights
from leadgen.outreach.composer import generate, generate_messages, generate_fallback_message
from leadgen.outreach.exporter import persist, display_results, display_summary
from leadgen.outreach.pacing import Pacer
