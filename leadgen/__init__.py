"""Lead generation: source companies, enrich them, write outreach, export."""

__version__ = "0.1.0"
