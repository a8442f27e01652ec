"""Fatal pipeline errors.

Per-company enrichment and generation failures never surface as exceptions;
they are absorbed by their stage and replaced with a fallback outcome.
"""


class LeadGenError(Exception):
    """Base class for errors that abort a lead generation run."""


class SourceError(LeadGenError):
    """Lead provider request failed or returned an unusable body."""


class PersistError(LeadGenError):
    """Writing the CSV or JSON export failed."""
