"""Core infrastructure: CLI, config, records, errors."""

from leadgen.core.config import (
    Settings,
    DelayConfig,
    LimitConfig,
    GenerationConfig,
    OutputConfig,
    load_settings,
    validate_api_keys,
)
from leadgen.core.errors import LeadGenError, SourceError, PersistError
from leadgen.core.models import (
    SearchSpecification,
    Candidate,
    EnrichedCandidate,
    FinalResult,
    InsightOutcome,
    MessageOutcome,
)
