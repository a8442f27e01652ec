"""Pipeline records: search criteria, candidates and their enriched forms."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Immutable record serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SearchSpecification(BaseModel):
    company_size_min: int = Field(default=50, ge=0)
    company_size_max: int = Field(default=200, ge=0)
    industry: str = "software"
    location: str = "USA"
    per_page: int = Field(default=10, ge=1)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_size_bounds(self) -> "SearchSpecification":
        if self.company_size_min > self.company_size_max:
            raise ValueError(
                f"company_size_min ({self.company_size_min}) must not exceed "
                f"company_size_max ({self.company_size_max})"
            )
        return self


class Candidate(Record):
    name: str = Field(min_length=1)
    website: str = Field(min_length=1)
    employee_count: int = Field(default=0, ge=0)
    industry: str = ""
    location: str = ""


class EnrichedCandidate(Candidate):
    insights: list[str] = Field(min_length=1)
    last_updated: datetime
    insight_source: Literal["website", "fallback"]


class FinalResult(EnrichedCandidate):
    personalized_message: str = Field(min_length=1)
    message_generated: datetime
    ai_generated: bool


class InsightOutcome(BaseModel):
    """Which enrichment path produced the insights, and what it produced."""

    kind: Literal["website", "fallback"]
    insights: list[str]

    model_config = ConfigDict(frozen=True)


class MessageOutcome(BaseModel):
    """Which generation path produced the message, and the message itself."""

    kind: Literal["ai", "template"]
    message: str

    model_config = ConfigDict(frozen=True)

    @property
    def ai_generated(self) -> bool:
        return self.kind == "ai"
