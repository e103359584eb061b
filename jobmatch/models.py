"""Domain models.

Wire format is camelCase (what the frontend and the model service speak);
attributes are snake_case. Every model accepts either spelling on input.
"""

import uuid
from datetime import UTC, datetime

from pydantic import AliasChoices, BaseModel, Field
from pydantic.alias_generators import to_camel


def generate_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(UTC)


class WireModel(BaseModel):
    """Base for camelCase-on-the-wire models."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# Analysis
class Keyword(WireModel):
    keyword: str
    definition: str

    class Config:
        frozen = True


class ImprovementSuggestion(WireModel):
    original_text: str
    suggested_rewrite: str
    suggestion_type: str

    class Config:
        frozen = True


class JobAnalysis(WireModel):
    """Structured comparison of one resume against one job description."""

    match_score: int = Field(ge=0, le=100)
    summary: str
    strengths: list[str]
    gaps: list[str]
    matched_keywords: list[Keyword]
    missing_keywords: list[Keyword]
    improvement_suggestions: list[ImprovementSuggestion]
    cover_letter_draft: str

    class Config:
        frozen = True


# Jobs
class Job(WireModel):
    """A tracked job posting plus its fetch/analysis state."""

    id: str = Field(default_factory=generate_id)
    url: str = ""
    title: str = ""
    company: str = ""
    description: str = ""
    is_fetching: bool = False
    is_loading: bool = False
    error: str | None = None
    analysis: JobAnalysis | None = None
    analyzed_at: datetime | None = None


class JobListing(WireModel):
    """A job posting found through web search."""

    title: str
    company: str = ""
    url: str
    snippet: str = ""


class HiringCafeJob(BaseModel):
    """A listing from the hiring.cafe API (snake_case upstream)."""

    id: str
    company_name: str = ""
    title: str = ""
    description: str = ""
    location: str = ""
    url: str = ""
    tags: list[str] = Field(default_factory=list)
    company_logo_url: str = ""
    posted_at: str = ""

    class Config:
        coerce_numbers_to_str = True


# Resumes
class SavedResume(WireModel):
    """A named, timestamped resume snapshot."""

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    name: str
    content: str
    job_description: str = ""
    saved_at: datetime

    class Config:
        from_attributes = True


# Location
class DistanceResult(WireModel):
    distance: float
    unit: str
    origin_address: str
    destination_address: str
