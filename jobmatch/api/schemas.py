"""API request/response schemas."""

from pydantic import Field

from jobmatch.agents.job_finder import JOB_SITES
from jobmatch.models import WireModel


# Analysis schemas
class AnalyzeRequest(WireModel):
    resume: str
    job_description: str


class FetchDescriptionRequest(WireModel):
    url: str


class FetchDescriptionResponse(WireModel):
    text: str


class SearchJobsRequest(WireModel):
    query: str
    site: str = Field(default=JOB_SITES[0], description="linkedin.com/jobs, indeed.com or myworkdayjobs.com")


class AnswerQuestionRequest(WireModel):
    resume: str
    question: str


class AnswerQuestionResponse(WireModel):
    answer: str


class ExtractTextResponse(WireModel):
    text: str
    filename: str


# Location schemas
class DistanceRequest(WireModel):
    origin: str
    destination: str


class ReverseGeocodeRequest(WireModel):
    lat: float = Field(strict=True)
    lon: float = Field(strict=True)


class AddressResponse(WireModel):
    address: str


# Resume schemas
class ResumeCreate(WireModel):
    name: str = Field(min_length=1)
    content: str = ""
    job_description: str = ""


class ResumeUpdate(WireModel):
    name: str | None = Field(default=None, min_length=1)
    content: str | None = None
    job_description: str | None = None


class DeleteResponse(WireModel):
    success: bool
