"""
HTTP client for the proxy API.

Every failure is raised as a JobMatchError whose message can be shown to the
user directly.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from jobmatch.config import settings
from jobmatch.errors import UnavailableError, UpstreamError, UpstreamTimeoutError
from jobmatch.models import DistanceResult, HiringCafeJob, JobAnalysis, JobListing

logger = logging.getLogger(__name__)


def error_text(response: httpx.Response) -> str:
    """Best human-readable description of an error response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error = body.get("error") or body.get("detail")
        if isinstance(error, dict):
            error = error.get("message")
        if error:
            return str(error)
    return response.text.strip() or response.reason_phrase or f"HTTP {response.status_code}"


class ApiClient:
    """Async client for /api/*."""

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout or settings.upstream_timeout,
        )

    @property
    def http(self) -> httpx.AsyncClient:
        return self._client

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def _request(self, method: str, path: str, action: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(f"Failed to {action}: the server did not respond in time.") from e
        except httpx.HTTPError as e:
            logger.error("%s %s transport error: %s", method, path, e)
            raise UnavailableError(f"Failed to {action}: could not reach the server ({e}).") from e

        if response.is_error:
            raise UpstreamError(f"Failed to {action}: {error_text(response)}")

        if not response.content:
            raise UpstreamError(f"Failed to {action}: empty response from the server.")
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"Failed to {action}: the server returned invalid JSON.") from e

    async def analyze(self, resume: str, job_description: str) -> JobAnalysis:
        """Analyze a resume against a job description."""
        data = await self._request(
            "POST", "/analyze", "analyze job fit", json={"resume": resume, "jobDescription": job_description}
        )
        try:
            return JobAnalysis.model_validate(data)
        except PydanticValidationError as e:
            raise UpstreamError("Failed to analyze job fit: the analysis was incomplete.") from e

    async def fetch_description(self, url: str) -> str:
        """Extract the job description text behind a posting URL."""
        data = await self._request("POST", "/fetch-description", "fetch job description", json={"url": url})
        text = data.get("text") if isinstance(data, dict) else None
        if text is not None and not isinstance(text, str):
            raise UpstreamError("Failed to fetch job description: malformed response.")
        text = (text or "").strip()
        if not text:
            raise UpstreamError("No job description found at this URL. Please paste the description manually.")
        return text

    async def calculate_distance(self, origin: str, destination: str) -> DistanceResult:
        data = await self._request(
            "POST", "/distance", "calculate distance", json={"origin": origin, "destination": destination}
        )
        try:
            return DistanceResult.model_validate(data)
        except PydanticValidationError as e:
            raise UpstreamError("Failed to calculate distance: incomplete result.") from e

    async def reverse_geocode(self, lat: float, lon: float) -> str:
        data = await self._request(
            "POST", "/reverse-geocode", "get address from coordinates", json={"lat": lat, "lon": lon}
        )
        return (data.get("address") or "").strip() if isinstance(data, dict) else ""

    async def search_jobs(self, query: str, site: str) -> list[JobListing]:
        data = await self._request("POST", "/search-jobs", "search jobs", json={"query": query, "site": site})
        return [JobListing.model_validate(item) for item in data or []]

    async def answer_question(self, resume: str, question: str) -> str:
        data = await self._request(
            "POST", "/answer-question", "answer question", json={"resume": resume, "question": question}
        )
        return data.get("answer", "") if isinstance(data, dict) else ""

    async def extract_text(self, filename: str, content: bytes, content_type: str = "application/pdf") -> str:
        data = await self._request(
            "POST", "/extract-text", "extract text", files={"file": (filename, content, content_type)}
        )
        return data.get("text", "") if isinstance(data, dict) else ""

    async def hiring_cafe_jobs(self) -> list[HiringCafeJob]:
        """Latest hiring.cafe listings, newest first."""
        data = await self._request("GET", "/hiring-cafe", "load hiring.cafe listings")
        if isinstance(data, dict):
            data = data.get("jobs") or data.get("results") or []
        if not isinstance(data, list):
            raise UpstreamError("Failed to load hiring.cafe listings: malformed response.")
        try:
            return [HiringCafeJob.model_validate(item) for item in data if isinstance(item, dict)]
        except PydanticValidationError as e:
            raise UpstreamError("Failed to load hiring.cafe listings: malformed listing.") from e
