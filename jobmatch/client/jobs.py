"""
Job collection manager.

Holds the tracked jobs (most recent first) and drives their description
fetch and analysis. Each job's flags are independent, so operations on
different jobs run concurrently. A second fetch or analyze for a job that
already has one outstanding is ignored.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from markdownify import markdownify

from jobmatch.client.api import ApiClient
from jobmatch.errors import JobMatchError
from jobmatch.models import HiringCafeJob, Job, JobListing, utcnow

logger = logging.getLogger(__name__)

NEW_JOB_TITLE = "New Job Listing"
NEW_JOB_COMPANY = "Company Name"
FETCHING_PLACEHOLDER = "Fetching description..."
FETCH_FAILED_PLACEHOLDER = "Failed to fetch job description. Please paste it manually."


class JobStatus(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    ANALYZING = "analyzing"
    ANALYZED = "analyzed"
    ERROR = "error"


class SortKey(str, Enum):
    TITLE = "title"
    COMPANY = "company"
    ANALYZED_AT = "analyzedAt"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


DEFAULT_DIRECTIONS = {
    SortKey.TITLE: SortDirection.ASC,
    SortKey.COMPANY: SortDirection.ASC,
    SortKey.ANALYZED_AT: SortDirection.DESC,
}


@dataclass(frozen=True)
class JobSort:
    """Current listing order. Defaults to most recently analyzed first."""

    key: SortKey = SortKey.ANALYZED_AT
    direction: SortDirection = SortDirection.DESC

    def toggle(self, key: SortKey) -> "JobSort":
        """Same key flips direction; a new key starts at its default direction."""
        if key == self.key:
            flipped = SortDirection.DESC if self.direction == SortDirection.ASC else SortDirection.ASC
            return JobSort(key, flipped)
        return JobSort(key, DEFAULT_DIRECTIONS[key])


def _sort_value(job: Job, key: SortKey):
    if key == SortKey.ANALYZED_AT:
        # Never analyzed counts as the oldest possible time
        return job.analyzed_at.timestamp() if job.analyzed_at else float("-inf")
    return (getattr(job, key.value) or "").lower()


def sort_jobs(jobs: list[Job], sort: JobSort = JobSort()) -> list[Job]:
    """Stable sort; ties keep collection order."""
    return sorted(jobs, key=lambda j: _sort_value(j, sort.key), reverse=sort.direction == SortDirection.DESC)


def job_status(job: Job) -> JobStatus:
    if job.is_fetching:
        return JobStatus.FETCHING
    if job.is_loading:
        return JobStatus.ANALYZING
    if job.error:
        return JobStatus.ERROR
    if job.analysis is not None:
        return JobStatus.ANALYZED
    return JobStatus.IDLE


class JobCollection:
    """The tracked jobs and their lifecycle."""

    def __init__(self, api: ApiClient):
        self._api = api
        self._jobs: list[Job] = []
        self._in_flight: set[tuple[str, str]] = set()
        self._subscribers: list[Callable[[list[Job]], None]] = []

    @property
    def jobs(self) -> list[Job]:
        """Snapshot in collection order (most recently added first)."""
        return list(self._jobs)

    def get(self, job_id: str) -> Job | None:
        return next((j for j in self._jobs if j.id == job_id), None)

    def subscribe(self, callback: Callable[[list[Job]], None]) -> Callable[[], None]:
        """Call `callback(jobs)` after every change. Returns an unsubscribe function."""
        self._subscribers.append(callback)
        return lambda: self._subscribers.remove(callback)

    def _notify(self):
        snapshot = self.jobs
        for callback in list(self._subscribers):
            callback(snapshot)

    def _insert(self, job: Job) -> Job:
        self._jobs.insert(0, job)
        self._notify()
        return job

    def add_job(self) -> Job:
        """Add an empty job at the head of the collection."""
        return self._insert(Job(title=NEW_JOB_TITLE, company=NEW_JOB_COMPANY))

    async def add_from_listing(self, listing: JobListing) -> Job:
        """Add a job from a search result and fetch its description."""
        job = self._insert(
            Job(
                url=listing.url,
                title=listing.title,
                company=listing.company,
                description=FETCHING_PLACEHOLDER,
            )
        )
        await self.fetch_description(job.id, placeholder_on_error=FETCH_FAILED_PLACEHOLDER)
        return self.get(job.id) or job

    def add_from_cafe(self, listing: HiringCafeJob) -> Job:
        """Add a job from a hiring.cafe listing, which already carries its description."""
        description = markdownify(listing.description).strip() if listing.description else ""
        return self._insert(
            Job(url=listing.url, title=listing.title, company=listing.company_name, description=description)
        )

    def update_job(self, job_id: str, **fields) -> None:
        """Merge fields into a job. No-op when the job is gone."""
        unknown = set(fields) - set(Job.model_fields)
        if unknown:
            raise ValueError(f"Unknown job fields: {', '.join(sorted(unknown))}")

        for i, job in enumerate(self._jobs):
            if job.id == job_id:
                self._jobs[i] = job.model_copy(update=fields)
                self._notify()
                return

    def remove_job(self, job_id: str) -> None:
        before = len(self._jobs)
        self._jobs = [j for j in self._jobs if j.id != job_id]
        if len(self._jobs) != before:
            self._notify()

    def status(self, job_id: str) -> JobStatus | None:
        job = self.get(job_id)
        return job_status(job) if job else None

    def sorted(self, sort: JobSort = JobSort()) -> list[Job]:
        return sort_jobs(self._jobs, sort)

    def _claim(self, job_id: str, operation: str) -> bool:
        if (job_id, operation) in self._in_flight:
            logger.info("Ignoring %s for job %s: already in progress", operation, job_id)
            return False
        self._in_flight.add((job_id, operation))
        return True

    def _settle(self, job_id: str, flag: str, message: str) -> None:
        # Clears a flag left set by an unexpected exception.
        job = self.get(job_id)
        if job is not None and getattr(job, flag):
            self.update_job(job_id, **{flag: False, "error": job.error or message})

    async def fetch_description(self, job_id: str, placeholder_on_error: str | None = None) -> None:
        """
        Fetch the job's description from its URL.

        On failure the error is stored and the description is left as is
        (or replaced by `placeholder_on_error`).
        """
        job = self.get(job_id)
        if job is None or not job.url.strip():
            return
        if not self._claim(job_id, "fetch"):
            return

        try:
            self.update_job(job_id, is_fetching=True, error=None)
            try:
                description = await self._api.fetch_description(job.url)
            except JobMatchError as e:
                logger.warning("Fetching description for job %s failed: %s", job_id, e.message)
                failed = {"error": e.message, "is_fetching": False}
                if placeholder_on_error is not None:
                    failed["description"] = placeholder_on_error
                self.update_job(job_id, **failed)
            else:
                self.update_job(job_id, description=description, is_fetching=False)
        finally:
            self._in_flight.discard((job_id, "fetch"))
            self._settle(job_id, "is_fetching", "Failed to fetch job description.")

    async def analyze(self, job_id: str, resume: str) -> None:
        """Analyze the job against the resume; re-analysis overwrites the previous result."""
        job = self.get(job_id)
        if job is None or job.is_fetching or not resume.strip() or not job.description.strip():
            return
        if not self._claim(job_id, "analyze"):
            return

        try:
            self.update_job(job_id, is_loading=True, error=None)
            try:
                analysis = await self._api.analyze(resume, job.description)
            except JobMatchError as e:
                logger.warning("Analysis for job %s failed: %s", job_id, e.message)
                self.update_job(job_id, error=e.message, is_loading=False)
            else:
                self.update_job(job_id, analysis=analysis, analyzed_at=utcnow(), is_loading=False)
        finally:
            self._in_flight.discard((job_id, "analyze"))
            self._settle(job_id, "is_loading", "Analysis failed unexpectedly.")

