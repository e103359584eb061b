"""
Application state: the working resume and the job collection.

One AppState is created per session and handed to whatever renders it.
Listeners registered with `subscribe` are told about every resume change.
"""

import logging
from collections.abc import Callable

from jobmatch.client.api import ApiClient
from jobmatch.client.jobs import JobCollection
from jobmatch.client.store import FallbackResumeStore, LocalResumeStore, RecordStore, RemoteResumeStore
from jobmatch.config import Settings, settings
from jobmatch.data import TEMPLATE_RESUME
from jobmatch.models import ImprovementSuggestion, JobAnalysis, SavedResume
from jobmatch.suggestions import apply_suggestion, highlight_keywords

logger = logging.getLogger(__name__)


class AppState:
    def __init__(self, api: ApiClient, store: RecordStore, resume: str = TEMPLATE_RESUME):
        self.api = api
        self.store = store
        self.jobs = JobCollection(api)
        self._resume = resume
        self._subscribers: list[Callable[[str], None]] = []

    @property
    def resume(self) -> str:
        return self._resume

    def subscribe(self, callback: Callable[[str], None]) -> Callable[[], None]:
        self._subscribers.append(callback)
        return lambda: self._subscribers.remove(callback)

    def set_resume(self, text: str) -> None:
        if text == self._resume:
            return
        self._resume = text
        for callback in list(self._subscribers):
            callback(text)

    def load_resume(self, saved: SavedResume) -> None:
        self.set_resume(saved.content)

    def accept_suggestion(self, suggestion: ImprovementSuggestion) -> bool:
        """
        Apply a suggestion to the working resume.

        Returns False (and leaves the resume alone) when the original text is
        no longer in the resume, e.g. after manual edits or a prior accept.
        """
        updated = apply_suggestion(self._resume, suggestion)
        if updated == self._resume:
            logger.warning("Suggestion not applied, original text not found: %r", suggestion.original_text[:80])
            return False
        self.set_resume(updated)
        return True

    def highlighted_resume(self, analysis: JobAnalysis) -> list[tuple[str, bool]]:
        """Working resume split into segments, matched keywords flagged."""
        return highlight_keywords(self._resume, [k.keyword for k in analysis.matched_keywords])

    async def analyze(self, job_id: str) -> None:
        await self.jobs.analyze(job_id, self._resume)

    async def save_resume(self, name: str, job_description: str = "") -> SavedResume:
        return await self.store.save(name, self._resume, job_description)

    async def aclose(self):
        await self.api.aclose()


def create_app_state(config: Settings = settings) -> AppState:
    """Wire the API client and the remote-first resume store."""
    api = ApiClient(base_url=config.api_base_url, timeout=config.upstream_timeout)
    store = FallbackResumeStore(
        remote=RemoteResumeStore(api.http),
        local=LocalResumeStore(config.local_store_path),
    )
    return AppState(api, store)
