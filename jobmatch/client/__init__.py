"""
Client-side core: the state a frontend renders and the services it calls.

- api: HTTP client for the proxy
- store: Saved resumes, remote first with a local fallback
- jobs: Job collection manager
- state: Working resume + jobs
"""

from jobmatch.client.api import ApiClient
from jobmatch.client.jobs import JobCollection, JobSort, JobStatus, SortDirection, SortKey
from jobmatch.client.state import AppState, create_app_state
from jobmatch.client.store import FallbackResumeStore, LocalResumeStore, RecordStore, RemoteResumeStore

__all__ = [
    "ApiClient",
    "AppState",
    "create_app_state",
    "JobCollection",
    "JobSort",
    "JobStatus",
    "SortKey",
    "SortDirection",
    "RecordStore",
    "RemoteResumeStore",
    "LocalResumeStore",
    "FallbackResumeStore",
]
