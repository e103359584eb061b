"""
Resume store client.

Saved resumes live on the backend when it is reachable and in a local JSON
file otherwise. `FallbackResumeStore` tries the remote store first and falls
back to the local one on transport failures or error statuses. The two
stores are never reconciled.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

import httpx
from pydantic import TypeAdapter

from jobmatch.data import TEMPLATE_RESUME, TEMPLATE_RESUME_NAME
from jobmatch.errors import NotFoundError, UnavailableError
from jobmatch.models import SavedResume, generate_id, utcnow

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {"name", "content", "job_description"}

_resume_list = TypeAdapter(list[SavedResume])


def newest_first(resumes: list[SavedResume]) -> list[SavedResume]:
    return sorted(resumes, key=lambda r: r.saved_at.timestamp(), reverse=True)


def _check_fields(fields: dict) -> dict:
    unknown = set(fields) - UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
    return fields


class RecordStore(ABC):
    """CRUD over saved resumes."""

    @abstractmethod
    async def list(self) -> list[SavedResume]:
        """All saved resumes, newest first."""

    @abstractmethod
    async def save(self, name: str, content: str, job_description: str = "") -> SavedResume:
        """Create a record; the store assigns id and savedAt."""

    @abstractmethod
    async def delete(self, resume_id: str) -> dict:
        """Delete by id. Returns {"success": True}."""

    @abstractmethod
    async def update(self, resume_id: str, **fields) -> SavedResume:
        """Merge name/content/job_description into an existing record."""


class RemoteResumeStore(RecordStore):
    """Backend store at /api/resumes. Any failure raises UnavailableError."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def _call(self, method: str, path: str, **kwargs):
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise UnavailableError(
                f"HTTP {e.response.status_code} {e.response.reason_phrase} from {method} {path}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise UnavailableError(f"{method} {path} failed: {e}") from e

    async def list(self) -> list[SavedResume]:
        return newest_first(_resume_list.validate_python(await self._call("GET", "/resumes")))

    async def save(self, name: str, content: str, job_description: str = "") -> SavedResume:
        payload = {"name": name, "content": content, "jobDescription": job_description}
        return SavedResume.model_validate(await self._call("POST", "/resumes", json=payload))

    async def delete(self, resume_id: str) -> dict:
        await self._call("DELETE", f"/resumes/{resume_id}")
        return {"success": True}

    async def update(self, resume_id: str, **fields) -> SavedResume:
        payload = {
            ("jobDescription" if k == "job_description" else k): v for k, v in _check_fields(fields).items()
        }
        return SavedResume.model_validate(await self._call("PUT", f"/resumes/{resume_id}", json=payload))


class LocalResumeStore(RecordStore):
    """
    A JSON array of saved resumes in a single file.

    The file is seeded with the template resume the first time it is read
    while missing or blank.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _seed(self) -> list[SavedResume]:
        template = SavedResume(
            id=generate_id(),
            name=TEMPLATE_RESUME_NAME,
            content=TEMPLATE_RESUME,
            job_description="",
            saved_at=utcnow(),
        )
        self._write([template])
        return [template]

    def _read(self) -> list[SavedResume]:
        if not self.path.exists() or not self.path.read_text(encoding="utf-8").strip():
            return self._seed()
        return _resume_list.validate_json(self.path.read_text(encoding="utf-8"))

    def _write(self, resumes: list[SavedResume]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps([r.to_wire() for r in resumes], indent=2), encoding="utf-8")
        tmp.replace(self.path)

    async def list(self) -> list[SavedResume]:
        return newest_first(self._read())

    async def save(self, name: str, content: str, job_description: str = "") -> SavedResume:
        existing = self._read()
        record = SavedResume(
            id=generate_id(),
            name=name,
            content=content,
            job_description=job_description,
            saved_at=utcnow(),
        )
        self._write([record, *existing])
        return record

    async def delete(self, resume_id: str) -> dict:
        existing = self._read()
        remaining = [r for r in existing if r.id != resume_id]
        if len(remaining) == len(existing):
            raise NotFoundError(f"Resume with ID {resume_id} not found")
        self._write(remaining)
        return {"success": True}

    async def update(self, resume_id: str, **fields) -> SavedResume:
        _check_fields(fields)
        resumes = self._read()
        for i, record in enumerate(resumes):
            if record.id == resume_id:
                resumes[i] = record.model_copy(update=fields)
                self._write(resumes)
                return resumes[i]
        raise NotFoundError(f"Resume with ID {resume_id} not found")


class FallbackResumeStore(RecordStore):
    """Remote first; local on UnavailableError."""

    def __init__(self, remote: RecordStore, local: RecordStore):
        self.remote = remote
        self.local = local

    async def _run(self, operation: str, *args, **kwargs):
        try:
            return await getattr(self.remote, operation)(*args, **kwargs)
        except UnavailableError as e:
            logger.warning("%s: remote store failed (%s), using local store", operation, e.message)
        return await getattr(self.local, operation)(*args, **kwargs)

    async def list(self) -> list[SavedResume]:
        return await self._run("list")

    async def save(self, name: str, content: str, job_description: str = "") -> SavedResume:
        return await self._run("save", name, content, job_description)

    async def delete(self, resume_id: str) -> dict:
        return await self._run("delete", resume_id)

    async def update(self, resume_id: str, **fields) -> SavedResume:
        return await self._run("update", resume_id, **fields)
