"""Tests for the resume store client: local file store and remote-first fallback."""

import json
from datetime import UTC, datetime, timedelta

import httpx
import pytest

from jobmatch.client.store import FallbackResumeStore, LocalResumeStore, RemoteResumeStore
from jobmatch.data import TEMPLATE_RESUME_NAME
from jobmatch.errors import NotFoundError, UnavailableError


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def _remote(handler) -> RemoteResumeStore:
    return RemoteResumeStore(httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://api.test/api"))


@pytest.fixture
def local(tmp_path):
    return LocalResumeStore(tmp_path / "saved_resumes.json")


@pytest.fixture
def offline(local):
    return FallbackResumeStore(remote=_remote(_unreachable), local=local)


@pytest.mark.asyncio
async def test_local_store_seeds_template_once(local):
    first = await local.list()
    second = await local.list()

    assert [r.name for r in first] == [TEMPLATE_RESUME_NAME]
    assert first == second
    assert json.loads(local.path.read_text())[0]["jobDescription"] == ""


@pytest.mark.asyncio
async def test_local_store_does_not_reseed_after_delete(local):
    (template,) = await local.list()
    await local.delete(template.id)
    assert await local.list() == []


@pytest.mark.asyncio
async def test_local_list_is_newest_first(local):
    now = datetime.now(UTC)
    records = [
        {"id": "old", "name": "Old", "content": "", "jobDescription": "", "savedAt": (now - timedelta(days=2)).isoformat()},
        {"id": "new", "name": "New", "content": "", "jobDescription": "", "savedAt": now.isoformat()},
        {"_id": "mid", "name": "Mid", "content": "", "jobDescription": "", "savedAt": (now - timedelta(days=1)).isoformat()},
    ]
    local.path.write_text(json.dumps(records))
    assert [r.id for r in await local.list()] == ["new", "mid", "old"]


@pytest.mark.asyncio
async def test_save_falls_back_and_shows_in_list(offline):
    saved = await offline.save("CRM role", "Managed inbound calls.", "CRM expert")

    listed = await offline.list()
    assert listed[0] == saved
    assert saved.job_description == "CRM expert"
    assert {r.name for r in listed} == {"CRM role", TEMPLATE_RESUME_NAME}


@pytest.mark.asyncio
async def test_update_falls_back(offline):
    saved = await offline.save("Draft", "v1")
    updated = await offline.update(saved.id, content="v2")

    assert updated.content == "v2"
    assert updated.saved_at == saved.saved_at
    assert next(r for r in await offline.list() if r.id == saved.id).content == "v2"


@pytest.mark.asyncio
async def test_delete_falls_back(offline):
    saved = await offline.save("Draft", "v1")
    assert await offline.delete(saved.id) == {"success": True}
    assert saved.id not in {r.id for r in await offline.list()}


@pytest.mark.asyncio
async def test_delete_missing_is_not_found_and_leaves_collection(offline):
    before = await offline.list()
    with pytest.raises(NotFoundError):
        await offline.delete("does-not-exist")
    assert await offline.list() == before


@pytest.mark.asyncio
async def test_update_missing_is_not_found(offline):
    with pytest.raises(NotFoundError):
        await offline.update("does-not-exist", name="x")


@pytest.mark.asyncio
async def test_update_rejects_unknown_fields(offline):
    with pytest.raises(ValueError):
        await offline.update("any", saved_at="2024-01-01")


@pytest.mark.asyncio
async def test_error_status_also_falls_back(local):
    store = FallbackResumeStore(remote=_remote(lambda request: httpx.Response(503, json={"error": "down"})), local=local)
    saved = await store.save("Offline", "text")
    assert saved.id in {r.id for r in await local.list()}


@pytest.mark.asyncio
async def test_remote_success_does_not_touch_local(local):
    now = datetime.now(UTC).isoformat()
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        if request.method == "POST":
            body = json.loads(request.content)
            return httpx.Response(201, json={"id": "srv-1", **body, "savedAt": now})
        return httpx.Response(200, json=[{"id": "srv-1", "name": "A", "content": "", "jobDescription": "", "savedAt": now}])

    store = FallbackResumeStore(remote=_remote(handler), local=local)
    saved = await store.save("A", "", "")
    listed = await store.list()

    assert saved.id == "srv-1"
    assert [r.id for r in listed] == ["srv-1"]
    assert seen == [("POST", "/api/resumes"), ("GET", "/api/resumes")]
    assert not local.path.exists()


@pytest.mark.asyncio
async def test_remote_store_raises_unavailable():
    with pytest.raises(UnavailableError):
        await _remote(_unreachable).list()


@pytest.mark.asyncio
async def test_first_local_save_lists_above_template(local):
    saved = await local.save("CRM role", "Managed inbound calls.")
    listed = await local.list()

    assert [r.name for r in listed] == ["CRM role", TEMPLATE_RESUME_NAME]
    assert listed[0].saved_at >= listed[1].saved_at
    assert listed[0] == saved
