"""Tests for the hiring.cafe proxy and resume text extraction."""

import httpx
import pytest

from jobmatch.errors import UpstreamError, UpstreamTimeoutError, ValidationError
from jobmatch.tools.hiring_cafe import fetch_hiring_cafe_jobs
from jobmatch.tools.pdf_parser import extract_resume_text


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_hiring_cafe_payload_is_cached():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url)
        return httpx.Response(200, json=[{"id": "1", "title": "Barista"}])

    async with _client(handler) as client:
        first = await fetch_hiring_cafe_jobs(client)
        second = await fetch_hiring_cafe_jobs(client)

    assert first == second == [{"id": "1", "title": "Barista"}]
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_hiring_cafe_error_status():
    async with _client(lambda request: httpx.Response(500, text="boom")) as client:
        with pytest.raises(UpstreamError) as exc:
            await fetch_hiring_cafe_jobs(client)
    assert "hiring.cafe" in exc.value.message


@pytest.mark.asyncio
async def test_hiring_cafe_timeout():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    async with _client(handler) as client:
        with pytest.raises(UpstreamTimeoutError):
            await fetch_hiring_cafe_jobs(client)


def test_extract_text_rejects_empty_file():
    with pytest.raises(ValidationError):
        extract_resume_text(b"   ", "resume.txt")


def test_extract_text_rejects_broken_pdf():
    with pytest.raises(ValidationError):
        extract_resume_text(b"not a pdf", "resume.pdf")
