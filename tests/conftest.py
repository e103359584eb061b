"""Shared fixtures: fake model service, SQLite-backed API client, canned analysis."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from jobmatch.agents.model import get_model_service
from jobmatch.api.app import app
from jobmatch.api.limiter import limiter
from jobmatch.config import settings
from jobmatch.db.base import init_db, reset_engine
from jobmatch.tools import hiring_cafe

ANALYSIS_PAYLOAD = {
    "matchScore": 70,
    "summary": "Decent fit",
    "strengths": ["Call handling"],
    "gaps": ["No CRM experience"],
    "matchedKeywords": [],
    "missingKeywords": [{"keyword": "CRM", "definition": "Customer relationship management software"}],
    "improvementSuggestions": [
        {
            "originalText": "Managed inbound calls.",
            "suggestedRewrite": "Managed 50+ inbound calls daily.",
            "suggestionType": "Add Metrics",
        }
    ],
    "coverLetterDraft": "Dear Hiring Manager...",
}


class FakeModel:
    """Stands in for ModelService: returns queued replies and records calls."""

    def __init__(self, *replies: str | Exception):
        self.replies = list(replies)
        self.calls: list[dict] = []

    async def generate(self, prompt, *, temperature=None, response_schema=None, tools=None, tool_config=None):
        self.calls.append(
            {
                "prompt": prompt,
                "temperature": temperature,
                "response_schema": response_schema,
                "tools": tools,
                "tool_config": tool_config,
            }
        )
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def fake_model():
    return FakeModel()


@pytest.fixture(autouse=True)
def _no_rate_limit():
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture(autouse=True)
def _clear_listing_cache():
    hiring_cafe.clear_cache()
    yield
    hiring_cafe.clear_cache()


@pytest.fixture
def no_database(monkeypatch):
    monkeypatch.setattr(settings, "database_url", "")
    reset_engine()
    yield
    reset_engine()


@pytest.fixture
def database(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "database_url", f"sqlite:///{tmp_path / 'jobmatch.db'}")
    reset_engine()
    init_db()
    yield
    reset_engine()


@pytest.fixture
def client(fake_model):
    app.dependency_overrides[get_model_service] = lambda: fake_model
    yield TestClient(app)
    app.dependency_overrides.clear()
