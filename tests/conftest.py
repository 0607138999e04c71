from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from services.idea_generator import IdeaGeneratorService
from services.idea_models import GenerationRequest
from services.idea_store import IdeaStore


class FakeCompletions:
    def __init__(self, content: str | None = None, error: Exception | None = None) -> None:
        self._content = content
        self._error = error
        self.calls: list[dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        message = SimpleNamespace(content=self._content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_client(content: str | None = None, error: Exception | None = None) -> SimpleNamespace:
    return SimpleNamespace(chat=SimpleNamespace(completions=FakeCompletions(content=content, error=error)))


def idea_payload(**overrides: Any) -> str:
    payload: dict[str, Any] = {
        "title": "7 Editing HACKS That Save You HOURS Every Week",
        "outline": [f"Point {index}" for index in range(1, 9)],
        "midVideoMention": "Try our silence remover to cut pauses automatically.",
        "endVideoMention": "Check the description for editing services and templates.",
        "thumbnailIdea": "Creator pointing at a timeline with big red arrows.",
        "interactionQuestion": "Which hack will you try first?",
        "category": "Tech",
        "subcategory": "Video editing",
        "videoLength": "Medium (5-10 min)",
    }
    payload.update(overrides)
    return json.dumps(payload)


@pytest.fixture
def generation_request() -> GenerationRequest:
    return GenerationRequest(
        category="Tech",
        subcategory="edición de video",
        video_focus="saving time while editing",
        video_length="Medium (5-10 min)",
        template_style="listicle",
        content_tone="energetic",
    )


@pytest.fixture
def store(tmp_path: Path) -> IdeaStore:
    return IdeaStore(tmp_path / "calendar.jsonl")


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        openai_api_key=None,
        output_path=str(tmp_path / "calendar.jsonl"),
        rate_limit="1000/minute",
    )


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    app = create_app(settings=settings, generator=IdeaGeneratorService(client=None))
    with TestClient(app) as test_client:
        yield test_client
