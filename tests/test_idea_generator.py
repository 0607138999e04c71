from __future__ import annotations

import json
import random
from dataclasses import fields

import pytest
from conftest import idea_payload, make_client
from openai import AsyncOpenAI

from services.idea_generator import IdeaGeneratorService, IdeaSource, build_openai_client
from services.idea_models import GenerationRequest, VideoIdeaContent
from services.mock_ideas import MockIdeaProducer
from services.prompt_builder import SYSTEM_PROMPT, PromptBuilder

REQUIRED_FIELDS = (
    "title",
    "outline",
    "mid_video_mention",
    "end_video_mention",
    "thumbnail_idea",
    "interaction_question",
    "category",
    "subcategory",
    "video_length",
)


def _assert_well_formed(idea: VideoIdeaContent) -> None:
    names = {item.name for item in fields(idea)}
    for name in REQUIRED_FIELDS:
        assert name in names
        assert getattr(idea, name) is not None


async def test_missing_client_returns_mock_without_call(generation_request: GenerationRequest) -> None:
    service = IdeaGeneratorService(client=None)

    outcome = await service.generate_with_source(generation_request)

    assert outcome.source == IdeaSource.fallback
    assert outcome.content == MockIdeaProducer().produce(generation_request)
    assert await service.generate(generation_request) == outcome.content


async def test_successful_response_is_parsed(generation_request: GenerationRequest) -> None:
    client = make_client(content=idea_payload())
    service = IdeaGeneratorService(client=client, prompt_builder=PromptBuilder(rng=random.Random(0)))

    outcome = await service.generate_with_source(generation_request)

    assert outcome.source == IdeaSource.openai
    assert outcome.content.title == "7 Editing HACKS That Save You HOURS Every Week"
    assert outcome.content.outline == [f"Point {index}" for index in range(1, 9)]
    assert outcome.content.thumbnail_idea.startswith("Creator pointing")


async def test_request_uses_model_temperature_and_json_format(generation_request: GenerationRequest) -> None:
    client = make_client(content=idea_payload())
    builder = PromptBuilder(rng=random.Random(5))
    expected_prompt = PromptBuilder(rng=random.Random(5)).build(generation_request)
    service = IdeaGeneratorService(client=client, prompt_builder=builder, model="gpt-4o", temperature=0.7)

    await service.generate(generation_request)

    calls = client.chat.completions.calls
    assert len(calls) == 1
    assert calls[0]["model"] == "gpt-4o"
    assert calls[0]["temperature"] == 0.7
    assert calls[0]["response_format"] == {"type": "json_object"}
    assert calls[0]["messages"] == [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": expected_prompt},
    ]


async def test_echo_fields_come_from_request(generation_request: GenerationRequest) -> None:
    client = make_client(content=idea_payload(category="Gaming", subcategory="Esports", videoLength="Long"))
    service = IdeaGeneratorService(client=client)

    idea = await service.generate(generation_request)

    assert (idea.category, idea.subcategory, idea.video_length) == (
        generation_request.category,
        generation_request.subcategory,
        generation_request.video_length,
    )


async def test_partial_response_passes_through(generation_request: GenerationRequest) -> None:
    client = make_client(content=json.dumps({"title": "Only a title"}))
    service = IdeaGeneratorService(client=client)

    outcome = await service.generate_with_source(generation_request)

    assert outcome.source == IdeaSource.openai
    assert outcome.content.title == "Only a title"
    assert outcome.content.outline == []
    assert outcome.content.mid_video_mention == ""


@pytest.mark.parametrize(
    ("content", "error"),
    [
        (None, RuntimeError("connection reset")),
        (None, None),
        ("", None),
        ("not json at all", None),
        ('["a", "list"]', None),
    ],
)
async def test_failures_fall_back_to_mock(
    generation_request: GenerationRequest,
    content: str | None,
    error: Exception | None,
) -> None:
    client = make_client(content=content, error=error)
    service = IdeaGeneratorService(client=client)

    outcome = await service.generate_with_source(generation_request)

    assert outcome.source == IdeaSource.fallback
    assert outcome.content == MockIdeaProducer().produce(generation_request)
    assert len(client.chat.completions.calls) == 1
    _assert_well_formed(outcome.content)


async def test_gaming_request_without_credential() -> None:
    request = GenerationRequest(
        category="Gaming",
        subcategory="Esports",
        video_focus="tournament highlights",
        video_length="Short (1-3 min)",
        template_style="listicle",
        content_tone="energetic",
    )

    idea = await IdeaGeneratorService(client=build_openai_client(None)).generate(request)

    assert idea.category == "Gaming"
    assert idea.video_length == "Short (1-3 min)"
    assert len(idea.outline) >= 7


def test_build_openai_client() -> None:
    assert build_openai_client(None) is None
    assert build_openai_client("") is None
    assert isinstance(build_openai_client("sk-test"), AsyncOpenAI)


async def test_nested_script_sections_are_flattened_to_text(generation_request: GenerationRequest) -> None:
    payload = idea_payload(
        fullScript={"Hook": "Stop scrolling!", "Main": {"points": ["a", "b"]}},
        timings={"Hook": "0:00 - 0:15", "Main": 90},
    )
    service = IdeaGeneratorService(client=make_client(content=payload))

    idea = await service.generate(generation_request)

    assert idea.full_script == {"Hook": "Stop scrolling!", "Main": '{"points": ["a", "b"]}'}
    assert idea.timings == {"Hook": "0:00 - 0:15", "Main": "90"}


async def test_structured_values_are_rendered_as_json_text(generation_request: GenerationRequest) -> None:
    payload = idea_payload(
        outline=["Intro", {"point": "Setup", "seconds": 30}, 42],
        thumbnailIdea={"text": "7 HACKS", "colors": ["red", "yellow"]},
        timings=["0:00 Intro", True],
    )
    service = IdeaGeneratorService(client=make_client(content=payload))

    idea = await service.generate(generation_request)

    assert idea.outline == ["Intro", '{"point": "Setup", "seconds": 30}', "42"]
    assert idea.thumbnail_idea == '{"text": "7 HACKS", "colors": ["red", "yellow"]}'
    assert idea.timings == ["0:00 Intro", "true"]
