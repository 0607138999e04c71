from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum

from openai import AsyncOpenAI

from services.idea_models import GenerationRequest, VideoIdeaContent
from services.mock_ideas import MockIdeaProducer
from services.prompt_builder import SYSTEM_PROMPT, PromptBuilder

logger = logging.getLogger(__name__)


class IdeaSource(str, Enum):
    openai = "openai"
    fallback = "fallback"


@dataclass(frozen=True)
class GenerationOutcome:
    content: VideoIdeaContent
    source: IdeaSource


def build_openai_client(api_key: str | None) -> AsyncOpenAI | None:
    if not api_key:
        logger.warning("OpenAI API key is not set; ideas will use mock generation")
        return None
    return AsyncOpenAI(api_key=api_key)


class IdeaGeneratorService:
    """Generate video ideas with the OpenAI chat completions API.

    Every failure path (no client, request error, empty or malformed
    response) ends in the offline mock idea, so ``generate`` never raises.
    """

    def __init__(
        self,
        client: AsyncOpenAI | None,
        prompt_builder: PromptBuilder | None = None,
        mock_producer: MockIdeaProducer | None = None,
        model: str = "gpt-4o",
        temperature: float = 0.7,
    ) -> None:
        self._client = client
        self._prompt_builder = prompt_builder or PromptBuilder()
        self._mock_producer = mock_producer or MockIdeaProducer()
        self._model = model
        self._temperature = temperature

    def _fallback(self, request: GenerationRequest) -> GenerationOutcome:
        return GenerationOutcome(content=self._mock_producer.produce(request), source=IdeaSource.fallback)

    async def generate(self, request: GenerationRequest) -> VideoIdeaContent:
        outcome = await self.generate_with_source(request)
        return outcome.content

    async def generate_with_source(self, request: GenerationRequest) -> GenerationOutcome:
        if self._client is None:
            logger.warning("No OpenAI client configured; using mock idea for %s", request.category)
            return self._fallback(request)

        prompt = self._prompt_builder.build(request)

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                response_format={"type": "json_object"},
                temperature=self._temperature,
            )
        except Exception:  # noqa: BLE001 - any upstream failure falls back to the mock idea
            logger.exception("OpenAI request failed; using mock idea")
            return self._fallback(request)

        choices = getattr(response, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        content = getattr(message, "content", None)
        if not content:
            logger.warning("Empty response from OpenAI; using mock idea")
            return self._fallback(request)

        try:
            payload = json.loads(content)
        except json.JSONDecodeError:
            logger.warning("OpenAI returned invalid JSON; using mock idea")
            return self._fallback(request)

        if not isinstance(payload, dict):
            logger.warning("OpenAI returned a JSON %s instead of an object; using mock idea", type(payload).__name__)
            return self._fallback(request)

        return GenerationOutcome(
            content=VideoIdeaContent.from_payload(payload, request),
            source=IdeaSource.openai,
        )
