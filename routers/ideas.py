from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from app.dependencies import get_idea_generator
from schemas.generation import GenerationRequestBody, VideoIdeaResponse
from services.idea_generator import IdeaGeneratorService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ideas"])


@router.post("/generate-idea", response_model=VideoIdeaResponse)
async def generate_idea(
    payload: GenerationRequestBody,
    response: Response,
    generator: IdeaGeneratorService = Depends(get_idea_generator),
) -> VideoIdeaResponse:
    outcome = await generator.generate_with_source(payload.to_request())
    response.headers["X-Idea-Source"] = outcome.source.value
    logger.info("Generated %s idea for %s/%s", outcome.source.value, payload.category, payload.subcategory)
    return VideoIdeaResponse.from_content(outcome.content)
