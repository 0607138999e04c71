from __future__ import annotations

from fastapi import Request

from services.batch_planner import BatchPlannerService
from services.idea_generator import IdeaGeneratorService
from services.idea_store import IdeaStore


def get_idea_generator(request: Request) -> IdeaGeneratorService:
    return request.app.state.idea_generator


def get_idea_store(request: Request) -> IdeaStore:
    return request.app.state.idea_store


def get_batch_planner(request: Request) -> BatchPlannerService:
    return BatchPlannerService(
        generator=request.app.state.idea_generator,
        store=request.app.state.idea_store,
    )
