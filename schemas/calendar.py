from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from schemas.generation import CamelModel, GenerationRequestBody
from services.batch_planner import ContentPillar, GenerationStrategy, Timeframe
from services.idea_models import ContentType
from services.idea_store import CalendarEntry


class BatchIdeaRequest(GenerationRequestBody):
    entry_date: date | None = Field(default=None, alias="date")
    content_pillar: ContentPillar | None = None


class BatchGenerationRequest(CamelModel):
    start_date: date
    timeframe: Timeframe = Timeframe.week
    content_type: ContentType = ContentType.idea
    strategy: GenerationStrategy = GenerationStrategy.random
    content_pillar: ContentPillar | None = None


class CalendarEntryResponse(CamelModel):
    id: str
    date: date
    time_of_day: str
    title: str
    slug: str
    color: str
    pillar: str | None = None
    notes: str
    completed: bool
    content: dict[str, Any]

    @classmethod
    def from_entry(cls, entry: CalendarEntry) -> CalendarEntryResponse:
        return cls(
            id=entry.entry_id,
            date=entry.date,
            time_of_day=entry.time_of_day,
            title=entry.title,
            slug=entry.slug,
            color=entry.color,
            pillar=entry.pillar,
            notes=entry.notes,
            completed=entry.completed,
            content=entry.content,
        )


class BatchGenerationResponse(BaseModel):
    status: str
    total: int
    completed: int
    entries: list[CalendarEntryResponse] = Field(default_factory=list)


class CalendarResponse(BaseModel):
    entries: list[CalendarEntryResponse]
