from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from app.dependencies import get_batch_planner, get_idea_store
from schemas.calendar import (
    BatchGenerationRequest,
    BatchGenerationResponse,
    BatchIdeaRequest,
    CalendarEntryResponse,
    CalendarResponse,
)
from services.batch_planner import BatchParams, BatchPlannerService
from services.idea_store import IdeaStore, IdeaStoreError

router = APIRouter(tags=["calendar"])


@router.post("/generate-idea-batch", response_model=CalendarEntryResponse, status_code=201)
async def generate_idea_batch(
    payload: BatchIdeaRequest,
    planner: BatchPlannerService = Depends(get_batch_planner),
) -> CalendarEntryResponse:
    try:
        entry = await planner.create_entry(
            payload.to_request(),
            entry_date=payload.entry_date or date.today(),
            pillar=payload.content_pillar,
        )
    except IdeaStoreError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return CalendarEntryResponse.from_entry(entry)


@router.post("/calendar/batch", response_model=BatchGenerationResponse)
async def generate_calendar_batch(
    payload: BatchGenerationRequest,
    planner: BatchPlannerService = Depends(get_batch_planner),
) -> BatchGenerationResponse:
    result = await planner.generate_batch(
        BatchParams(
            start_date=payload.start_date,
            timeframe=payload.timeframe,
            content_type=payload.content_type,
            strategy=payload.strategy,
            content_pillar=payload.content_pillar,
        )
    )
    return BatchGenerationResponse(
        status=result.status,
        total=result.total,
        completed=result.completed,
        entries=[CalendarEntryResponse.from_entry(entry) for entry in result.entries],
    )


@router.get("/calendar", response_model=CalendarResponse)
async def list_calendar(
    start: date = Query(),
    end: date = Query(),
    store: IdeaStore = Depends(get_idea_store),
) -> CalendarResponse:
    try:
        entries = store.list_entries(start, end)
    except IdeaStoreError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return CalendarResponse(entries=[CalendarEntryResponse.from_entry(entry) for entry in entries])


@router.get("/calendar/month", response_model=CalendarResponse)
async def list_calendar_month(
    year: int = Query(ge=1, le=9999),
    month: int = Query(ge=1, le=12),
    store: IdeaStore = Depends(get_idea_store),
) -> CalendarResponse:
    try:
        entries = store.list_month(year, month)
    except IdeaStoreError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return CalendarResponse(entries=[CalendarEntryResponse.from_entry(entry) for entry in entries])
