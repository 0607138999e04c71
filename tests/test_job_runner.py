from __future__ import annotations

from datetime import date

from scheduler.job_runner import SchedulerConfig, WeeklyBatchJobRunner
from services.idea_generator import IdeaGeneratorService
from services.idea_store import IdeaStore


async def test_weekly_job_fills_next_week(store: IdeaStore) -> None:
    runner = WeeklyBatchJobRunner(SchedulerConfig(generator=IdeaGeneratorService(client=None), store=store))

    await runner.run_weekly(today=date(2025, 9, 7))

    entries = store.list_entries(date(2025, 9, 1), date(2025, 9, 30))
    assert [entry.date for entry in entries] == [date(2025, 9, day) for day in range(8, 15)]
    assert entries[0].pillar == "ways_of_action"
    assert entries[-1].pillar == "awareness_expansion"
