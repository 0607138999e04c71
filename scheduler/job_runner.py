from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from services.batch_planner import BatchParams, BatchPlannerService, GenerationStrategy, Timeframe
from services.idea_generator import IdeaGeneratorService
from services.idea_models import ContentType
from services.idea_store import IdeaStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchedulerConfig:
    generator: IdeaGeneratorService
    store: IdeaStore
    day_of_week: str = "mon"
    hour: int = 7
    content_type: ContentType = ContentType.idea


class WeeklyBatchJobRunner:
    """Fill next week's content calendar via APScheduler."""

    def __init__(self, config: SchedulerConfig) -> None:
        self._config = config
        self._planner = BatchPlannerService(generator=config.generator, store=config.store)

    async def run_weekly(self, today: date | None = None) -> None:
        start_date = (today or date.today()) + timedelta(days=1)
        logger.info("Starting weekly batch job for week of %s", start_date)
        result = await self._planner.generate_batch(
            BatchParams(
                start_date=start_date,
                timeframe=Timeframe.week,
                content_type=self._config.content_type,
                strategy=GenerationStrategy.thesis,
            )
        )
        if result.status != "completed":
            logger.warning("Weekly batch job created %s of %s entries", result.completed, result.total)
            return
        logger.info("Weekly batch job completed")


def start_scheduler(config: SchedulerConfig) -> AsyncIOScheduler:
    scheduler = AsyncIOScheduler()
    runner = WeeklyBatchJobRunner(config)
    scheduler.add_job(runner.run_weekly, "cron", day_of_week=config.day_of_week, hour=config.hour, minute=0)
    scheduler.start()
    return scheduler
