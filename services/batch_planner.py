from __future__ import annotations

import logging
import random
import re
import unicodedata
import uuid
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

from services.idea_generator import IdeaGeneratorService
from services.idea_models import ContentType, GenerationRequest
from services.idea_store import CalendarEntry, IdeaStore, IdeaStoreError

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#4f46e5"


class Timeframe(str, Enum):
    single = "single"
    week = "week"
    month = "month"


class GenerationStrategy(str, Enum):
    random = "random"
    thesis = "thesis"


class ContentPillar(str, Enum):
    ways_of_action = "ways_of_action"
    awareness_expansion = "awareness_expansion"
    narrative = "narrative"
    attractor = "attractor"
    nurture = "nurture"


@dataclass(frozen=True)
class PillarProfile:
    display_name: str
    color: str
    category: str
    subcategory: str
    video_focus: str
    content_tone: str


PILLAR_PROFILES: dict[ContentPillar, PillarProfile] = {
    ContentPillar.ways_of_action: PillarProfile(
        "Ways of Action (Práctico)", "#3b82f6", "Tutorial", "Guía paso a paso", "instructivo", "práctico"
    ),
    ContentPillar.awareness_expansion: PillarProfile(
        "Awareness Expansion (Educativo)", "#9333ea", "Educativo", "Conceptos clave", "educativo", "educativo"
    ),
    ContentPillar.narrative: PillarProfile(
        "Narrative (Historias)", "#d97706", "Storytelling", "Experiencia personal", "narrativo", "narrativo"
    ),
    ContentPillar.attractor: PillarProfile(
        "Attractor (Viral)", "#16a34a", "Viral", "Entretenimiento", "entretenimiento", "energético"
    ),
    ContentPillar.nurture: PillarProfile(
        "Nurture (Conexión)", "#dc2626", "Conexión", "Reflexión", "reflexivo", "conversacional"
    ),
}

PILLAR_ROTATION: tuple[ContentPillar, ...] = tuple(ContentPillar)

_TIMEFRAME_DAYS = {
    Timeframe.single: 1,
    Timeframe.week: 7,
    Timeframe.month: 30,
}


@dataclass(frozen=True)
class BatchParams:
    start_date: date
    timeframe: Timeframe = Timeframe.week
    content_type: ContentType = ContentType.idea
    strategy: GenerationStrategy = GenerationStrategy.random
    content_pillar: ContentPillar | None = None


@dataclass(frozen=True)
class BatchResult:
    entries: list[CalendarEntry]
    total: int
    completed: int

    @property
    def status(self) -> str:
        return "completed" if self.completed == self.total else "failed"


def dates_for_timeframe(start_date: date, timeframe: Timeframe) -> list[date]:
    return [start_date + timedelta(days=offset) for offset in range(_TIMEFRAME_DAYS[timeframe])]


def color_for_pillar(pillar: ContentPillar | None) -> str:
    if pillar is None:
        return DEFAULT_COLOR
    return PILLAR_PROFILES[pillar].color


def pillar_for_index(params: BatchParams, index: int) -> ContentPillar | None:
    if params.strategy != GenerationStrategy.thesis:
        return None
    if params.content_pillar is not None:
        return params.content_pillar
    return PILLAR_ROTATION[index % len(PILLAR_ROTATION)]


def request_for_pillar(pillar: ContentPillar | None, content_type: ContentType) -> GenerationRequest:
    if pillar is None:
        category, subcategory, focus, tone = "Desarrollo Personal", "", "motivacional", "profesional"
    else:
        profile = PILLAR_PROFILES[pillar]
        category, subcategory = profile.category, profile.subcategory
        focus, tone = profile.video_focus, profile.content_tone

    return GenerationRequest(
        category=category,
        subcategory=subcategory,
        video_focus=focus,
        video_length="medio",
        template_style="educativo",
        content_tone=tone,
        content_type=content_type,
        timing_detail=content_type == ContentType.full_script,
    )


def slugify(text: str) -> str:
    normalized = unicodedata.normalize("NFD", text)
    stripped = "".join(char for char in normalized if not unicodedata.combining(char))
    slug = re.sub(r"\s+", "-", stripped.lower().strip())
    slug = re.sub(r"[^\w\-]+", "", slug, flags=re.ASCII)
    slug = re.sub(r"-{2,}", "-", slug)
    return slug.strip("-")


def generate_slug(text: str, rng: random.Random | None = None) -> str:
    slug = slugify(text)
    if not slug:
        slug = f"idea-{(rng or random.Random()).randrange(10000)}"
    return slug


class BatchPlannerService:
    """Generate ideas for a range of dates and place them on the content calendar."""

    def __init__(
        self,
        generator: IdeaGeneratorService,
        store: IdeaStore,
        rng: random.Random | None = None,
    ) -> None:
        self._generator = generator
        self._store = store
        self._rng = rng or random.Random()

    async def create_entry(
        self,
        request: GenerationRequest,
        entry_date: date,
        pillar: ContentPillar | None = None,
    ) -> CalendarEntry:
        idea = await self._generator.generate(request)
        entry = CalendarEntry(
            entry_id=uuid.uuid4().hex,
            date=entry_date,
            title=idea.title,
            slug=generate_slug(idea.title, self._rng),
            color=color_for_pillar(pillar),
            pillar=pillar.value if pillar else None,
            notes=f"Idea generada automáticamente - {request.content_type.value}",
            content=idea.to_dict(),
        )
        self._store.write(entry)
        return entry

    async def generate_batch(self, params: BatchParams) -> BatchResult:
        dates = dates_for_timeframe(params.start_date, params.timeframe)
        logger.info("Generating %s ideas from %s (%s)", len(dates), params.start_date, params.strategy.value)

        entries: list[CalendarEntry] = []
        for index, entry_date in enumerate(dates):
            pillar = pillar_for_index(params, index)
            if pillar is not None:
                logger.debug("Idea %s of %s uses pillar %s", index + 1, len(dates), PILLAR_PROFILES[pillar].display_name)
            request = request_for_pillar(pillar, params.content_type)
            try:
                entry = await self.create_entry(request, entry_date, pillar)
            except IdeaStoreError as exc:
                logger.warning("Batch generation failed for %s: %s", entry_date, exc)
                continue
            entries.append(entry)

        result = BatchResult(entries=entries, total=len(dates), completed=len(entries))
        logger.info("Batch generation %s: %s of %s ideas created", result.status, result.completed, result.total)
        return result
