from __future__ import annotations

import calendar
import json
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Iterable

logger = logging.getLogger(__name__)


class IdeaStoreError(RuntimeError):
    """Raised when calendar entries cannot be persisted or queried."""


@dataclass(frozen=True)
class CalendarEntry:
    entry_id: str
    date: date
    title: str
    slug: str
    color: str
    notes: str
    content: dict[str, Any]
    pillar: str | None = None
    time_of_day: str = "12:00"
    completed: bool = False

    def to_record(self) -> dict[str, Any]:
        return {
            "entry_id": self.entry_id,
            "date": self.date.isoformat(),
            "time_of_day": self.time_of_day,
            "title": self.title,
            "slug": self.slug,
            "color": self.color,
            "pillar": self.pillar,
            "notes": self.notes,
            "completed": self.completed,
            "content": self.content,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> CalendarEntry:
        return cls(
            entry_id=str(record["entry_id"]),
            date=date.fromisoformat(str(record["date"])),
            title=str(record["title"]),
            slug=str(record.get("slug", "")),
            color=str(record.get("color", "")),
            notes=str(record.get("notes", "")),
            content=dict(record.get("content") or {}),
            pillar=record.get("pillar"),
            time_of_day=str(record.get("time_of_day", "12:00")),
            completed=bool(record.get("completed", False)),
        )


class IdeaStore:
    """Persist calendar entries to a JSONL file."""

    def __init__(self, output_path: Path) -> None:
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def write(self, entry: CalendarEntry) -> None:
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            with self._output_path.open("a", encoding="utf-8") as handle:
                handle.write(json.dumps(entry.to_record(), ensure_ascii=False) + "\n")
        except OSError as exc:
            raise IdeaStoreError(f"Unable to write calendar entry to {self._output_path}.") from exc

    def _iter_entries(self) -> Iterable[CalendarEntry]:
        if not self._output_path.exists():
            return

        try:
            handle = self._output_path.open("rb")
        except OSError as exc:
            raise IdeaStoreError(f"Unable to read calendar entries from {self._output_path}.") from exc

        with handle:
            for raw_line in handle:
                if not raw_line.strip():
                    continue
                try:
                    yield CalendarEntry.from_record(json.loads(raw_line.decode("utf-8")))
                except (UnicodeDecodeError, json.JSONDecodeError, KeyError, TypeError, ValueError):
                    logger.warning("Skipping invalid JSONL line in %s", self._output_path)
                    continue

    def list_entries(self, start: date, end: date) -> list[CalendarEntry]:
        if end < start:
            raise IdeaStoreError("End date must not be before start date.")
        entries = [entry for entry in self._iter_entries() if start <= entry.date <= end]
        return sorted(entries, key=lambda entry: (entry.date, entry.time_of_day))

    def list_month(self, year: int, month: int) -> list[CalendarEntry]:
        try:
            _, last_day = calendar.monthrange(year, month)
        except ValueError as exc:
            raise IdeaStoreError(f"Invalid month: {month}.") from exc
        return self.list_entries(date(year, month, 1), date(year, month, last_day))
