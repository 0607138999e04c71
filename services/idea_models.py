from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ContentType(str, Enum):
    idea = "idea"
    keypoints = "keypoints"
    full_script = "fullScript"


@dataclass(frozen=True)
class GenerationRequest:
    category: str
    subcategory: str
    video_focus: str
    video_length: str
    template_style: str
    content_tone: str
    title_template: str | None = None
    content_type: ContentType = ContentType.idea
    timing_detail: bool = False


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def _text(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    return _as_text(value)


def _text_mapping(value: dict[Any, Any]) -> dict[str, str]:
    return {str(key): _as_text(item) for key, item in value.items()}


@dataclass(frozen=True)
class VideoIdeaContent:
    title: str
    outline: list[str]
    mid_video_mention: str
    end_video_mention: str
    thumbnail_idea: str
    interaction_question: str
    category: str
    subcategory: str
    video_length: str
    intro: str | None = None
    conclusion: str | None = None
    full_script: str | dict[str, str] | None = None
    timings: dict[str, str] | list[str] | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any], request: GenerationRequest) -> VideoIdeaContent:
        """Build content from an upstream JSON object.

        Partial shapes are accepted as-is: missing text fields become empty
        strings and a missing outline becomes an empty list. The echo fields
        always come from the request.
        """
        outline = payload.get("outline")
        if isinstance(outline, list):
            outline_items = [_as_text(item) for item in outline]
        elif isinstance(outline, str) and outline.strip():
            outline_items = [outline]
        else:
            outline_items = []

        full_script = payload.get("fullScript")
        if isinstance(full_script, dict):
            full_script = _text_mapping(full_script)
        elif full_script is not None and not isinstance(full_script, str):
            full_script = _as_text(full_script)

        timings = payload.get("timings")
        if isinstance(timings, dict):
            timings = _text_mapping(timings)
        elif isinstance(timings, list):
            timings = [_as_text(item) for item in timings]
        elif timings is not None:
            timings = [_as_text(timings)]

        return cls(
            title=_text(payload, "title"),
            outline=outline_items,
            mid_video_mention=_text(payload, "midVideoMention"),
            end_video_mention=_text(payload, "endVideoMention"),
            thumbnail_idea=_text(payload, "thumbnailIdea"),
            interaction_question=_text(payload, "interactionQuestion"),
            category=request.category,
            subcategory=request.subcategory,
            video_length=request.video_length,
            intro=payload.get("intro") if isinstance(payload.get("intro"), str) else None,
            conclusion=payload.get("conclusion") if isinstance(payload.get("conclusion"), str) else None,
            full_script=full_script,
            timings=timings,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "outline": list(self.outline),
            "midVideoMention": self.mid_video_mention,
            "endVideoMention": self.end_video_mention,
            "thumbnailIdea": self.thumbnail_idea,
            "interactionQuestion": self.interaction_question,
            "category": self.category,
            "subcategory": self.subcategory,
            "videoLength": self.video_length,
        }
        extras = {
            "intro": self.intro,
            "conclusion": self.conclusion,
            "fullScript": self.full_script,
            "timings": self.timings,
        }
        data.update({key: value for key, value in extras.items() if value is not None})
        return data
