from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from services.idea_models import ContentType, GenerationRequest, VideoIdeaContent


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GenerationRequestBody(CamelModel):
    category: str = Field(max_length=120)
    subcategory: str = Field(max_length=200)
    video_focus: str = Field(max_length=500)
    video_length: str = Field(max_length=64)
    template_style: str = Field(max_length=64)
    content_tone: str = Field(max_length=64)
    title_template: str | None = Field(default=None, max_length=200)
    content_type: ContentType = ContentType.idea
    timing_detail: bool = False

    def to_request(self) -> GenerationRequest:
        return GenerationRequest(
            category=self.category,
            subcategory=self.subcategory,
            video_focus=self.video_focus,
            video_length=self.video_length,
            template_style=self.template_style,
            content_tone=self.content_tone,
            title_template=self.title_template,
            content_type=self.content_type,
            timing_detail=self.timing_detail,
        )


class VideoIdeaResponse(CamelModel):
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
    def from_content(cls, content: VideoIdeaContent) -> VideoIdeaResponse:
        return cls(
            title=content.title,
            outline=content.outline,
            mid_video_mention=content.mid_video_mention,
            end_video_mention=content.end_video_mention,
            thumbnail_idea=content.thumbnail_idea,
            interaction_question=content.interaction_question,
            category=content.category,
            subcategory=content.subcategory,
            video_length=content.video_length,
            intro=content.intro,
            conclusion=content.conclusion,
            full_script=content.full_script,
            timings=content.timings,
        )
