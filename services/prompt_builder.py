from __future__ import annotations

import logging
import random

from services.idea_models import ContentType, GenerationRequest

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a YouTube video idea generator specialized in creating engaging content ideas "
    "tailored to specific niches. Your ideas should include a catchy title, an outline, "
    "and suggested mentions. Return only valid JSON."
)

IDEA_TEMPLATES: tuple[str, ...] = (
    "Top [Number] [Topic] That Will [Benefit]",
    "[Number] Ways to [Action] Without [Common Problem]",
    "How to [Achieve Result] in [Timeframe] (Step-by-Step)",
    "Why [Common Belief] is Wrong and What to Do Instead",
    "The Ultimate Guide to [Topic] for [Target Audience]",
    "[Number] [Topic] Secrets That Professionals Don't Share",
    "I Tried [Action/Product] for [Time Period] - Here's What Happened",
    "[Number] Mistakes to Avoid When [Action]",
    "The Truth About [Controversial Topic] (With Evidence)",
    "[Number] Best [Products/Tools] for [Goal] in [Current Year]",
)

BASE_TEMPLATE = """
Generate a YouTube video {deliverable} for a channel in the {category} niche, specifically about {subcategory}.
The video should focus on {video_focus} and be approximately {video_length} in length.
Use a {template_style} style with a {content_tone} tone.

IMPORTANT: Use this format for the title (adapted to your idea): "{title_template}"
Make the title IMPACTFUL, use strategic UPPERCASE words for emphasis, and keep it between 6-10 words.
"""

IDEA_INSTRUCTIONS = """
Include these elements in your response as a JSON object:
1. title: An engaging, clickable title that follows the format above
2. outline: An array of 7-12 main points to cover in the video (as strings)
3. midVideoMention: A brief mention (1-2 sentences) to include mid-video about a tool, service, or product related to silence removal or video editing
4. endVideoMention: A brief outro mention (1-2 sentences) about services like video editing, web development with Framer, or free DaVinci Resolve templates
5. thumbnailIdea: A brief description of what the thumbnail could look like
6. interactionQuestion: A question to ask viewers that would encourage comments
7. category: The provided category
8. subcategory: The provided subcategory
9. videoLength: The provided video length
"""

KEYPOINTS_INSTRUCTIONS = """
Include these elements in your response as a JSON object:
1. title: An engaging, clickable title that follows the format above
2. outline: An array of 10-15 detailed keypoints to cover in the video (as strings), each with 1-2 supporting sub-points
3. intro: A compelling introduction script (3-5 sentences) to hook viewers
4. midVideoMention: A brief mention (1-2 sentences) to include mid-video about a tool, service, or product
5. conclusion: A strong closing script (3-5 sentences) with call to action
6. thumbnailIdea: A brief description of what the thumbnail could look like
7. interactionQuestion: A question to ask viewers that would encourage comments
8. category: The provided category
9. subcategory: The provided subcategory
10. videoLength: The provided video length
"""

KEYPOINTS_TIMINGS = (
    "11. timings: For each outline point and section, provide suggested timestamps "
    "(e.g., '0:00 - 0:30: Introduction')\n"
)

FULL_SCRIPT_INSTRUCTIONS = """
Include these elements in your response as a JSON object:
1. title: An engaging, clickable title that follows the format above
2. outline: An array with a brief summary of main sections (5-7 points)
3. fullScript: The complete word-for-word script divided by sections, including:
   - Hook (initial 15 seconds to grab attention)
   - Introduction (explaining what the video will cover)
   - Main content sections (each clearly labeled)
   - Mid-roll mention for a related product/service
   - Conclusion with summary of key points
   - Call to action for likes, comments and subscriptions
4. thumbnailIdea: A brief description of what the thumbnail could look like
5. interactionQuestion: A question to ask viewers that would encourage comments
6. category: The provided category
7. subcategory: The provided subcategory
8. videoLength: The provided video length
"""

FULL_SCRIPT_TIMINGS = "9. timings: For each section of the script, provide precise timestamps and durations\n"

FOOTER = """
For context, the channel can offer these services that you can subtly mention:
- Video editing for YouTube
- Website creation with Framer/Figma
- AI tools for content creation
- DaVinci Resolve templates
- A silence removal tool with various pricing tiers

Make the content specific, actionable, and likely to perform well on YouTube.
"""

_DELIVERABLES = {
    ContentType.idea: "idea",
    ContentType.keypoints: "keypoints outline",
    ContentType.full_script: "complete script",
}


class PromptBuilder:
    """Turn a generation request into the user prompt for the completion service."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def select_template(self, request: GenerationRequest) -> str:
        if request.title_template:
            return request.title_template
        return self._rng.choice(IDEA_TEMPLATES)

    def _instructions(self, request: GenerationRequest) -> str:
        if request.content_type == ContentType.keypoints:
            timings = KEYPOINTS_TIMINGS if request.timing_detail else ""
            return KEYPOINTS_INSTRUCTIONS + timings
        if request.content_type == ContentType.full_script:
            timings = FULL_SCRIPT_TIMINGS if request.timing_detail else ""
            return FULL_SCRIPT_INSTRUCTIONS + timings
        return IDEA_INSTRUCTIONS

    def build(self, request: GenerationRequest) -> str:
        title_template = self.select_template(request)
        logger.debug("Building %s prompt with title template %r", request.content_type.value, title_template)
        base = BASE_TEMPLATE.format(
            deliverable=_DELIVERABLES.get(request.content_type, "idea"),
            category=request.category,
            subcategory=request.subcategory,
            video_focus=request.video_focus,
            video_length=request.video_length,
            template_style=request.template_style,
            content_tone=request.content_tone,
            title_template=title_template,
        )
        return base + self._instructions(request) + FOOTER
