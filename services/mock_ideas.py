from __future__ import annotations

from dataclasses import replace

from services.idea_models import ContentType, GenerationRequest, VideoIdeaContent

DEFAULT_TITLE_TEMPLATE = "Top [Número] Secretos que Nadie te Cuenta sobre [Tema]"

# "[Tema]" maps to the request subcategory; every other token has a fixed value.
TITLE_SUBSTITUTIONS: tuple[tuple[str, str | None], ...] = (
    ("[Número]", "7"),
    ("[Tema]", None),
    ("[Acción]", "crear contenido"),
    ("[Objetivo]", "mejorar tu contenido"),
    ("[Obstáculo]", "perder tiempo"),
    ("[Aspecto de Vida]", "canal de YouTube"),
    ("[Área de Vida]", "productividad"),
    ("[Meta]", "crecimiento en YouTube"),
    ("[Resultado]", "videos profesionales"),
    ("[Resultado brutal]", "ediciones perfectas"),
)

MOCK_OUTLINE: tuple[str, ...] = (
    "Introduction to the importance of AI in content creation",
    "Tool #1: GPT-4 for script writing and idea generation",
    "Tool #2: Midjourney for thumbnail creation without design skills",
    "Tool #3: Descript for automatic transcription and editing",
    "Tool #4: RunwayML for special effects without After Effects",
    "Tool #5: Our silence remover tool for cleaner audio",
    "Tool #6: Synthesia for creating videos without showing your face",
    "Tool #7: Opus Clip for auto-generating shorts from long-form content",
    "Comparison of pricing and features",
    "How to integrate these tools into your workflow",
    "Conclusion and recommendations",
)

MOCK_MID_VIDEO_MENTION = (
    "Speaking of saving time, I've developed a silence remover tool that automatically cuts out "
    "awkward pauses in your videos. It's available with a free tier, and you can check it out in "
    "the description below."
)
MOCK_END_VIDEO_MENTION = (
    "If you found these tools helpful, I also offer professional video editing services, website "
    "creation with Framer, and free DaVinci Resolve templates. Check the description for more details!"
)
MOCK_THUMBNAIL_IDEA = (
    "Split-screen showing a stressed creator before using AI tools and a relaxed creator after, "
    "with text overlay saying '7 AI TOOLS THAT CHANGED EVERYTHING'"
)
MOCK_INTERACTION_QUESTION = (
    "Which of these AI tools would you be most excited to try in your content creation process? "
    "Let me know in the comments!"
)

MOCK_INTRO = (
    "¿Estás cansado de perder horas editando tus videos? En este video, te mostraré 7 herramientas "
    "de IA que transformarán tu proceso de creación de contenido para siempre. Estas herramientas no "
    "solo te ahorrarán tiempo, sino que también elevarán la calidad de tus videos sin necesidad de "
    "ser un experto en edición."
)
MOCK_CONCLUSION = (
    "¡Y eso es todo! Estas 7 herramientas de IA pueden transformar completamente tu flujo de trabajo "
    "de creación de contenido. Recuerda comenzar con una o dos que mejor se adapten a tus necesidades "
    "inmediatas y luego expandirte desde allí. ¡No olvides suscribirte para más consejos de contenido "
    "y dejar un comentario sobre qué herramienta te pareció más útil!"
)

MOCK_FULL_SCRIPT: dict[str, str] = {
    "Hook": (
        "¿Alguna vez te has quedado mirando un video a medio editar, preguntándote por qué te lleva "
        "tantas horas? ¿Y si te dijera que puedes reducir ese tiempo en un 70%? En este video, te "
        "revelaré 7 herramientas de IA que están revolucionando cómo los creadores producen contenido "
        "en 2024."
    ),
    "Introducción": (
        "Hola a todos, bienvenidos a Red Creativa Gen, donde te ayudamos a crear mejor contenido, más "
        "rápido. Hoy vamos a explorar 7 herramientas de IA que están cambiando el juego para creadores "
        "de YouTube. Estas no son herramientas experimentales - son soluciones probadas que uso a diario "
        "en mi propio canal. Vamos a ver cómo cada una puede encajar en tu flujo de trabajo y "
        "revolucionar tu contenido."
    ),
    "Sección 1 - GPT-4": (
        "La primera herramienta es GPT-4 para guiones e ideas. Esta IA conversacional ha mejorado "
        "enormemente en el último año. Yo la uso para generar ideas de videos, crear esquemas "
        "estructurados e incluso escribir secciones completas de guiones cuando me quedo sin "
        "inspiración. Lo mejor es que puedes darle ejemplos de tu estilo de escritura y adaptará su "
        "salida para que suene como tú..."
    ),
    "Mid-roll": (
        "Antes de continuar con el resto de estas increíbles herramientas, quiero mencionar que he "
        "desarrollado un removedor de silencios que elimina automáticamente las pausas incómodas en tus "
        "videos. Está disponible con un nivel gratuito, y puedes revisarlo en la descripción a continuación."
    ),
    "Conclusión": (
        "Estas 7 herramientas de IA pueden transformar completamente tu contenido de YouTube. Comienza "
        "con una o dos que se alineen con tus mayores desafíos, e irás notando la diferencia "
        "inmediatamente. Recuerda que la IA está para potenciar tu creatividad, no para reemplazarla. "
        "Tu voz única y perspectiva sigue siendo lo que hace que tu canal sea especial."
    ),
    "Call to action": (
        "Si encuentras útil este tipo de contenido, asegúrate de darle like y suscribirte para más "
        "tutoriales sobre productividad para creadores. Y déjame saber en los comentarios: ¿Cuál de "
        "estas herramientas de IA estás más emocionado por probar en tu proceso de creación de contenido?"
    ),
}

MOCK_TIMINGS: dict[str, str] = {
    "Hook": "0:00 - 0:20",
    "Introducción": "0:20 - 1:30",
    "Sección 1 - GPT-4": "1:30 - 3:00",
    "Sección 2 - Midjourney": "3:00 - 4:30",
    "Sección 3 - Descript": "4:30 - 6:00",
    "Sección 4 - RunwayML": "6:00 - 7:30",
    "Mid-roll": "7:30 - 8:00",
    "Sección 5 - Removedor de silencios": "8:00 - 9:30",
    "Sección 6 - Synthesia": "9:30 - 11:00",
    "Sección 7 - Opus Clip": "11:00 - 12:30",
    "Comparación y flujo de trabajo": "12:30 - 14:00",
    "Conclusión": "14:00 - 14:45",
    "Call to action": "14:45 - 15:00",
}


def format_title(template: str, subcategory: str) -> str:
    """Replace the first occurrence of each known placeholder; unknown ones stay verbatim."""
    title = template
    for token, value in TITLE_SUBSTITUTIONS:
        title = title.replace(token, subcategory if value is None else value, 1)
    return title


class MockIdeaProducer:
    """Offline idea synthesis used when the completion service is unavailable."""

    def produce(self, request: GenerationRequest) -> VideoIdeaContent:
        title = format_title(request.title_template or DEFAULT_TITLE_TEMPLATE, request.subcategory)
        idea = VideoIdeaContent(
            title=title,
            outline=list(MOCK_OUTLINE),
            mid_video_mention=MOCK_MID_VIDEO_MENTION,
            end_video_mention=MOCK_END_VIDEO_MENTION,
            thumbnail_idea=MOCK_THUMBNAIL_IDEA,
            interaction_question=MOCK_INTERACTION_QUESTION,
            category=request.category,
            subcategory=request.subcategory,
            video_length=request.video_length,
        )

        if request.content_type == ContentType.keypoints:
            return replace(idea, intro=MOCK_INTRO, conclusion=MOCK_CONCLUSION)
        if request.content_type == ContentType.full_script:
            return replace(idea, full_script=dict(MOCK_FULL_SCRIPT), timings=dict(MOCK_TIMINGS))
        return idea
