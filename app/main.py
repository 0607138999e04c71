from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from starlette.responses import JSONResponse

from app.core.config import Settings, get_settings
from app.core.logging_config import configure_logging
from routers import calendar, ideas
from scheduler.job_runner import SchedulerConfig, start_scheduler
from services.idea_generator import IdeaGeneratorService, build_openai_client
from services.idea_store import IdeaStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    generator: IdeaGeneratorService | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        client = None
        idea_generator = generator
        if idea_generator is None:
            client = build_openai_client(settings.openai_api_key)
            idea_generator = IdeaGeneratorService(
                client=client,
                model=settings.openai_model,
                temperature=settings.openai_temperature,
            )
        app.state.idea_generator = idea_generator
        app.state.idea_store = IdeaStore(Path(settings.output_path))

        scheduler = None
        if settings.enable_scheduler:
            scheduler = start_scheduler(
                SchedulerConfig(
                    generator=app.state.idea_generator,
                    store=app.state.idea_store,
                    day_of_week=settings.scheduler_day_of_week,
                    hour=settings.scheduler_hour,
                )
            )
            logger.info("Weekly batch scheduler started")

        try:
            yield
        finally:
            if scheduler is not None:
                scheduler.shutdown(wait=False)
            if client is not None:
                await client.close()

    docs_url = "/docs" if settings.enable_docs else None
    redoc_url = "/redoc" if settings.enable_docs else None
    openapi_url = "/openapi.json" if settings.enable_docs else None
    app = FastAPI(
        title=settings.project_name,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
        lifespan=lifespan,
    )

    if settings.environment == "production":
        app.add_middleware(HTTPSRedirectMiddleware)

    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=settings.allowed_hosts,
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
        expose_headers=["X-Idea-Source"],
    )

    limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(_: Request, exc: RateLimitExceeded) -> JSONResponse:
        return JSONResponse(status_code=429, content={"detail": str(exc)})

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):  # type: ignore[no-untyped-def]
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        response.headers["X-XSS-Protection"] = "0"
        response.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"
        response.headers["Content-Security-Policy"] = "default-src 'self'"
        return response

    app.include_router(ideas.router, prefix=settings.api_v1_prefix)
    app.include_router(calendar.router, prefix=settings.api_v1_prefix)
    return app
