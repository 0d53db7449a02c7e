# eventsync/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventsync import __version__
from eventsync.analysis.text_limiter import TextLimiter
from eventsync.core.config import Settings, load_settings
from eventsync.core.logger import configure_logging, get_logger
from eventsync.routes.events import router as events_router
from eventsync.routes.root import router as root_router
from eventsync.services.feedback_ingest import EventSyncService
from eventsync.services.providers import build_classifier, build_store, build_summarizer

logger = get_logger("main")


def create_app(settings: Settings | None = None, service: EventSyncService | None = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.LOG_LEVEL)

    if service is None:
        service = EventSyncService(
            store=build_store(settings),
            classifier=build_classifier(settings),
            summarizer=build_summarizer(settings),
            limiter=TextLimiter(settings.limits()),
        )

    app = FastAPI(
        title="EventSync – Event Feedback",
        version=__version__,
    )

    # CORS (relaxed; tighten if needed)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.service = service

    app.include_router(root_router)
    app.include_router(events_router)

    logger.info(
        "EventSync ready (sentiment=%s, summary=%s, storage=%s)",
        settings.SENTIMENT_PROVIDER,
        settings.SUMMARY_PROVIDER,
        settings.STORAGE,
    )
    return app
