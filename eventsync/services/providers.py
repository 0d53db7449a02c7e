# eventsync/services/providers.py
from __future__ import annotations

from eventsync.analysis.summary_writer import OfflineSummarizer
from eventsync.core.config import Settings
from eventsync.core.database import connect
from eventsync.services.collaborators import NarrativeSummarizer, SentimentClassifier
from eventsync.services.huggingface import HuggingFaceClassifier
from eventsync.services.openrouter import OpenRouterSummarizer
from eventsync.services.store import FeedbackStore, InMemoryStore, MongoStore
from eventsync.services.vader import VaderClassifier


def build_classifier(settings: Settings) -> SentimentClassifier:
    provider = settings.SENTIMENT_PROVIDER.lower()
    if provider == "huggingface":
        return HuggingFaceClassifier(
            api_token=settings.HF_API_TOKEN,
            model=settings.HF_SENTIMENT_MODEL,
            timeout=settings.PROVIDER_TIMEOUT_SECONDS,
        )
    if provider == "vader":
        return VaderClassifier()
    raise ValueError(f"Unknown sentiment provider: {settings.SENTIMENT_PROVIDER}")


def build_summarizer(settings: Settings) -> NarrativeSummarizer:
    provider = settings.SUMMARY_PROVIDER.lower()
    if provider == "openrouter":
        return OpenRouterSummarizer(
            api_key=settings.OPENROUTER_API_KEY,
            model=settings.OPENROUTER_MODEL,
            timeout=settings.PROVIDER_TIMEOUT_SECONDS,
        )
    if provider == "gemini":
        # imported lazily so the SDK is only configured when selected
        from eventsync.services.gemini import GeminiSummarizer

        return GeminiSummarizer(
            api_key=settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            timeout=settings.PROVIDER_TIMEOUT_SECONDS,
        )
    if provider == "offline":
        return OfflineSummarizer()
    raise ValueError(f"Unknown summary provider: {settings.SUMMARY_PROVIDER}")


def build_store(settings: Settings) -> FeedbackStore:
    storage = settings.STORAGE.lower()
    if storage == "memory":
        return InMemoryStore()
    if storage == "mongo":
        store = MongoStore(connect(settings.MONGO_URI, settings.MONGO_DB))
        store.ensure_indexes()
        return store
    raise ValueError(f"Unknown storage backend: {settings.STORAGE}")
