"""
Shared fixtures: an in-memory store plus classifier/summarizer doubles
that record how they were called.
"""
from datetime import datetime, timezone

import pytest

from eventsync.analysis.text_limiter import TextLimiter
from eventsync.core.config import FeedbackLimits, load_settings
from eventsync.services.feedback_ingest import EventSyncService
from eventsync.services.store import InMemoryStore

FIXED_NOW = datetime(2025, 5, 17, 12, 0, tzinfo=timezone.utc)

HF_POSITIVE = [[
    {"label": "LABEL_2", "score": 0.91},
    {"label": "LABEL_1", "score": 0.07},
    {"label": "LABEL_0", "score": 0.02},
]]


class FakeClassifier:
    name = "fake-classifier"

    def __init__(self, response=None, error=None):
        self.response = HF_POSITIVE if response is None else response
        self.error = error
        self.calls = []

    def classify(self, text):
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.response


class FakeSummarizer:
    name = "fake-summarizer"

    def __init__(self, narrative="People enjoyed the talks.", error=None):
        self.narrative = narrative
        self.error = error
        self.calls = []

    def summarize(self, texts, positive, neutral, negative):
        self.calls.append((list(texts), positive, neutral, negative))
        if self.error is not None:
            raise self.error
        return self.narrative


@pytest.fixture
def settings():
    return load_settings(
        SENTIMENT_PROVIDER="vader",
        SUMMARY_PROVIDER="offline",
        STORAGE="memory",
        _env_file=None,
    )


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def classifier():
    return FakeClassifier()


@pytest.fixture
def summarizer():
    return FakeSummarizer()


@pytest.fixture
def service(store, classifier, summarizer):
    return EventSyncService(
        store=store,
        classifier=classifier,
        summarizer=summarizer,
        limiter=TextLimiter(FeedbackLimits(word_limit=300, char_cap=2000, token_cap=512)),
        clock=lambda: FIXED_NOW,
    )
