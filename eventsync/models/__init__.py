# eventsync/models/__init__.py

from .schemas import (
    AggregateSummary,
    Event,
    EventCreate,
    Feedback,
    FeedbackCreate,
    FeedbackDraft,
    FeedbackExample,
    SentimentAnalysis,
)

__all__ = [
    "AggregateSummary",
    "Event",
    "EventCreate",
    "Feedback",
    "FeedbackCreate",
    "FeedbackDraft",
    "FeedbackExample",
    "SentimentAnalysis",
]
