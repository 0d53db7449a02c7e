# eventsync/services/feedback_ingest.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, List

from eventsync.analysis.feedback_summary import summarize_feedback
from eventsync.analysis.sentiment import normalize, to_score_triple
from eventsync.analysis.text_limiter import TextLimiter
from eventsync.core.errors import EmptyFeedbackError, EventNotFoundError
from eventsync.core.logger import get_logger
from eventsync.models.schemas import (
    AggregateSummary,
    Event,
    Feedback,
    FeedbackDraft,
    SentimentAnalysis,
)
from eventsync.services.collaborators import (
    NarrativeSummarizer,
    SentimentClassifier,
    call_collaborator,
)
from eventsync.services.store import FeedbackStore

logger = get_logger("feedback_ingest")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EventSyncService:
    """
    Runs each feedback submission through
    sanitize -> limit -> score -> persist,
    and builds event summaries on request.
    """

    def __init__(
        self,
        store: FeedbackStore,
        classifier: SentimentClassifier,
        summarizer: NarrativeSummarizer,
        limiter: TextLimiter | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.store = store
        self.classifier = classifier
        self.summarizer = summarizer
        self.limiter = limiter or TextLimiter()
        self.clock = clock

    def create_event(self, title: str, description: str = "") -> Event:
        event = self.store.save_event(title, description)
        logger.info("Created event %s (%r)", event.id, event.title)
        return event

    def list_events(self) -> List[Event]:
        return self.store.list_events()

    def _require_event(self, event_id: int) -> Event:
        event = self.store.find_event_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def score(self, text: str) -> SentimentAnalysis:
        result = call_collaborator(self.classifier.name, self.classifier.classify, text)
        if not result.ok:
            return SentimentAnalysis()
        return normalize(result.value)

    def add_feedback(self, event_id: int, text: str | None) -> Feedback:
        cleaned = self.limiter.sanitize(text)
        if not cleaned:
            raise EmptyFeedbackError()

        self._require_event(event_id)

        limited = self.limiter.cap(cleaned)
        analysis = self.score(limited)
        pos, neu, neg = to_score_triple(analysis)

        draft = FeedbackDraft(
            eventId=event_id,
            text=limited,
            mood=analysis.mood,
            positiveScore=pos,
            neutralScore=neu,
            negativeScore=neg,
            timestamp=self.clock(),
        )
        fb = self.store.save_feedback(draft)
        logger.info("Stored feedback %s for event %s (mood=%s)", fb.id, event_id, fb.mood)
        return fb

    def get_summary(self, event_id: int) -> AggregateSummary:
        self._require_event(event_id)
        feedbacks = self.store.find_feedback_by_event_id(event_id)
        logger.info("Summarizing %d feedback entries for event %s", len(feedbacks), event_id)
        return summarize_feedback(feedbacks, self.summarizer)
