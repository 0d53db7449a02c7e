# eventsync/analysis/feedback_summary.py
from __future__ import annotations

from typing import Sequence

from eventsync.models.constants import (
    MOOD_NEGATIVE,
    MOOD_NEUTRAL,
    MOOD_POSITIVE,
    NO_FEEDBACK_SUMMARY,
    SUMMARY_EXAMPLE_LIMIT,
    SUMMARY_FAILED,
)
from eventsync.models.schemas import AggregateSummary, Feedback, FeedbackExample
from eventsync.services.collaborators import NarrativeSummarizer, call_collaborator


def count_mood(feedbacks: Sequence[Feedback], mood: str) -> int:
    return sum(1 for f in feedbacks if (f.mood or "").lower() == mood)


def _example(f: Feedback) -> FeedbackExample:
    return FeedbackExample(
        text=f.text,
        mood=f.mood,
        positiveScore=f.positiveScore,
        neutralScore=f.neutralScore,
        negativeScore=f.negativeScore,
    )


def summarize_feedback(
    feedbacks: Sequence[Feedback],
    summarizer: NarrativeSummarizer,
) -> AggregateSummary:
    """
    Mood breakdown + narrative for one event's feedback (in stored order).
    The summarizer is skipped entirely when there is nothing to summarize,
    and a failing summarizer only degrades the narrative.
    """
    total = len(feedbacks)
    positive = count_mood(feedbacks, MOOD_POSITIVE)
    neutral = count_mood(feedbacks, MOOD_NEUTRAL)
    negative = count_mood(feedbacks, MOOD_NEGATIVE)

    if total == 0:
        narrative = NO_FEEDBACK_SUMMARY
    else:
        result = call_collaborator(
            summarizer.name,
            summarizer.summarize,
            [f.text for f in feedbacks],
            positive,
            neutral,
            negative,
        )
        narrative = result.value_or(SUMMARY_FAILED)

    return AggregateSummary(
        total=total,
        positive=positive,
        neutral=neutral,
        negative=negative,
        summary=narrative,
        examples=[_example(f) for f in feedbacks[:SUMMARY_EXAMPLE_LIMIT]],
    )
