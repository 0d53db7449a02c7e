# eventsync/analysis/summary_writer.py
from __future__ import annotations

from typing import List, Sequence

SYSTEM_PROMPT = "You are a neutral event feedback analyst."

_ACTION_WORDS = ["need", "improve", "more", "should", "increase", "better", "focus on", "require"]


def build_summary_prompt(texts: Sequence[str], positive: int, neutral: int, negative: int) -> str:
    joined = "\n".join(texts)
    return (
        "You are analyzing feedback from an event.\n"
        f"Feedback entries:\n{joined}\n\n"
        "Summarize this information into a short factual report, 3-4 sentences maximum.\n"
        "Include what people generally liked and what they disliked, based strictly on the feedback text.\n"
        "Avoid adding fictional details or assumptions.\n"
        f"Stats: {positive} positive, {neutral} neutral, {negative} negative feedbacks."
    )


def _find_action_words(texts: Sequence[str]) -> bool:
    low = " ".join(texts).lower()
    return any(w in low for w in _ACTION_WORDS)


def generate_paragraph_summary(texts: Sequence[str], positive: int, neutral: int, negative: int) -> str:
    """
    Produces a short event summary without calling an LLM.
    Uses:
      - the mood distribution
      - light "action word" cues from the feedback text
    """
    total = positive + neutral + negative

    if positive >= max(neutral, negative):
        sentiment_line = "Overall attendee feedback is predominantly positive."
    elif negative > positive and negative >= neutral:
        sentiment_line = "Overall attendee feedback highlights several concerns that require attention."
    else:
        sentiment_line = "Attendee feedback is mixed, with both strengths and improvement areas noted."

    stats_line = (
        f"Of {total} responses, {positive} were positive, "
        f"{neutral} neutral and {negative} negative."
    )

    if _find_action_words(texts):
        action_line = "Attendees also suggested concrete improvements for future editions of the event."
    else:
        action_line = "The feedback largely reinforces current strengths, with limited direct requests for change."

    return " ".join([sentiment_line, stats_line, action_line]).strip()


class OfflineSummarizer:
    """Rule-based summarizer; never leaves the process."""

    name = "offline"

    def summarize(self, texts: List[str], positive: int, neutral: int, negative: int) -> str:
        return generate_paragraph_summary(texts, positive, neutral, negative)
