# eventsync/analysis/text_limiter.py
from __future__ import annotations

from eventsync.analysis.sanitize_text import sanitize_input
from eventsync.core.config import FeedbackLimits
from eventsync.utils.text_tools import split_words
from eventsync.utils.token_utils import estimate_tokens, trim_to_token_limit


def trim_to_word_limit(text: str, word_limit: int) -> str:
    words = split_words(text)
    if len(words) <= word_limit:
        return text
    return " ".join(words[:word_limit])


def trim_to_char_cap(text: str, char_cap: int) -> str:
    if len(text) <= char_cap:
        return text
    return text[:char_cap]


def apply_caps(text: str, limits: FeedbackLimits) -> str:
    """Word -> character -> approximate-token caps on already sanitized text."""
    text = trim_to_word_limit(text, limits.word_limit)
    text = trim_to_char_cap(text, limits.char_cap)
    if estimate_tokens(text) > limits.token_cap:
        text = trim_to_token_limit(text, limits.token_cap)
    return text


def limit(raw_text: str | None, word_limit: int, char_cap: int, token_cap: int) -> str:
    """
    Sanitize, then apply word -> character -> approximate-token caps in that order.
    Each cap is inclusive and none of them can make the text longer.
    Raises ValueError when a cap is not a positive integer.
    """
    limits = FeedbackLimits(word_limit=word_limit, char_cap=char_cap, token_cap=token_cap)
    return apply_caps(sanitize_input(raw_text), limits)


class TextLimiter:
    """Applies the configured FeedbackLimits to incoming feedback text."""

    def __init__(self, limits: FeedbackLimits | None = None):
        self.limits = limits or FeedbackLimits()

    def sanitize(self, raw_text: str | None) -> str:
        return sanitize_input(raw_text)

    def cap(self, sanitized: str) -> str:
        return apply_caps(sanitized, self.limits)

    def __call__(self, raw_text: str | None) -> str:
        return self.cap(self.sanitize(raw_text))
