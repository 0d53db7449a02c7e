# eventsync/utils/token_utils.py
"""
Rough token estimation: one token is taken to be four characters.
Good enough to keep classifier inputs under the model's window without
shipping a tokenizer.
"""
import math

from eventsync.models.constants import CHARS_PER_TOKEN


def estimate_tokens(text: str | None) -> int:
    if not text or not text.strip():
        return 0
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def trim_to_token_limit(text: str | None, max_tokens: int) -> str:
    if text is None:
        return ""
    max_chars = int(max_tokens * CHARS_PER_TOKEN)
    if len(text) <= max_chars:
        return text
    return text[:max_chars]
