# eventsync/analysis/sanitize_text.py
from __future__ import annotations

import re

from eventsync.utils.text_tools import normalize_space

# Unicode category Cc: C0 controls, DEL and C1 controls
_RE_CONTROL = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def sanitize_input(raw: str | None) -> str:
    """
    Cleans feedback text before it is limited or scored:
      - every control character becomes a space
      - whitespace runs collapse to a single space
      - leading/trailing whitespace is trimmed
    """
    if not raw:
        return ""
    return normalize_space(_RE_CONTROL.sub(" ", raw))
