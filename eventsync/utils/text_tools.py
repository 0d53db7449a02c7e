# eventsync/utils/text_tools.py
import re
from typing import List

_RE_WS = re.compile(r"\s+")


def normalize_space(s: str) -> str:
    return _RE_WS.sub(" ", (s or "")).strip()


def split_words(s: str) -> List[str]:
    return [w for w in _RE_WS.split(s or "") if w]
