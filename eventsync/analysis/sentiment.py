# eventsync/analysis/sentiment.py
"""
Normalizes sentiment classifier responses into a canonical SentimentAnalysis.

Providers answer in one of two shapes:

  * a list of {"label": ..., "score": ...} pairs, sometimes wrapped in one
    extra list (Hugging Face text-classification does this)
  * a mapping with "positive" / "neutral" / "negative" keys

Anything else is treated as unrecognized and falls back to a neutral result.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from eventsync.core.logger import get_logger
from eventsync.models.constants import MOOD_NEGATIVE, MOOD_NEUTRAL, MOOD_POSITIVE, MOODS
from eventsync.models.schemas import SentimentAnalysis

logger = get_logger("sentiment")


@dataclass(frozen=True)
class PairList:
    pairs: List[Any]


@dataclass(frozen=True)
class DirectScores:
    scores: Mapping[str, Any]


@dataclass(frozen=True)
class Unrecognized:
    raw: Any = None


ClassifierResponse = Union[PairList, DirectScores, Unrecognized]


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, (list, tuple))


def parse_score(value: Any) -> float:
    """
    Lenient float parsing; anything unparsable or non-finite counts as 0.0.
    Finite values are clamped into [0.0, 1.0].
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        score = float(str(value).strip())
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(score):
        return 0.0
    return min(max(score, 0.0), 1.0)


def match_label(label: Any) -> Optional[str]:
    """
    Map a provider label onto a canonical mood.
    Covers both named labels ("Positive", "NEG") and the bare
    LABEL_0/1/2 ids used by the cardiffnlp roberta models.
    """
    low = str(label).lower()
    if "pos" in low or low == "label_2":
        return MOOD_POSITIVE
    if "neu" in low or low == "label_1":
        return MOOD_NEUTRAL
    if "neg" in low or low == "label_0":
        return MOOD_NEGATIVE
    return None


def classify_response(raw: Any) -> ClassifierResponse:
    if _is_sequence(raw) and raw:
        first = raw[0]
        pairs = first if _is_sequence(first) else raw
        return PairList(pairs=list(pairs))

    if isinstance(raw, Mapping) and any(k in raw for k in MOODS):
        return DirectScores(scores=raw)

    return Unrecognized(raw=raw)


def _from_pairs(response: PairList) -> SentimentAnalysis:
    scores: Dict[str, float] = {}
    for item in response.pairs:
        if not isinstance(item, Mapping):
            continue
        label = item.get("label")
        score = item.get("score")
        if label is None or score is None:
            continue
        mood = match_label(label)
        if mood is None:
            continue
        scores[mood] = parse_score(score)

    if not scores:
        return SentimentAnalysis()

    # max() keeps the first of equal values, so ties go to insertion order
    mood = max(scores, key=scores.get)
    for m in MOODS:
        scores.setdefault(m, 0.0)
    return SentimentAnalysis(mood=mood, scores=scores)


def _from_direct(response: DirectScores) -> SentimentAnalysis:
    # Mood is intentionally left neutral here; only the pair path ranks scores.
    scores = {m: parse_score(response.scores.get(m)) for m in MOODS}
    return SentimentAnalysis(mood=MOOD_NEUTRAL, scores=scores)


def normalize(raw: Any) -> SentimentAnalysis:
    response = classify_response(raw)

    if isinstance(response, PairList):
        return _from_pairs(response)
    if isinstance(response, DirectScores):
        return _from_direct(response)

    logger.warning("Unexpected sentiment response: %r", response.raw)
    return SentimentAnalysis()


def to_score_triple(analysis: SentimentAnalysis) -> Tuple[float, float, float]:
    s = analysis.scores
    return (
        s.get(MOOD_POSITIVE, 0.0),
        s.get(MOOD_NEUTRAL, 0.0),
        s.get(MOOD_NEGATIVE, 0.0),
    )
