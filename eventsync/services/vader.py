# eventsync/services/vader.py
from __future__ import annotations

from typing import Dict

from eventsync.core.logger import get_logger

logger = get_logger("vader")


def _load_analyzer():
    import nltk
    from nltk.sentiment import SentimentIntensityAnalyzer

    try:
        return SentimentIntensityAnalyzer()
    except LookupError:
        logger.info("Downloading vader_lexicon for NLTK")
        nltk.download("vader_lexicon", quiet=True)
        return SentimentIntensityAnalyzer()


class VaderClassifier:
    """
    Offline classifier backed by NLTK's VADER lexicon.
    Answers with the direct positive/neutral/negative mapping shape.
    """

    name = "vader"

    def __init__(self, analyzer=None):
        self._sia = analyzer

    @property
    def analyzer(self):
        if self._sia is None:
            self._sia = _load_analyzer()
        return self._sia

    def classify(self, text: str) -> Dict[str, float]:
        scores = self.analyzer.polarity_scores(text)
        return {
            "positive": scores.get("pos", 0.0),
            "neutral": scores.get("neu", 0.0),
            "negative": scores.get("neg", 0.0),
        }
