# eventsync/models/schemas.py
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from eventsync.models.constants import MOOD_NEUTRAL


class EventCreate(BaseModel):
    title: str
    description: str = ""


class Event(BaseModel):
    id: int
    title: str
    description: str = ""


class FeedbackCreate(BaseModel):
    # Optional so a missing field reaches the blank-text check instead of a 422
    text: Optional[str] = None


class SentimentAnalysis(BaseModel):
    """Normalized classifier output, consumed once to build a Feedback."""
    mood: str = MOOD_NEUTRAL
    scores: Dict[str, float] = Field(default_factory=dict)


class FeedbackDraft(BaseModel):
    """A scored feedback entry that has not been assigned an id yet."""
    model_config = ConfigDict(frozen=True)

    eventId: int
    text: str
    mood: str = MOOD_NEUTRAL
    positiveScore: float = Field(default=0.0, ge=0.0, le=1.0, allow_inf_nan=False)
    neutralScore: float = Field(default=0.0, ge=0.0, le=1.0, allow_inf_nan=False)
    negativeScore: float = Field(default=0.0, ge=0.0, le=1.0, allow_inf_nan=False)
    timestamp: datetime


class Feedback(FeedbackDraft):
    id: int


class FeedbackExample(BaseModel):
    text: str
    mood: str
    positiveScore: float = Field(default=0.0, ge=0.0, le=1.0, allow_inf_nan=False)
    neutralScore: float = Field(default=0.0, ge=0.0, le=1.0, allow_inf_nan=False)
    negativeScore: float = Field(default=0.0, ge=0.0, le=1.0, allow_inf_nan=False)


class AggregateSummary(BaseModel):
    total: int
    positive: int
    neutral: int
    negative: int
    summary: str
    examples: List[FeedbackExample] = Field(default_factory=list)
