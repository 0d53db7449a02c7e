# eventsync/services/store.py
"""
Persistence for events and their feedback.

Both stores keep the ownership one way: an event owns its ordered feedback
list, and each feedback row only carries the id of its event.
"""
from __future__ import annotations

import threading
from typing import Dict, List, Optional, Protocol

from pymongo import ASCENDING, ReturnDocument
from pymongo.database import Database

from eventsync.core.logger import get_logger
from eventsync.models.schemas import Event, Feedback, FeedbackDraft

logger = get_logger("store")


class FeedbackStore(Protocol):
    def save_event(self, title: str, description: str) -> Event:
        ...

    def find_event_by_id(self, event_id: int) -> Optional[Event]:
        ...

    def list_events(self) -> List[Event]:
        ...

    def save_feedback(self, draft: FeedbackDraft) -> Feedback:
        ...

    def find_feedback_by_event_id(self, event_id: int) -> List[Feedback]:
        ...


class InMemoryStore:
    """Process-local store; used for development and tests."""

    def __init__(self):
        self._lock = threading.Lock()
        self._events: Dict[int, Event] = {}
        self._feedback: Dict[int, List[Feedback]] = {}
        self._next_event_id = 1
        self._next_feedback_id = 1

    def save_event(self, title: str, description: str) -> Event:
        with self._lock:
            event = Event(id=self._next_event_id, title=title, description=description or "")
            self._next_event_id += 1
            self._events[event.id] = event
            self._feedback[event.id] = []
        return event

    def find_event_by_id(self, event_id: int) -> Optional[Event]:
        with self._lock:
            return self._events.get(event_id)

    def list_events(self) -> List[Event]:
        with self._lock:
            return list(self._events.values())

    def save_feedback(self, draft: FeedbackDraft) -> Feedback:
        with self._lock:
            if draft.eventId not in self._events:
                raise KeyError(f"event {draft.eventId} does not exist")
            fb = Feedback(id=self._next_feedback_id, **draft.model_dump())
            self._next_feedback_id += 1
            self._feedback[draft.eventId].append(fb)
        return fb

    def find_feedback_by_event_id(self, event_id: int) -> List[Feedback]:
        with self._lock:
            return list(self._feedback.get(event_id, []))


def _event_from_doc(doc: dict) -> Event:
    return Event(id=doc["_id"], title=doc.get("title", ""), description=doc.get("description") or "")


def _feedback_from_doc(doc: dict) -> Feedback:
    return Feedback(
        id=doc["_id"],
        eventId=doc["event_id"],
        text=doc.get("text", ""),
        mood=doc.get("mood", "neutral"),
        positiveScore=doc.get("positive_score", 0.0),
        neutralScore=doc.get("neutral_score", 0.0),
        negativeScore=doc.get("negative_score", 0.0),
        timestamp=doc["timestamp"],
    )


class MongoStore:
    """
    MongoDB-backed store.
    Collections:
      events   : {_id, title, description}
      feedback : {_id, event_id, text, mood, *_score, timestamp}
      counters : {_id: <collection>, seq}
    """

    def __init__(self, db: Database):
        self.db = db
        self.events = db["events"]
        self.feedback = db["feedback"]
        self.counters = db["counters"]

    def ensure_indexes(self) -> None:
        self.feedback.create_index([("event_id", ASCENDING), ("_id", ASCENDING)])
        logger.info("Feedback indexes ensured")

    def _next_id(self, name: str) -> int:
        doc = self.counters.find_one_and_update(
            {"_id": name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(doc["seq"])

    def save_event(self, title: str, description: str) -> Event:
        event_id = self._next_id("events")
        doc = {"_id": event_id, "title": title, "description": description or ""}
        self.events.insert_one(doc)
        return _event_from_doc(doc)

    def find_event_by_id(self, event_id: int) -> Optional[Event]:
        doc = self.events.find_one({"_id": event_id})
        return _event_from_doc(doc) if doc else None

    def list_events(self) -> List[Event]:
        return [_event_from_doc(d) for d in self.events.find().sort("_id", ASCENDING)]

    def save_feedback(self, draft: FeedbackDraft) -> Feedback:
        feedback_id = self._next_id("feedback")
        doc = {
            "_id": feedback_id,
            "event_id": draft.eventId,
            "text": draft.text,
            "mood": draft.mood,
            "positive_score": draft.positiveScore,
            "neutral_score": draft.neutralScore,
            "negative_score": draft.negativeScore,
            "timestamp": draft.timestamp,
        }
        self.feedback.insert_one(doc)
        return _feedback_from_doc(doc)

    def find_feedback_by_event_id(self, event_id: int) -> List[Feedback]:
        cursor = self.feedback.find({"event_id": event_id}).sort("_id", ASCENDING)
        return [_feedback_from_doc(d) for d in cursor]
