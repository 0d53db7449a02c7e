from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from eventsync.models.schemas import FeedbackDraft
from eventsync.services.store import InMemoryStore, MongoStore

NOW = datetime(2025, 5, 17, tzinfo=timezone.utc)


def draft(event_id, text="nice", mood="positive"):
    return FeedbackDraft(
        eventId=event_id,
        text=text,
        mood=mood,
        positiveScore=0.8,
        neutralScore=0.15,
        negativeScore=0.05,
        timestamp=NOW,
    )


class TestInMemoryStore:
    def test_event_round_trip(self):
        store = InMemoryStore()
        event = store.save_event("Launch", None)

        assert event.id == 1
        assert event.description == ""
        assert store.find_event_by_id(1) == event
        assert store.find_event_by_id(2) is None

    def test_feedback_keeps_insertion_order(self):
        store = InMemoryStore()
        event = store.save_event("Launch", "")
        saved = [store.save_feedback(draft(event.id, text=f"t{i}")) for i in range(3)]

        assert [f.id for f in saved] == [1, 2, 3]
        assert [f.text for f in store.find_feedback_by_event_id(event.id)] == ["t0", "t1", "t2"]

    def test_feedback_for_missing_event(self):
        store = InMemoryStore()
        with pytest.raises(KeyError):
            store.save_feedback(draft(7))
        assert store.find_feedback_by_event_id(7) == []

    def test_feedback_is_immutable(self):
        store = InMemoryStore()
        event = store.save_event("Launch", "")
        fb = store.save_feedback(draft(event.id))
        with pytest.raises(Exception):
            fb.mood = "negative"


class TestMongoStore:
    def make_store(self):
        db = MagicMock()
        collections = {"events": MagicMock(), "feedback": MagicMock(), "counters": MagicMock()}
        db.__getitem__.side_effect = collections.__getitem__
        return MongoStore(db), collections

    def test_save_event_uses_counter(self):
        store, cols = self.make_store()
        cols["counters"].find_one_and_update.return_value = {"_id": "events", "seq": 5}

        event = store.save_event("Launch", "Product launch")

        assert event.id == 5
        cols["events"].insert_one.assert_called_once_with(
            {"_id": 5, "title": "Launch", "description": "Product launch"}
        )
        args, kwargs = cols["counters"].find_one_and_update.call_args
        assert args[0] == {"_id": "events"}
        assert args[1] == {"$inc": {"seq": 1}}
        assert kwargs["upsert"] is True

    def test_find_event_missing(self):
        store, cols = self.make_store()
        cols["events"].find_one.return_value = None
        assert store.find_event_by_id(3) is None

    def test_save_and_read_feedback(self):
        store, cols = self.make_store()
        cols["counters"].find_one_and_update.return_value = {"seq": 11}

        fb = store.save_feedback(draft(2))

        assert fb.id == 11
        doc = cols["feedback"].insert_one.call_args[0][0]
        assert doc["event_id"] == 2
        assert doc["positive_score"] == 0.8

        cols["feedback"].find.return_value.sort.return_value = [doc]
        assert store.find_feedback_by_event_id(2) == [fb]
        cols["feedback"].find.assert_called_with({"event_id": 2})

    def test_list_events(self):
        store, cols = self.make_store()
        cols["events"].find.return_value.sort.return_value = [
            {"_id": 1, "title": "A", "description": "x"},
            {"_id": 2, "title": "B"},
        ]
        events = store.list_events()
        assert [(e.id, e.title, e.description) for e in events] == [(1, "A", "x"), (2, "B", "")]


@pytest.mark.parametrize("field", ["positiveScore", "neutralScore", "negativeScore"])
@pytest.mark.parametrize("value", [-0.1, 1.5, float("nan")])
def test_scores_outside_unit_interval_are_rejected(field, value):
    data = draft(1).model_dump()
    data[field] = value
    with pytest.raises(ValueError):
        FeedbackDraft(**data)
