# eventsync/routes/events.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from eventsync.core.errors import NotFoundError, ValidationError
from eventsync.models.schemas import AggregateSummary, Event, EventCreate, Feedback, FeedbackCreate
from eventsync.services.feedback_ingest import EventSyncService

router = APIRouter(prefix="/events", tags=["events"])


def get_service(request: Request) -> EventSyncService:
    return request.app.state.service


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED)
def create_event(body: EventCreate, service: EventSyncService = Depends(get_service)):
    return service.create_event(body.title, body.description)


@router.get("", response_model=List[Event])
def list_events(service: EventSyncService = Depends(get_service)):
    return service.list_events()


@router.post("/{event_id}/feedback", response_model=Feedback, status_code=status.HTTP_201_CREATED)
def add_feedback(
    event_id: int,
    body: FeedbackCreate,
    service: EventSyncService = Depends(get_service),
):
    """
    Accepts one feedback entry. Sentiment provider outages never fail this call;
    only a blank text (400) or an unknown event (404) do.
    """
    try:
        return service.add_feedback(event_id, body.text)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{event_id}/summary", response_model=AggregateSummary)
def event_summary(event_id: int, service: EventSyncService = Depends(get_service)):
    try:
        return service.get_summary(event_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
