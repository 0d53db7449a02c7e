# eventsync/core/errors.py
from __future__ import annotations


class EventSyncError(Exception):
    """Base class for errors raised by the feedback pipeline."""


class ValidationError(EventSyncError):
    """Caller input rejected before any collaborator is contacted."""


class EmptyFeedbackError(ValidationError):
    def __init__(self):
        super().__init__("text is required")


class NotFoundError(EventSyncError):
    """A referenced record does not exist."""


class EventNotFoundError(NotFoundError):
    def __init__(self, event_id: int):
        self.event_id = event_id
        super().__init__("Event not found")


class CollaboratorFailure(EventSyncError):
    """
    A sentiment classifier or summarizer call failed (network, timeout,
    HTTP status, malformed payload). Never surfaced to callers: the pipeline
    swaps in a safe default instead.
    """

    def __init__(self, provider: str, cause: BaseException | str):
        self.provider = provider
        self.cause = cause
        super().__init__(f"{provider} call failed: {cause}")
