# eventsync/services/collaborators.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Protocol, Sequence, TypeVar

from eventsync.core.errors import CollaboratorFailure
from eventsync.core.logger import get_logger

logger = get_logger("collaborators")

T = TypeVar("T")


class SentimentClassifier(Protocol):
    name: str

    def classify(self, text: str) -> Any:
        ...


class NarrativeSummarizer(Protocol):
    name: str

    def summarize(
        self,
        texts: Sequence[str],
        positive: int,
        neutral: int,
        negative: int,
    ) -> str:
        ...


@dataclass(frozen=True)
class CallResult(Generic[T]):
    """Either the collaborator's value or the failure that replaced it."""
    value: Optional[T] = None
    error: Optional[CollaboratorFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: T) -> T:
        return self.value if self.ok else default


def call_collaborator(provider: str, fn: Callable[..., T], *args, **kwargs) -> CallResult[T]:
    """
    Run a classifier/summarizer call and capture any exception as a
    CollaboratorFailure. The caller decides which default replaces it.
    """
    try:
        return CallResult(value=fn(*args, **kwargs))
    except Exception as e:
        failure = e if isinstance(e, CollaboratorFailure) else CollaboratorFailure(provider, e)
        logger.warning("%s", failure)
        return CallResult(error=failure)
