from enum import Enum

from pydantic import BaseModel, Field


class ProcessingState(str, Enum):
    """
    Processing state for event processing results.

    - NOTIFIED: at least one translator was asked for review or pinged
    - NO_ACTION: the event was processed but nobody needed notifying
    - IGNORED: the event action is not one the bot reacts to
    """

    NOTIFIED = "notified"
    NO_ACTION = "no_action"
    IGNORED = "ignored"


class ProcessingResult(BaseModel):
    """Result of event processing."""

    state: ProcessingState
    pr_number: int
    owners: list[str] = Field(default_factory=list)
    notified: list[str] = Field(default_factory=list)
    processing_time_ms: int = 0
    reason: str | None = None
