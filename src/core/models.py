from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class EventType(Enum):
    """Supported GitHub event types."""

    PULL_REQUEST = "pull_request"
    PING = "ping"


class WebhookEvent:
    """
    A representation of an incoming webhook event, before it has been
    validated against the event-specific payload model.
    """

    def __init__(self, event_type: EventType, payload: dict[str, Any], delivery_id: str | None = None):
        self.event_type = event_type
        self.payload = payload
        self.delivery_id = delivery_id
        self.repository = payload.get("repository") or {}
        self.sender = payload.get("sender") or {}

    @property
    def repo_full_name(self) -> str:
        """The full name of the repository (e.g., 'owner/repo')."""
        return self.repository.get("full_name", "")

    @property
    def sender_login(self) -> str:
        """The GitHub username of the user who triggered the event."""
        return self.sender.get("login", "")


class WebhookResponse(BaseModel):
    """Standardized response model for all webhook handlers."""

    status: str = Field(..., description="Processing status: ok, ignored, error")
    detail: str | None = Field(None, description="Additional context or error message")
    event_type: EventType | None = Field(None, description="Normalized GitHub event type")
    result: dict[str, Any] | None = Field(None, description="Handler-specific outcome")


class PullRequestUser(BaseModel):
    login: str


class PullRequest(BaseModel):
    """The subset of a pull request payload the bot relies on."""

    number: int
    user: PullRequestUser | None = None

    @property
    def author_login(self) -> str | None:
        return self.user.login if self.user else None


class TeamMetadata(BaseModel):
    """Organization team as returned by the teams API, reduced to what governance checks need."""

    slug: str
    parent_slug: str | None = None


class IssueComment(BaseModel):
    """A pull request conversation comment."""

    author: str | None = None
    body: str = ""
