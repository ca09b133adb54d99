from pydantic import BaseModel, Field

from src.core.models import PullRequest


class WebhookRepository(BaseModel):
    """GitHub repository metadata from webhook payload."""

    name: str = Field(..., description="Repository name (without owner)")
    full_name: str = Field(..., description="Owner/repo format")


class PullRequestEventPayload(BaseModel):
    """The fields of a pull_request webhook payload the bot reads."""

    action: str | None = Field(None, description="Event action type (e.g., 'opened', 'synchronize')")
    pull_request: PullRequest = Field(..., description="The pull request the event is about")
    repository: WebhookRepository | None = Field(None, description="Target repository")
