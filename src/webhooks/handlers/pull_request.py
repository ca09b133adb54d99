import structlog
from pydantic import ValidationError

from src.core.models import EventType, WebhookEvent, WebhookResponse
from src.event_processors.base import ProcessingState
from src.event_processors.pull_request.processor import PullRequestProcessor
from src.webhooks.handlers.base import EventHandler
from src.webhooks.models import PullRequestEventPayload

logger = structlog.get_logger()


class PullRequestEventHandler(EventHandler):
    """Thin handler for pull request webhook events; delegates to the event processor."""

    def __init__(self, processor: PullRequestProcessor, repo_full_name: str):
        self.processor = processor
        self.repo_full_name = repo_full_name

    async def handle(self, event: WebhookEvent) -> WebhookResponse:
        try:
            payload = PullRequestEventPayload.model_validate(event.payload)
        except ValidationError as e:
            logger.warning("pr_payload_invalid", delivery_id=event.delivery_id, errors=e.errors())
            return WebhookResponse(
                status="error", detail="Invalid pull_request payload", event_type=EventType.PULL_REQUEST
            )

        log = logger.bind(
            event_type="pull_request",
            delivery_id=event.delivery_id,
            repo=event.repo_full_name,
            pr_number=payload.pull_request.number,
            action=payload.action,
        )

        if event.repo_full_name and event.repo_full_name.lower() != self.repo_full_name.lower():
            log.info("pr_repository_ignored", expected=self.repo_full_name)
            return WebhookResponse(
                status="ignored",
                detail=f"Repository '{event.repo_full_name}' is not watched",
                event_type=EventType.PULL_REQUEST,
            )

        log.info("pr_handler_invoked")

        try:
            result = await self.processor.on_pull_request_event(payload.action, payload.pull_request)
        except Exception as e:
            log.error("pr_processing_failed", error=str(e), exc_info=True)
            return WebhookResponse(
                status="error", detail=f"PR processing failed: {str(e)}", event_type=EventType.PULL_REQUEST
            )

        status = "ignored" if result.state == ProcessingState.IGNORED else "ok"
        return WebhookResponse(
            status=status,
            detail=result.reason,
            event_type=EventType.PULL_REQUEST,
            result=result.model_dump(mode="json"),
        )
