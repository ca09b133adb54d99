import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from src.core.models import EventType, WebhookEvent
from src.webhooks.auth import verify_github_signature
from src.webhooks.dispatcher import WebhookDispatcher, dispatcher

logger = logging.getLogger(__name__)
router = APIRouter()


# Dependency provider for the dispatcher instance.
# Tests override it to inject their own dispatcher.
def get_dispatcher() -> WebhookDispatcher:
    """Returns the shared WebhookDispatcher instance."""
    return dispatcher


def _create_event_from_request(event_name: str | None, payload: dict, delivery_id: str | None) -> WebhookEvent:
    """Factory function to create a WebhookEvent from raw request data."""
    if not event_name:
        raise HTTPException(status_code=400, detail="Missing X-GitHub-Event header")

    logger.info(f"Received event: {event_name} (delivery {delivery_id})")

    try:
        event_type = EventType(event_name)
    except ValueError as e:
        logger.info(f"Received an unsupported event type: {event_name}")
        # Acknowledge receipt so GitHub does not mark the delivery as failed.
        raise HTTPException(status_code=202, detail=f"Event type '{event_name}' is received but not supported.") from e

    return WebhookEvent(event_type=event_type, payload=payload, delivery_id=delivery_id)


@router.post("/github", summary="Endpoint for all GitHub webhooks")
async def github_webhook_endpoint(
    request: Request,
    is_verified: bool = Depends(verify_github_signature),
    dispatcher_instance: WebhookDispatcher = Depends(get_dispatcher),
):
    """
    This endpoint receives all events from the configured repository webhook.

    - It first verifies the request signature to ensure it's from GitHub.
    - It then creates a domain event object from the request payload.
    - Finally, it passes the event to the dispatcher to be routed to the
      registered handler.
    """
    try:
        payload = json.loads(await request.body())
    except json.JSONDecodeError as e:
        raise HTTPException(status_code=400, detail="Request body is not valid JSON") from e
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Webhook payload must be a JSON object")

    event_name = request.headers.get("X-GitHub-Event")
    delivery_id = request.headers.get("X-GitHub-Delivery")

    try:
        event = _create_event_from_request(event_name, payload, delivery_id)
    except HTTPException as e:
        # Unsupported events are acknowledged rather than treated as errors.
        if e.status_code == 202:
            return {"status": "event received but not supported", "detail": e.detail}
        raise

    result = await dispatcher_instance.dispatch(event)
    return {"status": "event dispatched successfully", "result": result}
