import logging
from typing import Any

from src.core.models import EventType, WebhookEvent
from src.webhooks.handlers.base import EventHandler

logger = logging.getLogger(__name__)


class WebhookDispatcher:
    """
    Dispatches webhook events to registered EventHandler instances.
    """

    def __init__(self):
        self._handlers: dict[EventType, EventHandler] = {}

    def register_handler(self, event_type: EventType, handler: EventHandler):
        """
        Registers a handler instance for a specific event type.

        Args:
            event_type: The EventType to handle (e.g., EventType.PULL_REQUEST).
            handler: An instance of a class that implements the EventHandler interface.
        """
        if event_type in self._handlers:
            logger.warning(f"Handler for event type {event_type} is being overridden.")
        self._handlers[event_type] = handler
        logger.info(f"Registered handler for {event_type.name}: {handler.__class__.__name__}")

    async def dispatch(self, event: WebhookEvent) -> dict[str, Any]:
        """
        Looks up and executes the .handle() method of the appropriate handler
        for the given event.

        Returns:
            A dictionary containing the result from the handler.
        """
        handler_instance = self._handlers.get(event.event_type)

        if not handler_instance:
            logger.info(f"No handler registered for event type {event.event_type}. Skipping.")
            return {"status": "skipped", "reason": f"No handler for event type {event.event_type.name}"}

        handler_name = handler_instance.__class__.__name__
        logger.info(f"Dispatching event {event.event_type.name} ({event.delivery_id}) to handler {handler_name}.")
        response = await handler_instance.handle(event)
        return {"status": response.status, "handler": handler_name, "result": response.model_dump(mode="json")}


dispatcher = WebhookDispatcher()
