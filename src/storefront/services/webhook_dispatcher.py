from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Dict, Union

import stripe

from storefront import storefront_logger as logger

EventHandler = Callable[[stripe.Event], Union[None, Awaitable[None]]]


class WebhookDispatcher:
    """
    Routes verified Stripe events to handlers registered per event type.

    Only events that already passed signature verification may be dispatched.
    Event types without a handler are logged and otherwise ignored; the webhook
    still acknowledges them so Stripe stops redelivering.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, EventHandler] = {}

    def register(self, event_type: str, handler: EventHandler) -> None:
        if event_type in self._handlers:
            raise ValueError(f"Handler already registered for event type: {event_type}")
        self._handlers[event_type] = handler

    def on(self, event_type: str) -> Callable[[EventHandler], EventHandler]:
        """Decorator form of :meth:`register`."""

        def decorator(handler: EventHandler) -> EventHandler:
            self.register(event_type, handler)
            return handler

        return decorator

    def handles(self, event_type: str) -> bool:
        return event_type in self._handlers

    async def dispatch(self, event: stripe.Event) -> bool:
        """
        Run the handler for ``event.type``, awaiting it when it is a coroutine.

        Returns:
            True if a handler ran, False if the event type is unhandled.
        """
        event_type = event.type
        handler = self._handlers.get(event_type)
        if handler is None:
            logger.info(f"Unhandled event type: {event_type} ({event.id})")
            return False

        logger.info(f"Dispatching event {event.id} to handler for {event_type}")
        result: Any = handler(event)
        if inspect.isawaitable(result):
            await result
        return True
