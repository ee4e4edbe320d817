"""Hook dispatcher - routes one decoded payload to its registered handler."""

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from cursor_hooks.exceptions import NoHandlerError, PayloadShapeError
from cursor_hooks.guard import get_event_name, is_payload_of
from cursor_hooks.logger import get_logger
from cursor_hooks.payloads import HookPayloadBase, parse_payload
from cursor_hooks.registry import get_hook_spec, parse_response
from cursor_hooks.responses import HookResponseBase, serialize_response
from cursor_hooks.types import HookEventName


logger = get_logger(__name__)

HookResult = HookResponseBase | dict[str, Any] | None

# Type alias for hook handlers; async handlers return an awaitable result
HookHandler = Callable[[Any], HookResult | Awaitable[HookResult]]


class HookDispatcher:
    """Maps each hook event to at most one handler.

    Registering a second handler for an event replaces the first one (a
    warning is logged). Handlers receive the validated payload model of their
    event and may be plain functions or coroutines.

    Example:
        hooks = HookDispatcher()

        @hooks.on(HookEventName.BEFORE_SHELL_EXECUTION)
        def check_command(payload: BeforeShellExecutionPayload):
            if "rm -rf" in payload.command:
                return HookPermissionResponse.deny(user_message="Blocked")
            return HookPermissionResponse.allow()

        response = hooks.dispatch_sync(decoded_json)
    """

    def __init__(self) -> None:
        self._handlers: dict[HookEventName, HookHandler] = {}

    def on(self, event: HookEventName | str) -> Callable[[HookHandler], HookHandler]:
        """Decorator to register a handler for ``event``."""

        def decorator(handler: HookHandler) -> HookHandler:
            self.register(event, handler)
            return handler

        return decorator

    def register(self, event: HookEventName | str, handler: HookHandler) -> None:
        """Register ``handler`` for ``event``, replacing any previous handler."""
        spec = get_hook_spec(event)
        previous = self._handlers.get(spec.event)
        if previous is not None and previous is not handler:
            logger.warning(
                "[hooks] Replacing handler for %s: %s -> %s",
                spec.event.value,
                _handler_name(previous),
                _handler_name(handler),
            )
        self._handlers[spec.event] = handler
        logger.debug(
            "[hooks] Registered handler for %s: %s",
            spec.event.value,
            _handler_name(handler),
        )

    def unregister(self, event: HookEventName | str) -> bool:
        """Remove the handler for ``event``. Returns False if there was none."""
        spec = get_hook_spec(event)
        return self._handlers.pop(spec.event, None) is not None

    def get_handler(self, event: HookEventName | str) -> HookHandler | None:
        return self._handlers.get(get_hook_spec(event).event)

    def has_handler(self, event: HookEventName | str) -> bool:
        return self.get_handler(event) is not None

    @property
    def registered_events(self) -> list[HookEventName]:
        """Events with a handler, in canonical event order."""
        return [event for event in HookEventName if event in self._handlers]

    async def dispatch(self, value: Any) -> dict[str, Any] | None:
        """Route one decoded payload to its handler and serialize the result.

        Returns the JSON-ready response for request events, or None for
        notification events.

        Raises:
            PayloadShapeError: If ``value`` is not a payload of a known event,
                or misses fields its event requires.
            NoHandlerError: If no handler is registered for the event.
            ResponseShapeError: If a request handler returns nothing or a
                value that does not fit the event's response shape.
        """
        event = get_event_name(value)
        if event is None:
            raise PayloadShapeError(
                "Cannot dispatch: value has no known hook_event_name"
            )

        handler = self._handlers.get(event)
        if handler is None:
            raise NoHandlerError(event.value)

        if not is_payload_of(value, event):
            raise PayloadShapeError(
                f"Cannot dispatch: value is not a '{event.value}' payload",
                event=event.value,
            )
        payload = parse_payload(value, event)

        logger.debug(
            "[hooks] Dispatching %s (conversation=%s, generation=%s) to %s",
            event.value,
            payload.conversation_id,
            payload.generation_id,
            _handler_name(handler),
        )
        result = await _call_handler(handler, payload)

        spec = get_hook_spec(event)
        if not spec.expects_response:
            if result is not None:
                logger.debug(
                    "[hooks] Ignoring result of %s handler (notification event)",
                    event.value,
                )
            return None

        response = parse_response(result, event)
        assert response is not None
        return serialize_response(response)

    def dispatch_sync(self, value: Any) -> dict[str, Any] | None:
        """Run :meth:`dispatch` to completion in a fresh event loop."""
        return asyncio.run(self.dispatch(value))


async def _call_handler(handler: HookHandler, payload: HookPayloadBase) -> HookResult:
    result = handler(payload)
    if inspect.isawaitable(result):
        result = await result
    return result


def _handler_name(handler: HookHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
