"""Exceptions raised by the hook contract and dispatch layer."""

from typing import Any


class HookError(Exception):
    """Base exception for hook contract errors."""

    pass


class PayloadShapeError(HookError):
    """Raised when a decoded value is not a payload of the expected event."""

    event: str | None
    errors: list[str]

    def __init__(
        self,
        message: str,
        event: str | None = None,
        errors: list[str] | None = None,
    ):
        self.event = event
        self.errors = errors or []
        super().__init__(message)


class NoHandlerError(HookError):
    """Raised when dispatch finds no handler bound to the payload's event.

    This is a configuration error of the hook script, never a transient one.
    """

    event: str

    def __init__(self, event: str):
        self.event = event
        super().__init__(f"No handler registered for hook event '{event}'")


class ResponseShapeError(HookError):
    """Raised when a handler result does not fit the event's response shape."""

    event: str
    errors: list[str]

    def __init__(self, message: str, event: str, errors: list[str] | None = None):
        self.event = event
        self.errors = errors or []
        super().__init__(message)


class HookConfigError(HookError):
    """Raised when a hooks.json registration file is malformed."""

    path: str | None
    errors: list[str]

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        path: str | None = None,
    ):
        self.path = path
        self.errors = errors or []
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if not self.errors:
            return base
        return base + "\n" + "\n".join(f"  - {error}" for error in self.errors)


def format_validation_errors(errors: list[dict[str, Any]]) -> list[str]:
    """Render pydantic error dicts as ``loc: message`` strings."""
    rendered: list[str] = []
    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", ()))
        msg = error.get("msg", "invalid value")
        rendered.append(f"{loc}: {msg}" if loc else msg)
    return rendered
