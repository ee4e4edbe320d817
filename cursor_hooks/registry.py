"""Registry of hook events: payload shape, response shape and kind.

`HOOK_SPECS` is the single source of truth the rest of the package consults
instead of repeating per-event field lists.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ValidationError

from cursor_hooks.exceptions import ResponseShapeError, format_validation_errors
from cursor_hooks.payloads import (
    AfterFileEditPayload,
    BeforeMCPExecutionPayload,
    BeforeReadFilePayload,
    BeforeShellExecutionPayload,
    BeforeSubmitPromptPayload,
    HookPayloadBase,
    StopPayload,
)
from cursor_hooks.responses import (
    BeforeMCPExecutionResponse,
    BeforeReadFileResponse,
    BeforeShellExecutionResponse,
    BeforeSubmitPromptResponse,
    HookResponseBase,
)
from cursor_hooks.types import HookEventName, HookKind


@dataclass(frozen=True)
class HookSpec:
    """Declarative description of one hook event."""

    event: HookEventName
    payload_model: type[HookPayloadBase]
    response_model: type[HookResponseBase] | None
    kind: HookKind
    description: str = ""

    @property
    def expects_response(self) -> bool:
        return self.response_model is not None


HOOK_SPECS: Mapping[HookEventName, HookSpec] = MappingProxyType(
    {
        HookEventName.BEFORE_SHELL_EXECUTION: HookSpec(
            event=HookEventName.BEFORE_SHELL_EXECUTION,
            payload_model=BeforeShellExecutionPayload,
            response_model=BeforeShellExecutionResponse,
            kind=HookKind.REQUEST,
            description="Before the agent runs a shell command",
        ),
        HookEventName.BEFORE_MCP_EXECUTION: HookSpec(
            event=HookEventName.BEFORE_MCP_EXECUTION,
            payload_model=BeforeMCPExecutionPayload,
            response_model=BeforeMCPExecutionResponse,
            kind=HookKind.REQUEST,
            description="Before the agent calls an MCP tool",
        ),
        HookEventName.AFTER_FILE_EDIT: HookSpec(
            event=HookEventName.AFTER_FILE_EDIT,
            payload_model=AfterFileEditPayload,
            response_model=None,
            kind=HookKind.NOTIFICATION,
            description="After the agent edits a file",
        ),
        HookEventName.BEFORE_READ_FILE: HookSpec(
            event=HookEventName.BEFORE_READ_FILE,
            payload_model=BeforeReadFilePayload,
            response_model=BeforeReadFileResponse,
            kind=HookKind.REQUEST,
            description="Before file content is sent to the model",
        ),
        HookEventName.BEFORE_SUBMIT_PROMPT: HookSpec(
            event=HookEventName.BEFORE_SUBMIT_PROMPT,
            payload_model=BeforeSubmitPromptPayload,
            response_model=BeforeSubmitPromptResponse,
            kind=HookKind.REQUEST,
            description="Before a user prompt is submitted",
        ),
        HookEventName.STOP: HookSpec(
            event=HookEventName.STOP,
            payload_model=StopPayload,
            response_model=None,
            kind=HookKind.NOTIFICATION,
            description="When the agent loop ends",
        ),
    }
)

_missing = [event.value for event in HookEventName if event not in HOOK_SPECS]
if _missing:
    raise RuntimeError(f"HOOK_SPECS has no entry for: {', '.join(_missing)}")

REQUEST_EVENTS: tuple[HookEventName, ...] = tuple(
    event for event, spec in HOOK_SPECS.items() if spec.kind == HookKind.REQUEST
)
NOTIFICATION_EVENTS: tuple[HookEventName, ...] = tuple(
    event for event, spec in HOOK_SPECS.items() if spec.kind == HookKind.NOTIFICATION
)


def get_hook_spec(event: HookEventName | str) -> HookSpec:
    """Look up the spec of an event by enum member or wire name.

    Raises:
        ValueError: If ``event`` is not one of the hook events.
    """
    try:
        return HOOK_SPECS[HookEventName(event)]
    except ValueError:
        valid = ", ".join(e.value for e in HookEventName)
        raise ValueError(
            f"Unknown hook event '{event}'. Valid events: {valid}"
        ) from None


def is_request_event(event: HookEventName | str) -> bool:
    return get_hook_spec(event).kind == HookKind.REQUEST


def is_notification_event(event: HookEventName | str) -> bool:
    return get_hook_spec(event).kind == HookKind.NOTIFICATION


def parse_response(value: Any, event: HookEventName | str) -> HookResponseBase | None:
    """Coerce a handler result or decoded JSON value into the event's response.

    Accepts an instance of the response model, another response model whose
    fields fit (e.g. an allow ``HookPermissionResponse`` for beforeReadFile), or
    a mapping using wire or attribute names. Notification events have no
    response, so None is returned for them whatever ``value`` is.

    Raises:
        ResponseShapeError: If ``value`` does not fit the response model.
    """
    spec = get_hook_spec(event)
    model = spec.response_model
    if model is None:
        return None
    if isinstance(value, model):
        return value
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if not isinstance(value, Mapping):
        raise ResponseShapeError(
            f"'{spec.event.value}' hooks must return a {model.__name__}, "
            f"got {type(value).__name__}",
            event=spec.event.value,
        )
    try:
        return model.model_validate(dict(value))
    except ValidationError as e:
        errors = format_validation_errors(e.errors())
        raise ResponseShapeError(
            f"Invalid '{spec.event.value}' response: {'; '.join(errors)}",
            event=spec.event.value,
            errors=errors,
        ) from e
