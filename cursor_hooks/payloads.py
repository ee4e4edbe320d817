"""Payload models received by hook processes on stdin.

Every payload carries the common fields of :class:`HookPayloadBase` plus the
fields of its event. Unknown fields are kept (``model_extra``) so newer hosts
do not break older hooks; missing required fields are a shape mismatch.
"""

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from cursor_hooks.exceptions import PayloadShapeError, format_validation_errors
from cursor_hooks.guard import get_event_name, is_payload_of
from cursor_hooks.types import HookEventName, StopStatus


class HookPayloadBase(BaseModel):
    """Properties shared by every hook payload."""

    model_config = ConfigDict(frozen=True, extra="allow")

    conversation_id: str = Field(description="Groups one interactive session")
    generation_id: str = Field(description="Groups one agent loop iteration")
    hook_event_name: HookEventName
    workspace_roots: list[str] = Field(
        description="Workspace root paths, in the order the host reports them",
    )

    @property
    def event(self) -> HookEventName:
        return HookEventName(self.hook_event_name)


class HookTextEdit(BaseModel):
    """Individual text edit reported by afterFileEdit hooks."""

    model_config = ConfigDict(frozen=True, extra="allow")

    old_string: str
    new_string: str


class HookAttachment(BaseModel):
    """Attachment metadata supplied with file and prompt hooks.

    ``type`` is usually ``"file"`` or ``"rule"`` but any string is accepted.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str
    file_path: str


class BeforeShellExecutionPayload(HookPayloadBase):
    hook_event_name: Literal["beforeShellExecution"]
    command: str
    cwd: str


class BeforeMCPExecutionPayload(HookPayloadBase):
    hook_event_name: Literal["beforeMCPExecution"]
    tool_name: str
    # Required, but any JSON value (including null) is accepted.
    tool_input: Any = Field(...)
    url: str | None = None
    command: str | None = None


class AfterFileEditPayload(HookPayloadBase):
    hook_event_name: Literal["afterFileEdit"]
    file_path: str
    edits: list[HookTextEdit]


class BeforeReadFilePayload(HookPayloadBase):
    hook_event_name: Literal["beforeReadFile"]
    file_path: str
    content: str
    attachments: list[HookAttachment]


class BeforeSubmitPromptPayload(HookPayloadBase):
    hook_event_name: Literal["beforeSubmitPrompt"]
    prompt: str
    attachments: list[HookAttachment]


class StopPayload(HookPayloadBase):
    hook_event_name: Literal["stop"]
    status: StopStatus


# Union type for all payloads, keyed on the event name
HookPayload = Annotated[
    BeforeShellExecutionPayload
    | BeforeMCPExecutionPayload
    | AfterFileEditPayload
    | BeforeReadFilePayload
    | BeforeSubmitPromptPayload
    | StopPayload,
    Field(discriminator="hook_event_name"),
]

_payload_adapter: TypeAdapter[HookPayload] = TypeAdapter(HookPayload)


def parse_payload(value: Any, event: HookEventName | str | None = None) -> HookPayload:
    """Decode a JSON value into the payload model of its event.

    Args:
        value: The decoded JSON value received by the hook.
        event: When given, payloads for any other event are rejected.

    Raises:
        PayloadShapeError: If the value names no known event, names a
            different event than ``event``, or misses required fields.
    """
    expected = None if event is None else HookEventName(event).value
    if expected is not None and not is_payload_of(value, expected):
        raise PayloadShapeError(
            f"Value is not a '{expected}' payload "
            f"(hook_event_name={_describe_discriminant(value)})",
            event=expected,
        )

    actual = get_event_name(value)
    if actual is None:
        raise PayloadShapeError(
            "Value is not a hook payload "
            f"(hook_event_name={_describe_discriminant(value)})",
            event=expected,
        )

    try:
        return _payload_adapter.validate_python(dict(value))
    except ValidationError as e:
        errors = format_validation_errors(e.errors())
        raise PayloadShapeError(
            f"Invalid '{actual.value}' payload: {'; '.join(errors)}",
            event=actual.value,
            errors=errors,
        ) from e


def _describe_discriminant(value: Any) -> str:
    if not isinstance(value, Mapping):
        return f"<{type(value).__name__}>"
    if "hook_event_name" not in value:
        return "<missing>"
    return repr(value["hook_event_name"])
