"""
Cursor Hooks - typed contract and dispatch for agent hook scripts.

Hook scripts are short-lived processes the agent spawns at fixed extension
points. Each one reads a single JSON payload on stdin and, for request-style
events, answers with a single JSON decision on stdout.
"""

from cursor_hooks.config import (
    SUPPORTED_CONFIG_VERSION,
    HookCommandConfig,
    HooksConfig,
    check_config,
    validate_config,
)
from cursor_hooks.dispatch import HookDispatcher, HookHandler
from cursor_hooks.exceptions import (
    HookConfigError,
    HookError,
    NoHandlerError,
    PayloadShapeError,
    ResponseShapeError,
)
from cursor_hooks.guard import get_event_name, is_payload_of
from cursor_hooks.payloads import (
    AfterFileEditPayload,
    BeforeMCPExecutionPayload,
    BeforeReadFilePayload,
    BeforeShellExecutionPayload,
    BeforeSubmitPromptPayload,
    HookAttachment,
    HookPayload,
    HookPayloadBase,
    HookTextEdit,
    StopPayload,
    parse_payload,
)
from cursor_hooks.registry import (
    HOOK_SPECS,
    NOTIFICATION_EVENTS,
    REQUEST_EVENTS,
    HookSpec,
    get_hook_spec,
    is_notification_event,
    is_request_event,
    parse_response,
)
from cursor_hooks.responses import (
    BeforeMCPExecutionResponse,
    BeforeReadFileResponse,
    BeforeShellExecutionResponse,
    BeforeSubmitPromptResponse,
    HookPermissionResponse,
    HookResponse,
    serialize_response,
)
from cursor_hooks.runner import main, run_hook
from cursor_hooks.types import (
    HookEventName,
    HookKind,
    HookPermission,
    ReadFilePermission,
    StopStatus,
)


__all__ = [
    "HookEventName",
    "HookKind",
    "HookPermission",
    "ReadFilePermission",
    "StopStatus",
    "HookPayloadBase",
    "HookTextEdit",
    "HookAttachment",
    "BeforeShellExecutionPayload",
    "BeforeMCPExecutionPayload",
    "AfterFileEditPayload",
    "BeforeReadFilePayload",
    "BeforeSubmitPromptPayload",
    "StopPayload",
    "HookPayload",
    "parse_payload",
    "HookPermissionResponse",
    "BeforeShellExecutionResponse",
    "BeforeMCPExecutionResponse",
    "BeforeReadFileResponse",
    "BeforeSubmitPromptResponse",
    "HookResponse",
    "serialize_response",
    "HOOK_SPECS",
    "REQUEST_EVENTS",
    "NOTIFICATION_EVENTS",
    "HookSpec",
    "get_hook_spec",
    "is_request_event",
    "is_notification_event",
    "parse_response",
    "is_payload_of",
    "get_event_name",
    "HookDispatcher",
    "HookHandler",
    "HookError",
    "PayloadShapeError",
    "NoHandlerError",
    "ResponseShapeError",
    "HookConfigError",
    "SUPPORTED_CONFIG_VERSION",
    "HookCommandConfig",
    "HooksConfig",
    "validate_config",
    "check_config",
    "run_hook",
    "main",
]
