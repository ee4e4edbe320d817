"""Hook event names and the enumerations used by payloads and responses."""

from enum import Enum


class HookEventName(str, Enum):
    """Hook events the host can fire, in canonical order.

    The value is the wire name carried in the ``hook_event_name`` field.
    """

    BEFORE_SHELL_EXECUTION = "beforeShellExecution"
    BEFORE_MCP_EXECUTION = "beforeMCPExecution"
    AFTER_FILE_EDIT = "afterFileEdit"
    BEFORE_READ_FILE = "beforeReadFile"
    BEFORE_SUBMIT_PROMPT = "beforeSubmitPrompt"
    STOP = "stop"


class HookKind(str, Enum):
    """Whether the host acts on a hook's response."""

    REQUEST = "request"  # response is a decision the host applies
    NOTIFICATION = "notification"  # response, if any, is ignored


class HookPermission(str, Enum):
    """Decision returned by beforeShellExecution / beforeMCPExecution hooks."""

    ALLOW = "allow"
    DENY = "deny"
    ASK = "ask"


class ReadFilePermission(str, Enum):
    """Decision returned by beforeReadFile hooks. There is no "ask"."""

    ALLOW = "allow"
    DENY = "deny"


class StopStatus(str, Enum):
    """How the agent loop ended."""

    COMPLETED = "completed"
    ABORTED = "aborted"
    ERROR = "error"
