"""Common test fixtures and utilities."""

from collections.abc import Callable
from typing import Any

import pytest

from cursor_hooks.types import HookEventName


BASE_FIELDS: dict[str, Any] = {
    "conversation_id": "c1",
    "generation_id": "g1",
    "workspace_roots": ["/proj"],
}

EVENT_FIELDS: dict[HookEventName, dict[str, Any]] = {
    HookEventName.BEFORE_SHELL_EXECUTION: {"command": "ls -la", "cwd": "/proj"},
    HookEventName.BEFORE_MCP_EXECUTION: {
        "tool_name": "search",
        "tool_input": {"query": "hooks"},
        "url": "https://mcp.example.com",
    },
    HookEventName.AFTER_FILE_EDIT: {
        "file_path": "/proj/main.py",
        "edits": [{"old_string": "foo", "new_string": "bar"}],
    },
    HookEventName.BEFORE_READ_FILE: {
        "file_path": "/proj/main.py",
        "content": "print('hi')\n",
        "attachments": [{"type": "file", "file_path": "/proj/main.py"}],
    },
    HookEventName.BEFORE_SUBMIT_PROMPT: {
        "prompt": "Fix the bug",
        "attachments": [{"type": "rule", "file_path": "/proj/.cursor/rules/a.mdc"}],
    },
    HookEventName.STOP: {"status": "completed"},
}


def build_payload(event: HookEventName, **overrides: Any) -> dict[str, Any]:
    """Build a complete, valid wire payload for ``event``."""
    payload: dict[str, Any] = {
        **BASE_FIELDS,
        "hook_event_name": event.value,
        **EVENT_FIELDS[event],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    return build_payload
