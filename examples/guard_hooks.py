#!/usr/bin/env python3
"""Cursor Hooks — Example hook script

One script handling several events. Register it in .cursor/hooks.json:

    {
      "version": 1,
      "hooks": {
        "beforeShellExecution": [{"command": "python3 guard_hooks.py"}],
        "beforeReadFile": [{"command": "python3 guard_hooks.py"}],
        "stop": [{"command": "python3 guard_hooks.py"}]
      }
    }

- beforeShellExecution: deny destructive commands, ask before pushing
- beforeReadFile: keep .env files away from the model
- stop: log how the agent loop ended
"""

from pathlib import PurePath

from cursor_hooks import (
    BeforeReadFilePayload,
    BeforeReadFileResponse,
    BeforeShellExecutionPayload,
    HookDispatcher,
    HookEventName,
    HookPermissionResponse,
    StopPayload,
)
from cursor_hooks.logger import get_logger
from cursor_hooks.runner import main


logger = get_logger(__name__)

hooks = HookDispatcher()

DANGEROUS_PATTERNS = ("rm -rf", "mkfs", "dd if=", ":(){ :|:& };:")


@hooks.on(HookEventName.BEFORE_SHELL_EXECUTION)
def check_command(payload: BeforeShellExecutionPayload) -> HookPermissionResponse:
    if any(pattern in payload.command for pattern in DANGEROUS_PATTERNS):
        return HookPermissionResponse.deny(
            user_message=f"Blocked dangerous command: {payload.command}",
            agent_message="This command is not allowed. Find a safer alternative.",
        )
    if payload.command.startswith("git push"):
        return HookPermissionResponse.ask(user_message="Push to the remote?")
    return HookPermissionResponse.allow()


@hooks.on(HookEventName.BEFORE_READ_FILE)
def check_read(payload: BeforeReadFilePayload) -> BeforeReadFileResponse:
    if PurePath(payload.file_path).name.startswith(".env"):
        return BeforeReadFileResponse.deny()
    return BeforeReadFileResponse.allow()


@hooks.on(HookEventName.STOP)
def on_stop(payload: StopPayload) -> None:
    logger.info(
        "Agent loop %s ended with status %s",
        payload.generation_id,
        payload.status.value,
    )


if __name__ == "__main__":
    main(hooks)
