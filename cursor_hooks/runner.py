"""Stdin/stdout adapter for hook scripts.

A hook script builds a :class:`HookDispatcher`, registers its handlers and
calls :func:`main`:

    hooks = HookDispatcher()

    @hooks.on(HookEventName.STOP)
    def on_stop(payload: StopPayload) -> None:
        ...

    if __name__ == "__main__":
        main(hooks)

Exactly one payload is read, dispatched and answered per process. Responses go
to stdout; diagnostics go to the log (stderr) and the exit status is non-zero,
so the host can tell "hook declined" apart from "hook is broken".
"""

import json
import sys
from typing import NoReturn, TextIO

from cursor_hooks.dispatch import HookDispatcher
from cursor_hooks.exceptions import HookError
from cursor_hooks.logger import get_logger, setup_logging


logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def run_hook(
    dispatcher: HookDispatcher,
    raw: str | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Read one payload, dispatch it and write the response.

    Args:
        dispatcher: Dispatcher holding the script's handlers.
        raw: Full stdin contents; read from ``sys.stdin`` when None.
        stdout: Stream the JSON response is written to (default ``sys.stdout``).

    Returns:
        The process exit status.
    """
    if raw is None:
        raw = sys.stdin.read()
    out = stdout if stdout is not None else sys.stdout

    try:
        payload = json.loads(raw or "{}")
    except json.JSONDecodeError as e:
        logger.error("[hooks] Failed to parse hook payload as JSON: %s", e)
        return EXIT_FAILURE

    try:
        response = dispatcher.dispatch_sync(payload)
    except HookError as e:
        logger.error("[hooks] %s", e)
        return EXIT_FAILURE
    except Exception:
        logger.exception("[hooks] Hook handler raised")
        return EXIT_FAILURE

    if response is not None:
        out.write(json.dumps(response))
        out.write("\n")
        out.flush()
    return EXIT_OK


def main(dispatcher: HookDispatcher) -> NoReturn:
    """Entry point for hook scripts: configure logging, run, exit."""
    setup_logging()
    sys.exit(run_hook(dispatcher))
