"""Runtime narrowing of decoded JSON values by their ``hook_event_name``.

These checks look at the discriminant only. They never raise, whatever the
input, so hook scripts can branch on them before touching any other field:

    if is_payload_of(payload, HookEventName.BEFORE_SHELL_EXECUTION):
        command = payload.get("command", "")

Full validation of the remaining fields is done by
:func:`cursor_hooks.payloads.parse_payload`.
"""

from collections.abc import Mapping
from typing import Any, TypeGuard

from cursor_hooks.types import HookEventName


DISCRIMINANT_FIELD = "hook_event_name"

_EVENT_NAMES: frozenset[str] = frozenset(event.value for event in HookEventName)


def _wire_name(event: HookEventName | str) -> str | None:
    if isinstance(event, HookEventName):
        return event.value
    if isinstance(event, str) and event in _EVENT_NAMES:
        return event
    return None


def _read_discriminant(value: Any) -> Any:
    if not isinstance(value, Mapping):
        return None
    try:
        return value.get(DISCRIMINANT_FIELD)
    except Exception:
        # Exotic Mapping implementations may raise from get(); the guard is total.
        return None


def is_payload_of(
    value: Any, event: HookEventName | str
) -> TypeGuard[Mapping[str, Any]]:
    """Check whether ``value`` claims to be a payload for ``event``.

    Returns False for anything that is not a mapping, for mappings without a
    ``hook_event_name`` field, and when that field names a different event.
    Other fields are not inspected.
    """
    expected = _wire_name(event)
    if expected is None:
        return False
    discriminant = _read_discriminant(value)
    return isinstance(discriminant, str) and discriminant == expected


def get_event_name(value: Any) -> HookEventName | None:
    """Return the event a decoded value claims to be for, if it is a known one."""
    discriminant = _read_discriminant(value)
    if not isinstance(discriminant, str) or discriminant not in _EVENT_NAMES:
        return None
    return HookEventName(discriminant)
