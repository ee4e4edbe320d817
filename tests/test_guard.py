"""Tests for the hook_event_name discriminant guard."""

import pytest

from cursor_hooks.guard import get_event_name, is_payload_of
from cursor_hooks.types import HookEventName


class TestIsPayloadOf:
    """Tests for is_payload_of."""

    @pytest.mark.parametrize("event", list(HookEventName))
    def test_matches_own_event_only(self, make_payload, event):
        """A payload matches its own event and no other."""
        payload = make_payload(event)
        assert is_payload_of(payload, event)
        for other in HookEventName:
            if other is not event:
                assert not is_payload_of(payload, other)

    def test_accepts_wire_name(self, make_payload):
        """The event may be given as its wire string."""
        payload = make_payload(HookEventName.STOP)
        assert is_payload_of(payload, "stop")
        assert not is_payload_of(payload, "beforeReadFile")

    @pytest.mark.parametrize(
        "value",
        [
            None,
            0,
            1.5,
            True,
            "stop",
            b"stop",
            [],
            ["stop"],
            [{"hook_event_name": "stop"}],
        ],
    )
    def test_non_mappings_are_rejected(self, value):
        """Primitives, sequences and null are never payloads."""
        for event in HookEventName:
            assert not is_payload_of(value, event)

    def test_missing_discriminant(self):
        """A mapping without hook_event_name is rejected."""
        assert not is_payload_of({"status": "completed"}, HookEventName.STOP)
        assert not is_payload_of({}, HookEventName.STOP)

    @pytest.mark.parametrize(
        "discriminant", [None, 1, ["stop"], {"stop": 1}, "STOP", "stop "]
    )
    def test_non_matching_discriminant_values(self, discriminant):
        """Discriminants that are not the exact wire string are rejected."""
        value = {"hook_event_name": discriminant}
        assert not is_payload_of(value, HookEventName.STOP)

    def test_other_fields_are_not_inspected(self):
        """Only the discriminant is checked."""
        value = {"hook_event_name": "beforeShellExecution"}
        assert is_payload_of(value, HookEventName.BEFORE_SHELL_EXECUTION)

    def test_unknown_event_argument(self):
        """Asking about an event outside the closed set is simply False."""
        assert not is_payload_of({"hook_event_name": "notAnEvent"}, "notAnEvent")

    def test_read_file_is_not_submit_prompt(self, make_payload):
        """A beforeReadFile payload is not a beforeSubmitPrompt payload."""
        payload = make_payload(HookEventName.BEFORE_READ_FILE)
        assert not is_payload_of(payload, "beforeSubmitPrompt")

    def test_mapping_that_raises_is_rejected(self):
        """The guard stays total for mappings whose lookups fail."""

        class ExplodingMapping(dict):
            def get(self, key, default=None):
                raise RuntimeError("boom")

        assert not is_payload_of(ExplodingMapping(hook_event_name="stop"), "stop")

    def test_repeated_calls_are_stable(self, make_payload):
        """Repeated checks on the same value give the same answer."""
        payload = make_payload(HookEventName.AFTER_FILE_EDIT)
        before = dict(payload)
        results = {
            is_payload_of(payload, HookEventName.AFTER_FILE_EDIT) for _ in range(5)
        }
        assert results == {True}
        assert payload == before


class TestGetEventName:
    """Tests for get_event_name."""

    def test_known_event(self, make_payload):
        payload = make_payload(HookEventName.BEFORE_MCP_EXECUTION)
        assert get_event_name(payload) is HookEventName.BEFORE_MCP_EXECUTION

    @pytest.mark.parametrize(
        "value",
        [
            None,
            [],
            "stop",
            {},
            {"hook_event_name": "notAnEvent"},
            {"hook_event_name": 3},
        ],
    )
    def test_unknown_or_missing(self, value):
        assert get_event_name(value) is None
