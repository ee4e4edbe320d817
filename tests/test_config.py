"""Tests for hooks.json loading and validation."""

import json

import pytest

from cursor_hooks.config import (
    HookCommandConfig,
    HooksConfig,
    check_config,
    validate_config,
)
from cursor_hooks.exceptions import HookConfigError
from cursor_hooks.types import HookEventName


class TestValidateConfig:
    """Tests for the registration file shape."""

    def test_valid_config(self):
        config = validate_config(
            {
                "version": 1,
                "hooks": {
                    "beforeShellExecution": [
                        {"command": "./audit.sh"},
                        {"command": "python3 hooks/block.py"},
                    ],
                    "stop": [],
                },
            }
        )
        commands = config.get_commands(HookEventName.BEFORE_SHELL_EXECUTION)
        assert [c.command for c in commands] == ["./audit.sh", "python3 hooks/block.py"]
        assert config.has_hooks("beforeShellExecution")
        assert not config.has_hooks(HookEventName.STOP)
        assert not config.has_hooks(HookEventName.AFTER_FILE_EDIT)
        assert config.get_commands(HookEventName.AFTER_FILE_EDIT) == []

    def test_all_events_accepted(self):
        hooks = {event.value: [{"command": "x"}] for event in HookEventName}
        config = validate_config({"version": 1, "hooks": hooks})
        assert set(config.hooks) == set(HookEventName)

    def test_unsupported_version_is_rejected(self):
        """Only the literal version 1 is supported."""
        with pytest.raises(HookConfigError) as exc_info:
            validate_config({"version": 2, "hooks": {}})
        assert any("version" in error for error in exc_info.value.errors)

    @pytest.mark.parametrize("version", ["1", 1.0, True, None, [1]])
    def test_non_integer_version_is_rejected(self, version):
        with pytest.raises(HookConfigError):
            validate_config({"version": version, "hooks": {}})

    def test_missing_version_is_rejected(self):
        with pytest.raises(HookConfigError):
            validate_config({"hooks": {}})

    def test_unknown_event_is_rejected(self):
        """Keys of hooks are limited to the closed event set."""
        with pytest.raises(HookConfigError) as exc_info:
            validate_config(
                {
                    "version": 1,
                    "hooks": {
                        "beforeReadFile": [{"command": "./x.sh"}],
                        "notAnEvent": [],
                    },
                }
            )
        assert any("notAnEvent" in error for error in exc_info.value.errors)

    @pytest.mark.parametrize(
        "entry", [{}, {"command": None}, {"command": 3}, "./x.sh", None]
    )
    def test_entry_without_command_is_rejected(self, entry):
        with pytest.raises(HookConfigError):
            validate_config({"version": 1, "hooks": {"stop": [entry]}})

    @pytest.mark.parametrize("hooks", [None, [], "stop", {"stop": None}])
    def test_malformed_hooks_field(self, hooks):
        with pytest.raises(HookConfigError):
            validate_config({"version": 1, "hooks": hooks})

    @pytest.mark.parametrize("value", [None, [], "hooks", 1])
    def test_document_must_be_an_object(self, value):
        with pytest.raises(HookConfigError) as exc_info:
            validate_config(value)
        assert exc_info.value.errors

    def test_unknown_fields_are_tolerated(self):
        config = validate_config(
            {
                "version": 1,
                "hooks": {"stop": [{"command": "./done.sh", "timeout": 5}]},
                "$schema": "https://example.com/hooks.schema.json",
            }
        )
        assert config.model_extra == {
            "$schema": "https://example.com/hooks.schema.json"
        }
        assert config.get_commands("stop")[0].model_extra == {"timeout": 5}

    def test_empty_config(self):
        assert validate_config({"version": 1, "hooks": {}}).is_empty()
        assert validate_config({"version": 1, "hooks": {"stop": []}}).is_empty()

    def test_error_message_lists_problems(self):
        with pytest.raises(HookConfigError) as exc_info:
            validate_config({"version": 2, "hooks": {"notAnEvent": []}})
        message = str(exc_info.value)
        assert "Hooks config is invalid" in message
        assert len(exc_info.value.errors) == 2


class TestCheckConfig:
    """Tests for check_config, which reports without raising."""

    def test_valid(self):
        assert check_config({"version": 1, "hooks": {}}) == []

    def test_reports_problems(self):
        problems = check_config({"version": "1", "hooks": {"notAnEvent": []}})
        assert len(problems) == 2

    @pytest.mark.parametrize("value", [None, 0, "x", [], {}])
    def test_never_raises(self, value):
        assert check_config(value)


class TestHooksConfigFiles:
    """Tests for loading and saving hooks.json files."""

    def test_load(self, tmp_path):
        path = tmp_path / "hooks.json"
        path.write_text(
            json.dumps(
                {"version": 1, "hooks": {"afterFileEdit": [{"command": "./fmt.sh"}]}}
            )
        )
        config = HooksConfig.load(path)
        assert config.get_commands(HookEventName.AFTER_FILE_EDIT) == [
            HookCommandConfig(command="./fmt.sh")
        ]

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(HookConfigError) as exc_info:
            HooksConfig.load(tmp_path / "missing.json")
        assert exc_info.value.path == str(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "hooks.json"
        path.write_text("{not json")
        with pytest.raises(HookConfigError, match="not valid JSON"):
            HooksConfig.load(path)

    def test_load_invalid_shape_reports_path(self, tmp_path):
        path = tmp_path / "hooks.json"
        path.write_text(json.dumps({"version": 2, "hooks": {}}))
        with pytest.raises(HookConfigError) as exc_info:
            HooksConfig.load(path)
        assert exc_info.value.path == str(path)
        assert str(path) in str(exc_info.value)

    def test_save_and_reload(self, tmp_path):
        config = HooksConfig.from_dict(
            {
                "version": 1,
                "hooks": {
                    "beforeSubmitPrompt": [{"command": "./a.sh"}, {"command": "./b.sh"}]
                },
            }
        )
        path = tmp_path / ".cursor" / "hooks.json"
        config.save(path)

        saved = json.loads(path.read_text())
        assert saved == {
            "version": 1,
            "hooks": {
                "beforeSubmitPrompt": [{"command": "./a.sh"}, {"command": "./b.sh"}]
            },
        }
        assert HooksConfig.load(path) == config

    def test_json_schema_lists_events(self):
        schema = json.dumps(HooksConfig.json_schema())
        for event in HookEventName:
            assert event.value in schema
