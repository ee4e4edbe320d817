"""Hook registration file (hooks.json) loading and validation."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cursor_hooks.exceptions import HookConfigError, format_validation_errors
from cursor_hooks.logger import get_logger
from cursor_hooks.types import HookEventName


logger = get_logger(__name__)

SUPPORTED_CONFIG_VERSION = 1


class HookCommandConfig(BaseModel):
    """A single hook command.

    The command is opaque to this package: an absolute path, a path relative
    to hooks.json, or a shell command string, resolved by the host.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    command: str = Field(description="Command executed when the hook fires")


class HooksConfig(BaseModel):
    """Top-level hooks.json structure.

    Keys of ``hooks`` are limited to the hook event names; each value is the
    ordered list of commands to run for that event. A missing key or an empty
    list means no hook for the event. Unknown top-level keys are tolerated.

        config = HooksConfig.from_dict(
            {
                "version": 1,
                "hooks": {"beforeShellExecution": [{"command": "./audit.sh"}]},
            }
        )
        config.get_commands(HookEventName.BEFORE_SHELL_EXECUTION)
    """

    model_config = ConfigDict(extra="allow")

    version: int = Field(strict=True, description="Config format version")
    hooks: dict[HookEventName, list[HookCommandConfig]] = Field(
        description="Commands to run, per hook event",
    )

    @field_validator("version")
    @classmethod
    def _check_version(cls, v: int) -> int:
        if v != SUPPORTED_CONFIG_VERSION:
            raise ValueError(
                f"Unsupported hooks config version {v}; "
                f"expected {SUPPORTED_CONFIG_VERSION}"
            )
        return v

    def get_commands(self, event: HookEventName | str) -> list[HookCommandConfig]:
        """Get the commands registered for an event, in file order."""
        return list(self.hooks.get(HookEventName(event), []))

    def has_hooks(self, event: HookEventName | str) -> bool:
        """Check if there are any commands registered for an event."""
        return len(self.get_commands(event)) > 0

    def is_empty(self) -> bool:
        """Check if this config has no hooks registered."""
        return not any(self.hooks.values())

    @classmethod
    def from_dict(cls, data: Any) -> "HooksConfig":
        """Validate a decoded hooks.json document.

        Raises:
            HookConfigError: If the document does not have the expected shape.
        """
        return validate_config(data)

    @classmethod
    def load(cls, path: str | Path) -> "HooksConfig":
        """Load and validate a hooks.json file.

        Raises:
            HookConfigError: If the file cannot be read, is not JSON, or does
                not have the expected shape.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise HookConfigError(
                f"Cannot read hooks config {path}: {e}", path=str(path)
            ) from e
        except json.JSONDecodeError as e:
            raise HookConfigError(
                f"Hooks config {path} is not valid JSON: {e}", path=str(path)
            ) from e
        config = validate_config(data, path=str(path))
        logger.debug(
            "[hooks] Loaded %s with hooks for: %s",
            path,
            ", ".join(event.value for event in config.hooks) or "<none>",
        )
        return config

    def save(self, path: str | Path) -> None:
        """Save the configuration to a JSON file using wire event names."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)
            f.write("\n")

    @classmethod
    def json_schema(cls) -> dict[str, Any]:
        """JSON schema of the registration file."""
        return cls.model_json_schema(mode="validation")


def validate_config(value: Any, path: str | None = None) -> HooksConfig:
    """Validate a decoded registration file.

    Raises:
        HookConfigError: Listing every problem found.
    """
    where = f"Hooks config {path}" if path else "Hooks config"
    if not isinstance(value, Mapping):
        raise HookConfigError(
            f"{where} is invalid",
            errors=[f"expected a JSON object, got {type(value).__name__}"],
            path=path,
        )
    try:
        return HooksConfig.model_validate(dict(value))
    except ValidationError as e:
        raise HookConfigError(
            f"{where} is invalid",
            errors=format_validation_errors(e.errors()),
            path=path,
        ) from e


def check_config(value: Any) -> list[str]:
    """Return the problems found in a decoded registration file.

    An empty list means the configuration is valid.
    """
    try:
        validate_config(value)
    except HookConfigError as e:
        return e.errors
    return []
