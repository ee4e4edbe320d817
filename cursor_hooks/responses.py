"""Response models written by request-style hooks on stdout.

Field names follow the wire format (``userMessage``, ``agentMessage``,
``continue``); models accept either the wire name or the Python attribute.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cursor_hooks.types import HookPermission, ReadFilePermission


class HookResponseBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class HookPermissionResponse(HookResponseBase):
    """Decision returned by beforeShellExecution / beforeMCPExecution hooks.

    Messages left as None are omitted from the serialized response; an empty
    string is sent as-is.
    """

    permission: HookPermission
    user_message: str | None = Field(
        default=None,
        alias="userMessage",
        description="Shown to the end user",
    )
    agent_message: str | None = Field(
        default=None,
        alias="agentMessage",
        description="Sent back to the agent",
    )

    @classmethod
    def allow(
        cls, user_message: str | None = None, agent_message: str | None = None
    ) -> "HookPermissionResponse":
        return cls(
            permission=HookPermission.ALLOW,
            user_message=user_message,
            agent_message=agent_message,
        )

    @classmethod
    def deny(
        cls, user_message: str | None = None, agent_message: str | None = None
    ) -> "HookPermissionResponse":
        return cls(
            permission=HookPermission.DENY,
            user_message=user_message,
            agent_message=agent_message,
        )

    @classmethod
    def ask(
        cls, user_message: str | None = None, agent_message: str | None = None
    ) -> "HookPermissionResponse":
        return cls(
            permission=HookPermission.ASK,
            user_message=user_message,
            agent_message=agent_message,
        )


BeforeShellExecutionResponse = HookPermissionResponse
BeforeMCPExecutionResponse = HookPermissionResponse


class BeforeReadFileResponse(HookResponseBase):
    """Decision returned by beforeReadFile hooks."""

    permission: ReadFilePermission

    @classmethod
    def allow(cls) -> "BeforeReadFileResponse":
        return cls(permission=ReadFilePermission.ALLOW)

    @classmethod
    def deny(cls) -> "BeforeReadFileResponse":
        return cls(permission=ReadFilePermission.DENY)


class BeforeSubmitPromptResponse(HookResponseBase):
    """Decision returned by beforeSubmitPrompt hooks."""

    continue_: bool = Field(
        alias="continue",
        strict=True,
        description="True lets the prompt through, False blocks it",
    )

    @classmethod
    def proceed(cls) -> "BeforeSubmitPromptResponse":
        return cls(continue_=True)

    @classmethod
    def block(cls) -> "BeforeSubmitPromptResponse":
        return cls(continue_=False)


HookResponse = (
    HookPermissionResponse | BeforeReadFileResponse | BeforeSubmitPromptResponse
)


def serialize_response(response: HookResponseBase) -> dict[str, Any]:
    """Dump a response to a JSON-ready dict using wire field names."""
    return response.model_dump(mode="json", by_alias=True, exclude_none=True)
