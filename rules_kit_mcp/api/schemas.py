"""Request/response schemas for HTTP mode."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from rules_kit_mcp.models import InstallRequest


class ToolCallRequest(BaseModel):
    name: str
    arguments: dict[str, Any] | None = None


class PromptRequest(BaseModel):
    name: str
    arguments: dict[str, Any] | None = None


class ProjectInfoArguments(BaseModel):
    model_config = ConfigDict(extra="ignore")

    project_path: str | None = None


class InstallRulesArguments(BaseModel):
    """``install_rules`` arguments; accepts ``global`` as well as ``global_install``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    stack: str | None = None
    version: str | None = None
    architecture: str | None = None
    mcp_tools: list[str] | None = None
    ide: str | None = None
    project_path: str | None = None
    global_install: bool = Field(
        default=False, validation_alias=AliasChoices("global", "global_install")
    )
    force: bool = False

    @field_validator("stack", "version", "architecture", "ide", "project_path", mode="before")
    @classmethod
    def _strip_whitespace(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    def to_request(self) -> InstallRequest:
        return InstallRequest(
            stack=self.stack or None,
            version=self.version or None,
            architecture=self.architecture or None,
            mcp_tools=self.mcp_tools,
            ide=self.ide or None,
            project_path=self.project_path or None,
            global_install=self.global_install,
            force=self.force,
        )


class ToolDescriptor(BaseModel):
    name: str
    description: str
    inputSchema: dict[str, Any]  # noqa: N815
