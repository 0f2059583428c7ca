"""Configuration contracts for credentials and workspace profiles."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ApiKeyAuth(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: Literal["api-key"] = "api-key"
    api_key: str = Field(alias="apiKey")

    def authorization_header(self) -> str:
        # API keys are sent without a Bearer prefix.
        return self.api_key


class OAuthAuth(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: Literal["oauth"] = "oauth"
    access_token: str = Field(alias="accessToken")
    refresh_token: str = Field(default="", alias="refreshToken")
    expires_at: str = Field(default="", alias="expiresAt")

    def authorization_header(self) -> str:
        return f"Bearer {self.access_token}"


Auth = Annotated[ApiKeyAuth | OAuthAuth, Field(discriminator="type")]


class GlobalConfig(BaseModel):
    """Contents of ``config.json``.

    A config without ``version`` is the legacy v1 layout that stores ``auth``
    inline. Version 2 points at a workspace profile instead.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    version: int = 1
    auth: Auth | None = None
    current_workspace: str | None = Field(default=None, alias="currentWorkspace")


class WorkspaceProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    organization_id: str = Field(alias="organizationId")
    organization_name: str = Field(alias="organizationName")
    url_key: str = Field(default="", alias="urlKey")
    auth: Auth
    default_team: str | None = Field(default=None, alias="defaultTeam")
