"""Configuration for the issue migrator.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

The organization and token are deliberately not validated here: a missing
token surfaces as an authorization failure from GitHub on the first call.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MigratorSettings(BaseSettings):
    """Settings for the issue migrator.

    Environment variables:
    - GITHUB_ORG
    - GITHUB_TOKEN
    - GITHUB_BASE_URL          (optional)
    - LOG_LEVEL                (optional)
    - LOG_FORMAT               (optional)
    - MIGRATOR_PAUSE_SECONDS   (optional)
    - MIGRATOR_REQUEST_TIMEOUT (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `MigratorSettings(_env_file=path_to_env)`.
    """

    github_org: str = Field(
        default="",
        validation_alias="GITHUB_ORG",
        description="Organization that owns both the source and target repositories",
    )
    github_token: str = Field(
        default="",
        validation_alias="GITHUB_TOKEN",
        description="GitHub token used for API authentication",
    )
    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_BASE_URL",
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        validation_alias="LOG_FORMAT",
        description="json for one JSON object per line, text for plain console output",
    )

    pause_seconds: float = Field(
        default=1.0,
        ge=0.0,
        validation_alias="MIGRATOR_PAUSE_SECONDS",
        description="Pause after every create/close call to stay under the rate limit",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        validation_alias="MIGRATOR_REQUEST_TIMEOUT",
        description="Per-request HTTP timeout",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )
