"""Configuration for repository gardening tasks.

Configuration is loaded from:
- environment variables (GitHub Actions provides most of them)
- and a local `.env` file (if present)

A dedicated `GARDENING_GITHUB_TOKEN` takes precedence over `GITHUB_TOKEN` so a
token with wider permissions can be supplied without clobbering the default
workflow token.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from repo_gardening.triage.orchestrator import TriageConfig


class GardeningSettings(BaseSettings):
    """Settings for gardening tasks.

    Environment variables:
    - GARDENING_GITHUB_TOKEN or GITHUB_TOKEN
    - GITHUB_API_URL     (optional)
    - GITHUB_EVENT_PATH  (optional)
    - LOG_LEVEL          (optional)
    - GARDENING_DRY_RUN  (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `GardeningSettings(_env_file=path_to_env)`.
    """

    github_token: str = Field(
        default="",
        validation_alias=AliasChoices("GARDENING_GITHUB_TOKEN", "GITHUB_TOKEN"),
        description="GitHub token used to read and add issue labels",
    )
    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_API_URL",
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )
    github_event_path: Path | None = Field(
        default=None,
        validation_alias="GITHUB_EVENT_PATH",
        description="Path to the JSON payload of the triggering webhook event",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    dry_run: bool = Field(
        default=False,
        validation_alias="GARDENING_DRY_RUN",
        description="Plan labels without adding them",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _require_github_auth(self) -> GardeningSettings:
        if not self.github_token.strip():
            raise ValueError("GARDENING_GITHUB_TOKEN or GITHUB_TOKEN is required")
        return self

    def triage_config(self, *, dry_run: bool = False) -> TriageConfig:
        """Explicit triage configuration; `dry_run` forces a dry run on top of the setting."""

        return TriageConfig(dry_run=self.dry_run or dry_run)
