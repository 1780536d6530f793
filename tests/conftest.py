"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SETTINGS_ENV_VARS = (
    "GARDENING_GITHUB_TOKEN",
    "GITHUB_TOKEN",
    "GITHUB_API_URL",
    "GITHUB_EVENT_PATH",
    "LOG_LEVEL",
    "GARDENING_DRY_RUN",
)


def build_body(
    *,
    plugins: str | None = "Woo, Jetpack",
    platforms: str | None = "Simple, Self-hosted",
    impact: str | None = "All",
    blocking: str | None = "No and the platform is unusable",
) -> str:
    """Render a bug report body the way GitHub issue forms do."""

    parts = ["### Quick summary\n\nSomething broke.\n\n"]
    if plugins is not None:
        parts.append(f"### Impacted plugin\n\n{plugins}\n\n")
    if platforms is not None:
        parts.append(f"### Platform (Simple and/or Atomic)\n\n{platforms}\n\n")
    if impact is not None and blocking is not None:
        parts.append(f"### Impact\n\n{impact}\n\n### Available workarounds?\n\n{blocking}\n\n")
    parts.append("### Logs or notes\n\n_No response_\n")
    return "".join(parts)


@pytest.fixture
def bug_report_body() -> str:
    """A complete bug report body."""
    return build_body()


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate settings from the developer's environment and any local `.env`."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_body() -> Callable[..., str]:
    """Factory for bug report bodies with selected fields."""
    return build_body
