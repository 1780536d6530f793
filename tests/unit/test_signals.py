"""Unit tests for triage signal extraction from issue bodies."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from repo_gardening.triage.priority import PriorityTier, find_priority
from repo_gardening.triage.signals import (
    PriorityInputs,
    find_platforms,
    find_plugins,
    find_priority_inputs,
)


def test_find_plugins_splits_names(make_body: Callable[..., str]) -> None:
    assert find_plugins(make_body(plugins="A, B")) == ["A", "B"]


def test_find_plugins_keeps_spaces_within_names(make_body: Callable[..., str]) -> None:
    assert find_plugins(make_body(plugins="Jetpack, VaultPress Backup")) == [
        "Jetpack",
        "VaultPress Backup",
    ]


def test_find_plugins_drops_empty_entries(make_body: Callable[..., str]) -> None:
    assert find_plugins(make_body(plugins="Jetpack, , ")) == ["Jetpack"]


def test_find_plugins_missing_section(make_body: Callable[..., str]) -> None:
    assert find_plugins(make_body(plugins=None)) == []
    assert find_plugins("") == []


def test_find_plugins_rejects_unexpected_characters(make_body: Callable[..., str]) -> None:
    assert find_plugins(make_body(plugins="_No response_")) == []


def test_find_plugins_logs_absence(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("DEBUG", logger="repo_gardening.triage.signals"):
        find_plugins("### Something else\n\nvalue\n\n")

    assert "no plugin indicators found" in caplog.text


def test_find_platforms_excludes_self_hosted(make_body: Callable[..., str]) -> None:
    body = make_body(platforms="Simple, Self-hosted, Atomic")

    assert find_platforms(body) == ["Simple", "Atomic"]


def test_find_platforms_only_self_hosted(make_body: Callable[..., str]) -> None:
    assert find_platforms(make_body(platforms="Self-hosted")) == []


def test_find_platforms_missing_section(make_body: Callable[..., str]) -> None:
    assert find_platforms(make_body(platforms=None)) == []


def test_find_priority_inputs_returns_values_as_written(make_body: Callable[..., str]) -> None:
    body = make_body(impact="Most (> 50%)", blocking="Yes, difficult to implement")

    assert find_priority_inputs(body) == PriorityInputs(
        impact="Most (> 50%)", blocking="Yes, difficult to implement"
    )


def test_find_priority_inputs_keeps_no_response_placeholder(
    make_body: Callable[..., str],
) -> None:
    body = make_body(impact="_No response_", blocking="_No response_")

    assert find_priority_inputs(body) == PriorityInputs("_No response_", "_No response_")


def test_find_priority_inputs_missing_sections(make_body: Callable[..., str]) -> None:
    assert find_priority_inputs(make_body(impact=None, blocking=None)) == PriorityInputs("", "")


def test_find_priority_inputs_requires_adjacent_sections() -> None:
    body = "### Impact\n\nAll\n\n### Other\n\nx\n\n### Available workarounds?\n\nNo\n"

    assert find_priority_inputs(body) == PriorityInputs("", "")


def test_find_priority_inputs_empty_impact() -> None:
    body = "### Impact\n\n\n\n### Available workarounds?\n\nNo but the platform is still usable\n"

    assert find_priority_inputs(body) == PriorityInputs("", "No but the platform is still usable")


def test_find_priority_inputs_first_pair_wins() -> None:
    body = (
        "### Impact\n\nOne\n\n### Available workarounds?\n\nNo and the platform is unusable\n\n"
        "### Impact\n\nAll\n\n### Available workarounds?\n\nYes, easy to implement\n"
    )

    assert find_priority_inputs(body) == PriorityInputs("One", "No and the platform is unusable")


def test_find_priority_inputs_requires_blank_line_after_impact_header() -> None:
    body = "### Impact\nAll\n\n### Available workarounds?\n\nNo and the platform is unusable\n"

    assert find_priority_inputs(body) == PriorityInputs("", "")
    assert find_priority(body) is PriorityTier.TBD


def test_find_priority_inputs_rejects_multi_line_impact() -> None:
    body = (
        "### Impact\n\nOne\nreally all\n\n"
        "### Available workarounds?\n\nYes, easy to implement\n"
    )

    assert find_priority_inputs(body) == PriorityInputs("", "")


def test_find_priority_inputs_skips_malformed_pair() -> None:
    body = (
        "### Impact\nAll\n\n### Available workarounds?\n\nNo and the platform is unusable\n\n"
        "### Impact\n\nOne\n\n### Available workarounds?\n\nYes, easy to implement\n"
    )

    assert find_priority_inputs(body) == PriorityInputs("One", "Yes, easy to implement")
