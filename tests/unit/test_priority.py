"""Unit tests for the priority matrix."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from repo_gardening.triage.priority import PriorityTier, classify_priority, find_priority

UNUSABLE = "No and the platform is unusable"
USABLE = "No but the platform is still usable"
DIFFICULT = "Yes, difficult to implement"
EASY = "Yes, easy to implement"


@pytest.mark.parametrize(
    ("impact", "blocking", "expected"),
    [
        ("One", UNUSABLE, PriorityTier.HIGH),
        ("Most (> 50%)", UNUSABLE, PriorityTier.BLOCKER),
        ("All", UNUSABLE, PriorityTier.BLOCKER),
        ("", UNUSABLE, PriorityTier.BLOCKER),
        ("One", USABLE, PriorityTier.HIGH),
        ("All", USABLE, PriorityTier.HIGH),
        ("All", DIFFICULT, PriorityTier.HIGH),
        ("Most (> 50%)", DIFFICULT, PriorityTier.NORMAL),
        ("One", DIFFICULT, PriorityTier.NORMAL),
        ("All", EASY, PriorityTier.NORMAL),
        ("Most (> 50%)", EASY, PriorityTier.NORMAL),
        ("One", EASY, PriorityTier.LOW),
        ("_No response_", EASY, PriorityTier.LOW),
        ("Some other answer", EASY, PriorityTier.LOW),
        ("All", "_No response_", PriorityTier.TBD),
        ("All", "", PriorityTier.TBD),
        ("", "", PriorityTier.TBD),
    ],
)
def test_classify_priority_matrix(impact: str, blocking: str, expected: PriorityTier) -> None:
    assert classify_priority(impact, blocking) is expected


def test_priority_tier_values_match_label_suffixes() -> None:
    assert [t.value for t in PriorityTier] == ["BLOCKER", "High", "Normal", "Low", "TBD"]


def test_priority_tier_declared_most_severe_first() -> None:
    assert list(PriorityTier) == [
        PriorityTier.BLOCKER,
        PriorityTier.HIGH,
        PriorityTier.NORMAL,
        PriorityTier.LOW,
        PriorityTier.TBD,
    ]
    assert not PriorityTier.TBD.is_resolved
    assert PriorityTier.LOW.is_resolved


def test_find_priority_from_body(make_body: Callable[..., str]) -> None:
    assert find_priority(make_body(impact="All", blocking=UNUSABLE)) is PriorityTier.BLOCKER
    assert find_priority(make_body(impact=None, blocking=None)) is PriorityTier.TBD
    assert find_priority(None) is PriorityTier.TBD
