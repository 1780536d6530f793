"""Answer label-state questions about an issue.

Each question combines labels already on the issue with the label being added
by the triggering event. The label read may not reflect that event's label yet,
so a `labeled` event is checked explicitly.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from repo_gardening.labels import (
    ESCALATED_LABELS,
    LABEL_BUG,
    is_escalated_label,
    is_priority_label,
)

ACTION_LABELED = "labeled"


def _event_label_applies(action: str, event_label: str | None) -> bool:
    return action == ACTION_LABELED and bool(event_label)


def priority_labels(labels: Iterable[str], action: str, event_label: str | None) -> list[str]:
    """Return the priority labels on the issue, including one being added right now."""

    found = [label for label in labels if is_priority_label(label)]
    if _event_label_applies(action, event_label) and is_priority_label(event_label or ""):
        found.append(event_label or "")
    return found


def is_escalated(labels: Iterable[str], action: str, event_label: str | None) -> bool:
    if not ESCALATED_LABELS.isdisjoint(labels):
        return True
    # The legacy "Escalated to Kitkat" label is covered by the prefix match.
    return _event_label_applies(action, event_label) and is_escalated_label(event_label or "")


def is_bug(labels: Iterable[str], action: str, event_label: str | None) -> bool:
    if LABEL_BUG in set(labels):
        return True
    return _event_label_applies(action, event_label) and event_label == LABEL_BUG


class LabelReader(Protocol):
    def list_labels(self, *, issue_number: int) -> list[str]: ...


class LabelStateResolver:
    """Resolve label state by reading the issue's labels from GitHub.

    Every query performs its own read. Callers evaluating several questions for
    the same event can read once and use the module-level functions instead.
    """

    def __init__(self, *, reader: LabelReader) -> None:
        self._reader = reader

    def priority_labels(
        self, *, issue_number: int, action: str, event_label: str | None = None
    ) -> list[str]:
        labels = self._reader.list_labels(issue_number=issue_number)
        return priority_labels(labels, action, event_label)

    def is_escalated(
        self, *, issue_number: int, action: str, event_label: str | None = None
    ) -> bool:
        labels = self._reader.list_labels(issue_number=issue_number)
        return is_escalated(labels, action, event_label)

    def is_bug(self, *, issue_number: int, action: str, event_label: str | None = None) -> bool:
        labels = self._reader.list_labels(issue_number=issue_number)
        return is_bug(labels, action, event_label)
