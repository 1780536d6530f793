"""Decide and apply triage labels for an issue event.

Planning is a pure function of an `IssueSnapshot`. Applying a plan is the only
step that talks to GitHub, and each label group is applied on its own so that
one failing group never hides the others.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from repo_gardening.events import IssueEvent
from repo_gardening.labels import platform_label, plugin_label, priority_label
from repo_gardening.triage.label_state import LabelReader, is_bug, priority_labels
from repo_gardening.triage.priority import PriorityTier, find_priority
from repo_gardening.triage.signals import find_platforms, find_plugins

logger = logging.getLogger(__name__)

TRIAGE_ACTIONS: frozenset[str] = frozenset({"opened", "reopened"})

GROUP_PLUGIN = "plugin"
GROUP_PLATFORM = "platform"
GROUP_PRIORITY = "priority"


class IssueLabels(LabelReader, Protocol):
    """Label read/write collaborator bound to a single repository.

    `add_labels` must accept labels that are already on the issue.
    """

    def add_labels(self, *, issue_number: int, labels: list[str]) -> None: ...


@dataclass(frozen=True, slots=True)
class TriageConfig:
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class IssueSnapshot:
    """Everything a triage evaluation looks at. Never mutated."""

    issue_number: int
    action: str
    body: str = ""
    labels: frozenset[str] = frozenset()
    event_label: str | None = None

    @classmethod
    def from_event(cls, event: IssueEvent, labels: list[str]) -> IssueSnapshot:
        return cls(
            issue_number=event.issue.number,
            action=event.action,
            body=event.issue.body,
            labels=frozenset(labels),
            event_label=event.event_label,
        )


def _unique(labels: list[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(labels))


@dataclass(frozen=True, slots=True)
class TriagePlan:
    """Labels to add, grouped by namespace."""

    plugin_labels: tuple[str, ...] = ()
    platform_labels: tuple[str, ...] = ()
    priority_labels: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.plugin_labels or self.platform_labels or self.priority_labels)

    def groups(self) -> list[tuple[str, tuple[str, ...]]]:
        """Non-empty label groups in application order."""

        candidates = [
            (GROUP_PLUGIN, self.plugin_labels),
            (GROUP_PLATFORM, self.platform_labels),
            (GROUP_PRIORITY, self.priority_labels),
        ]
        return [(name, labels) for name, labels in candidates if labels]


@dataclass(frozen=True, slots=True)
class LabelGroupResult:
    group: str
    labels: tuple[str, ...]
    ok: bool
    message: str = ""


@dataclass(frozen=True, slots=True)
class TriageOutcome:
    snapshot: IssueSnapshot
    priority: PriorityTier
    plan: TriagePlan
    results: list[LabelGroupResult] = field(default_factory=list)
    applied: bool = False


class LabelApplicationError(Exception):
    """Raised after applying a plan when one or more label groups failed."""

    def __init__(self, *, issue_number: int, results: list[LabelGroupResult]) -> None:
        self.issue_number = issue_number
        self.results = results
        failed = [r.group for r in results if not r.ok]
        super().__init__(f"Failed to add {', '.join(failed)} labels to issue #{issue_number}")

    @property
    def failed(self) -> list[LabelGroupResult]:
        return [r for r in self.results if not r.ok]


class TriageOrchestrator:
    """Compose signal extraction, priority classification and label state."""

    def __init__(self, *, labels: IssueLabels, config: TriageConfig | None = None) -> None:
        self._labels = labels
        self._config = config or TriageConfig()

    def plan(self, snapshot: IssueSnapshot) -> TriagePlan:
        return self.evaluate(snapshot)[1]

    def evaluate(self, snapshot: IssueSnapshot) -> tuple[PriorityTier, TriagePlan]:
        """Return the priority tier and the labels to add for a snapshot."""

        number = snapshot.issue_number
        existing_priority = priority_labels(snapshot.labels, snapshot.action, snapshot.event_label)
        if existing_priority:
            logger.debug(
                "triage-issues: issue has priority labels",
                extra={"issue_number": number, "priority_labels": existing_priority},
            )
        else:
            logger.debug(
                "triage-issues: issue has no existing priority labels",
                extra={"issue_number": number},
            )

        priority = find_priority(snapshot.body)
        logger.debug(
            "triage-issues: priority for issue",
            extra={"issue_number": number, "priority": priority.value},
        )

        bug = is_bug(snapshot.labels, snapshot.action, snapshot.event_label)

        # Only new issues are labelled; label events must not trigger more labelling.
        if snapshot.action not in TRIAGE_ACTIONS:
            return priority, TriagePlan()

        plan = TriagePlan(
            plugin_labels=_unique([plugin_label(p) for p in find_plugins(snapshot.body)]),
            platform_labels=_unique([platform_label(p) for p in find_platforms(snapshot.body)]),
            priority_labels=(
                (priority_label(priority.value),) if not existing_priority and bug else ()
            ),
        )
        if plan.priority_labels and not priority.is_resolved:
            logger.info(
                "triage-issues: priority undetermined, labelling for manual triage",
                extra={"issue_number": number, "priority": priority.value},
            )
        return priority, plan

    def apply(self, *, issue_number: int, plan: TriagePlan) -> list[LabelGroupResult]:
        """Add each non-empty label group to the issue.

        Raises:
            LabelApplicationError: if any group failed. Every group is attempted first.
        """

        results: list[LabelGroupResult] = []
        for group, labels in plan.groups():
            try:
                self._labels.add_labels(issue_number=issue_number, labels=list(labels))
            except Exception as e:
                logger.error(
                    "triage-issues: failed to add labels",
                    extra={"issue_number": issue_number, "group": group, "labels": list(labels)},
                    exc_info=True,
                )
                results.append(
                    LabelGroupResult(group=group, labels=labels, ok=False, message=str(e))
                )
                continue

            logger.debug(
                "triage-issues: added labels",
                extra={"issue_number": issue_number, "group": group, "labels": list(labels)},
            )
            results.append(LabelGroupResult(group=group, labels=labels, ok=True, message="Added"))

        if any(not r.ok for r in results):
            raise LabelApplicationError(issue_number=issue_number, results=results)
        return results

    def triage(self, event: IssueEvent) -> TriageOutcome:
        """Read the issue's labels once, then plan and apply triage labels."""

        labels = self._labels.list_labels(issue_number=event.issue.number)
        snapshot = IssueSnapshot.from_event(event, labels)
        priority, plan = self.evaluate(snapshot)

        if plan.is_empty or self._config.dry_run:
            logger.info(
                "triage-issues: no labels applied",
                extra={
                    "issue_number": snapshot.issue_number,
                    "action": snapshot.action,
                    "dry_run": self._config.dry_run,
                    "plan_empty": plan.is_empty,
                },
            )
            return TriageOutcome(snapshot=snapshot, priority=priority, plan=plan)

        results = self.apply(issue_number=snapshot.issue_number, plan=plan)
        logger.info(
            "triage-issues: labels applied",
            extra={
                "issue_number": snapshot.issue_number,
                "groups": [r.group for r in results],
            },
        )
        return TriageOutcome(
            snapshot=snapshot, priority=priority, plan=plan, results=results, applied=True
        )
