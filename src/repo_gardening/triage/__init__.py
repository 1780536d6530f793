"""Issue triage task.

Pure decision logic over an issue snapshot:
- extract plugin/platform/priority signals from the issue form body
- classify the priority tier
- resolve existing label state
- plan (and apply) the labels to add
"""

from repo_gardening.triage.orchestrator import (
    IssueSnapshot,
    LabelApplicationError,
    TriageConfig,
    TriageOrchestrator,
    TriageOutcome,
    TriagePlan,
)
from repo_gardening.triage.priority import PriorityTier, classify_priority, find_priority

__all__ = [
    "IssueSnapshot",
    "LabelApplicationError",
    "PriorityTier",
    "TriageConfig",
    "TriageOrchestrator",
    "TriageOutcome",
    "TriagePlan",
    "classify_priority",
    "find_priority",
]
