"""Priority classification for bug reports.

Workaround availability drives severity; the number of impacted users breaks
ties within each workaround tier.
"""

from __future__ import annotations

import logging
from enum import Enum

from repo_gardening.triage.signals import find_priority_inputs

logger = logging.getLogger(__name__)

IMPACT_ONE = "One"
IMPACT_MOST = "Most (> 50%)"
IMPACT_ALL = "All"

BLOCKING_UNUSABLE = "No and the platform is unusable"
BLOCKING_USABLE = "No but the platform is still usable"
BLOCKING_DIFFICULT_WORKAROUND = "Yes, difficult to implement"
NO_RESPONSE = "_No response_"


class PriorityTier(str, Enum):
    """Priority tiers, declared from most to least severe.

    Values match the `[Pri]` label suffix.
    """

    BLOCKER = "BLOCKER"
    HIGH = "High"
    NORMAL = "Normal"
    LOW = "Low"
    TBD = "TBD"

    @property
    def is_resolved(self) -> bool:
        return self is not PriorityTier.TBD


def classify_priority(impact: str, blocking: str) -> PriorityTier:
    """Map reported (impact, blocking) indicators to a tier.

    Unrecognised impact values fall through to the default branch of each rule.
    """

    if blocking == BLOCKING_UNUSABLE:
        return PriorityTier.HIGH if impact == IMPACT_ONE else PriorityTier.BLOCKER
    if blocking == BLOCKING_USABLE:
        return PriorityTier.HIGH
    if blocking == BLOCKING_DIFFICULT_WORKAROUND:
        return PriorityTier.HIGH if impact == IMPACT_ALL else PriorityTier.NORMAL
    if blocking and blocking != NO_RESPONSE:
        return PriorityTier.NORMAL if impact in {IMPACT_ALL, IMPACT_MOST} else PriorityTier.LOW
    return PriorityTier.TBD


def find_priority(body: str | None) -> PriorityTier:
    """Figure out the priority of an issue from its body."""

    inputs = find_priority_inputs(body)
    tier = classify_priority(inputs.impact, inputs.blocking)
    logger.debug("triage-issues: resolved priority", extra={"priority": tier.value})
    return tier
