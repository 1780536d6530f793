"""Shared GitHub label conventions.

Labels are opaque strings everywhere except for a handful of bracketed
namespaces that triage interprets:

- `[Pri] <Tier>`       priority
- `[Type] Bug`         bug classification
- `[Status] Escalated` escalation (plus the legacy `[Status] Escalated to Kitkat`)
- `[Plugin] <Name>`    impacted plugin
- `[Platform] <Name>`  impacted platform
"""

from __future__ import annotations

import re

PRIORITY_PREFIX = "[Pri]"
PLUGIN_PREFIX = "[Plugin]"
PLATFORM_PREFIX = "[Platform]"

LABEL_BUG = "[Type] Bug"
LABEL_ESCALATED = "[Status] Escalated"
LABEL_ESCALATED_LEGACY = "[Status] Escalated to Kitkat"

ESCALATED_LABELS: frozenset[str] = frozenset({LABEL_ESCALATED, LABEL_ESCALATED_LEGACY})

PRIORITY_LABEL_RE = re.compile(r"^\[Pri\].*$")
ESCALATED_LABEL_RE = re.compile(r"^\[Status\] Escalated.*$")


def is_priority_label(name: str) -> bool:
    return PRIORITY_LABEL_RE.match(name) is not None


def is_escalated_label(name: str) -> bool:
    return ESCALATED_LABEL_RE.match(name) is not None


def plugin_label(name: str) -> str:
    return f"{PLUGIN_PREFIX} {name}"


def platform_label(name: str) -> str:
    return f"{PLATFORM_PREFIX} {name}"


def priority_label(tier: str) -> str:
    """Build a priority label from a tier value, e.g. `"High"` -> `"[Pri] High"`."""

    return f"{PRIORITY_PREFIX} {tier}"
