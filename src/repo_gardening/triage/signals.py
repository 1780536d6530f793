"""Extract triage signals from issue form bodies.

The bug report form asks reporters for the impacted plugins, the platforms they
run on, and two priority indicators (how many users are impacted and whether a
workaround exists). Every extractor degrades to an empty result when its
section is missing or malformed; the absence is logged, never raised.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from repo_gardening.triage.sections import Section, find_section, parse_sections

logger = logging.getLogger(__name__)

PLUGIN_HEADER = "Impacted plugin"
PLATFORM_HEADER = "Platform (Simple and/or Atomic)"
IMPACT_HEADER = "Impact"
WORKAROUNDS_HEADER = "Available workarounds?"

SELF_HOSTED = "Self-hosted"

_LIST_SEPARATOR = ", "
_PLUGIN_VALUE_RE = re.compile(r"[a-zA-Z ,]*")
_PLATFORM_VALUE_RE = re.compile(r"[a-zA-Z ,-]*")


@dataclass(frozen=True, slots=True)
class PriorityInputs:
    """Reporter-supplied priority indicators, exactly as written in the body."""

    impact: str = ""
    blocking: str = ""


def _list_value(section: Section | None, allowed: re.Pattern[str]) -> list[str] | None:
    if section is None:
        return None
    paragraph = section.paragraph
    if len(paragraph) != 1 or allowed.fullmatch(paragraph[0]) is None:
        return None
    return [v for v in paragraph[0].split(_LIST_SEPARATOR) if v.strip()]


def _line_value(section: Section) -> str | None:
    """The single value line of a section, which may be empty; None when malformed."""

    value = section.value
    if value is None:
        return None
    if not value.strip():
        return value
    return value if len(section.paragraph) == 1 else None


def find_plugins(body: str | None) -> list[str]:
    """Find the plugins impacted by an issue."""

    plugins = _list_value(find_section(parse_sections(body), PLUGIN_HEADER), _PLUGIN_VALUE_RE)
    if plugins is None:
        logger.debug("triage-issues: no plugin indicators found")
        return []
    return plugins


def find_platforms(body: str | None) -> list[str]:
    """Find the platforms impacted by an issue.

    Self-hosted reports have no matching `[Platform]` label and are dropped.
    """

    platforms = _list_value(
        find_section(parse_sections(body), PLATFORM_HEADER), _PLATFORM_VALUE_RE
    )
    if platforms is None:
        logger.debug("triage-issues: no platform indicators found")
        return []
    return [p for p in platforms if p != SELF_HOSTED]


def find_priority_inputs(body: str | None) -> PriorityInputs:
    """Find the first `Impact` section immediately followed by `Available workarounds?`.

    Both sections must hold a single value line after the blank separator; malformed
    pairs are skipped. Returns empty inputs when no pair matches; callers classify
    that as TBD.
    """

    sections = parse_sections(body)
    for current, following in zip(sections, sections[1:]):
        if current.header != IMPACT_HEADER or following.header != WORKAROUNDS_HEADER:
            continue
        impact, blocking = _line_value(current), _line_value(following)
        if impact is None or blocking is None:
            continue
        inputs = PriorityInputs(impact=impact, blocking=blocking)
        logger.debug(
            "triage-issues: reported priority indicators",
            extra={"impact": inputs.impact, "blocking": inputs.blocking},
        )
        return inputs

    logger.debug("triage-issues: no priority indicators found")
    return PriorityInputs()
