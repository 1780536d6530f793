"""GitHub `issues` webhook event models.

Only the fields triage needs are modelled; everything else in the payload is
ignored. GitHub Actions writes the payload to the file named by
`GITHUB_EVENT_PATH`.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _EventModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class EventLabel(_EventModel):
    name: str = Field(default="")


class EventOwner(_EventModel):
    login: str


class EventRepository(_EventModel):
    owner: EventOwner
    name: str
    full_name: str


class EventIssue(_EventModel):
    number: int = Field(..., gt=0)
    body: str = Field(default="")
    state: str = Field(default="open")
    labels: list[EventLabel] = Field(default_factory=list)

    @field_validator("body", mode="before")
    @classmethod
    def _null_body_is_empty(cls, value: object) -> object:
        # Issues created without a description have `"body": null`.
        return "" if value is None else value


class IssueEvent(_EventModel):
    """An `issues` event payload.

    `label` is only present for `labeled` / `unlabeled` actions.
    """

    action: str
    issue: EventIssue
    repository: EventRepository
    label: EventLabel | None = None

    @property
    def event_label(self) -> str | None:
        if self.label is None or not self.label.name:
            return None
        return self.label.name


def load_issue_event(path: Path) -> IssueEvent:
    """Load and validate an event payload from a JSON file."""

    raw = json.loads(path.read_text(encoding="utf-8"))
    return IssueEvent.model_validate(raw)
