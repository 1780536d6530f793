"""GitHub API client wrapper.

This wraps PyGithub (and a plain REST session) to keep GitHub calls out of the
triage logic and make tests easy. The client is bound to one repository.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests
from github import Auth, Github
from github.Repository import Repository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IssueDetails:
    """Minimal issue metadata fetched from GitHub."""

    repository: str
    number: int
    title: str
    body: str
    state: str
    labels: list[str]


class GitHubClient:
    """Small wrapper around PyGithub for the label operations triage needs."""

    def __init__(
        self,
        *,
        token: str,
        repository: str,
        base_url: str = "https://api.github.com",
        repo: Repository | None = None,
        github_api: Github | None = None,
    ) -> None:
        if not token:
            raise ValueError("GitHub token is required")
        if not repository.strip("/ "):
            raise ValueError("GitHub repository is required")

        self._repository_name = repository.strip("/ ")
        self._rest_base_url = base_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": "repo-gardening",
            }
        )

        if repo is not None:
            self._repo = repo
            self._github = None
            logger.debug("Using injected Repository instance")
            return

        auth = Auth.Token(token)
        self._github = github_api or Github(auth=auth, base_url=self._rest_base_url)

        self._repo = self._github.get_repo(self._repository_name)
        logger.info(
            "Authenticated with GitHub and connected to repository",
            extra={"repo": self._repository_name},
        )

    @property
    def repository(self) -> str:
        """Return the configured repository name ("owner/repo")."""

        return self._repository_name

    def _issues_url(self, *, issue_number: int, suffix: str = "") -> str:
        if issue_number <= 0:
            raise ValueError("issue_number must be a positive integer")
        if suffix and not suffix.startswith("/"):
            suffix = "/" + suffix
        return f"{self._rest_base_url}/repos/{self._repository_name}/issues/{issue_number}{suffix}"

    @staticmethod
    def _label_names(value: object) -> list[str]:
        if not isinstance(value, list):
            return []
        names: list[str] = []
        for item in value:
            if isinstance(item, dict):
                name = item.get("name")
                if isinstance(name, str) and name:
                    names.append(name)
            elif isinstance(item, str) and item:
                names.append(item)
        return names

    def list_labels(self, *, issue_number: int) -> list[str]:
        """Return the names of the labels currently on an issue."""

        if issue_number <= 0:
            raise ValueError("issue_number must be a positive integer")

        issue = self._repo.get_issue(number=issue_number)
        names = [label.name for label in issue.get_labels()]
        logger.debug(
            "Fetched issue labels",
            extra={"repo": self._repository_name, "issue_number": issue_number, "labels": names},
        )
        return names

    def add_labels(self, *, issue_number: int, labels: list[str]) -> None:
        """Add labels to an issue. Labels already on the issue are left as they are."""

        normalized = [label.strip() for label in labels if label.strip()]
        if not normalized:
            raise ValueError("At least one label is required")
        if issue_number <= 0:
            raise ValueError("issue_number must be a positive integer")

        issue = self._repo.get_issue(number=issue_number)
        issue.add_to_labels(*normalized)
        logger.info(
            "Issue labels added",
            extra={
                "repo": self._repository_name,
                "issue_number": issue_number,
                "labels": normalized,
            },
        )

    def get_issue(self, *, issue_number: int) -> IssueDetails:
        """Fetch an issue by number via REST."""

        url = self._issues_url(issue_number=issue_number)
        resp = self._session.get(url, timeout=30)
        resp.raise_for_status()
        data: dict[str, Any] = resp.json()

        number = data.get("number")
        if not isinstance(number, int) or number <= 0:
            raise ValueError("Invalid issue response: missing number")

        title = data.get("title")
        if not isinstance(title, str):
            title = ""

        body = data.get("body")
        if not isinstance(body, str):
            body = ""

        state = data.get("state")
        if not isinstance(state, str):
            state = ""

        return IssueDetails(
            repository=self._repository_name,
            number=number,
            title=title,
            body=body,
            state=state,
            labels=self._label_names(data.get("labels")),
        )

    def close(self) -> None:
        self._session.close()
        if self._github is not None:
            self._github.close()
