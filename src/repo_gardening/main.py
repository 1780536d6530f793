"""CLI entrypoint for repository gardening tasks."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from repo_gardening import __version__
from repo_gardening.config import GardeningSettings
from repo_gardening.events import (
    EventIssue,
    EventLabel,
    EventOwner,
    EventRepository,
    IssueEvent,
    load_issue_event,
)
from repo_gardening.github.client import GitHubClient, IssueDetails
from repo_gardening.logging import configure_logging
from repo_gardening.triage.label_state import LabelStateResolver
from repo_gardening.triage.orchestrator import (
    LabelApplicationError,
    TriageOrchestrator,
    TriageOutcome,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2
EXIT_LABELS_FAILED = 4


def _split_repository(repository: str) -> tuple[str, str]:
    owner, _, name = repository.strip("/ ").partition("/")
    if not owner or not name or "/" in name:
        raise ValueError(f"Repository must be in the form 'owner/repo': {repository!r}")
    return owner, name


def _event_from_issue(issue: IssueDetails, *, action: str, label: str | None) -> IssueEvent:
    owner, name = _split_repository(issue.repository)
    return IssueEvent(
        action=action,
        issue=EventIssue(
            number=issue.number,
            body=issue.body,
            state=issue.state,
            labels=[EventLabel(name=n) for n in issue.labels],
        ),
        repository=EventRepository(
            owner=EventOwner(login=owner), name=name, full_name=f"{owner}/{name}"
        ),
        label=EventLabel(name=label) if label else None,
    )


def _print_outcome(outcome: TriageOutcome) -> None:
    number = outcome.snapshot.issue_number
    print(f"Issue #{number}: action={outcome.snapshot.action} priority={outcome.priority.value}")
    if outcome.plan.is_empty:
        print("No labels to add")
        return
    verb = "Added" if outcome.applied else "Would add"
    for group, labels in outcome.plan.groups():
        print(f"{verb} {group} labels: {', '.join(labels)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo-gardening",
        description="Repository gardening tasks for GitHub issues",
    )
    parser.add_argument("--version", action="version", version=f"repo-gardening {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    triage_event = subparsers.add_parser(
        "triage-issues",
        help="Triage the issue from a GitHub Actions event payload",
    )
    triage_event.add_argument(
        "--event-path",
        default=None,
        help="Path to the event JSON payload (defaults to GITHUB_EVENT_PATH)",
    )
    triage_event.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the labels that would be added without adding them",
    )

    triage_issue = subparsers.add_parser(
        "triage-issue",
        help="Fetch an issue and triage it as if an event had just occurred",
    )
    triage_issue.add_argument(
        "--repo",
        "--repository",
        dest="repository",
        required=True,
        help="Target repository in the form 'owner/repo'",
    )
    triage_issue.add_argument("--issue-number", type=int, required=True, help="Issue number")
    triage_issue.add_argument(
        "--action",
        default="opened",
        help="Event action to simulate: opened | reopened | labeled",
    )
    triage_issue.add_argument(
        "--label",
        default=None,
        help="Label added by the simulated event (only meaningful with --action labeled)",
    )
    triage_issue.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the labels that would be added without adding them",
    )

    label_state = subparsers.add_parser(
        "label-state",
        help="Show priority, escalation and bug state for an issue",
    )
    label_state.add_argument(
        "--repo",
        "--repository",
        dest="repository",
        required=True,
        help="Target repository in the form 'owner/repo'",
    )
    label_state.add_argument("--issue-number", type=int, required=True, help="Issue number")
    label_state.add_argument("--action", default="opened", help="Event action to consider")
    label_state.add_argument("--label", default=None, help="Label added by the event")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = GardeningSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your environment or .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return EXIT_CONFIG

    configure_logging(settings.log_level)

    try:
        if args.command == "triage-issues":
            event_path = Path(args.event_path) if args.event_path else settings.github_event_path
            if event_path is None:
                print(
                    "No event payload: pass --event-path or set GITHUB_EVENT_PATH",
                    file=sys.stderr,
                )
                return EXIT_CONFIG
            try:
                event = load_issue_event(event_path)
            except (OSError, json.JSONDecodeError, ValidationError) as e:
                logger.error("Unable to load event payload", extra={"path": str(event_path)})
                print(f"Invalid event payload {event_path}: {e}", file=sys.stderr)
                return EXIT_CONFIG

            github = GitHubClient(
                token=settings.github_token,
                repository=event.repository.full_name,
                base_url=settings.github_base_url,
            )
            try:
                orchestrator = TriageOrchestrator(
                    labels=github, config=settings.triage_config(dry_run=args.dry_run)
                )
                _print_outcome(orchestrator.triage(event))
                return EXIT_OK
            finally:
                github.close()

        if args.command == "triage-issue":
            github = GitHubClient(
                token=settings.github_token,
                repository=args.repository,
                base_url=settings.github_base_url,
            )
            try:
                issue = github.get_issue(issue_number=args.issue_number)
                print(f"Fetched issue #{issue.number}: {issue.title}")
                event = _event_from_issue(issue, action=args.action, label=args.label)
                orchestrator = TriageOrchestrator(
                    labels=github, config=settings.triage_config(dry_run=args.dry_run)
                )
                _print_outcome(orchestrator.triage(event))
                return EXIT_OK
            finally:
                github.close()

        if args.command == "label-state":
            github = GitHubClient(
                token=settings.github_token,
                repository=args.repository,
                base_url=settings.github_base_url,
            )
            try:
                resolver = LabelStateResolver(reader=github)
                number, action, label = args.issue_number, args.action, args.label
                priority = resolver.priority_labels(
                    issue_number=number, action=action, event_label=label
                )
                escalated = resolver.is_escalated(
                    issue_number=number, action=action, event_label=label
                )
                bug = resolver.is_bug(issue_number=number, action=action, event_label=label)
                print(f"Issue #{args.issue_number}")
                print(f"priority labels: {', '.join(priority) or 'none'}")
                print(f"escalated: {escalated}")
                print(f"bug: {bug}")
                return EXIT_OK
            finally:
                github.close()

        logger.error("Unknown command", extra={"command": args.command})
        return EXIT_CONFIG

    except LabelApplicationError as e:
        for result in e.failed:
            logger.error(
                "Label group failed",
                extra={
                    "issue_number": e.issue_number,
                    "group": result.group,
                    "error": result.message,
                },
            )
        print(str(e), file=sys.stderr)
        return EXIT_LABELS_FAILED

    except Exception:
        logger.exception("Command failed")
        return EXIT_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
