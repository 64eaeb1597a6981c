"""Purge and transfer workflows.

Issues are processed strictly one at a time with a pause after every mutating
call. If a call fails the exception propagates immediately, so every issue
before the failing one has been fully handled and the rest are untouched.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from issue_migrator.arguments import CommandOptions
from issue_migrator.errors import ConfigurationError
from issue_migrator.github.client import CreatedIssue, GitHubClient, Issue

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MigrationReport:
    """What a workflow run matched and changed."""

    command: str
    live: bool
    source_repo: str | None
    target_repo: str | None
    matched: list[Issue] = field(default_factory=list)
    created: list[CreatedIssue] = field(default_factory=list)
    closed: list[int] = field(default_factory=list)

    def summary(self) -> str:
        mode = "live" if self.live else "dry run"
        if self.command == "purge":
            return (
                f"[{mode}] purge {self.target_repo}: {len(self.matched)} matched, "
                f"{len(self.closed)} closed"
            )
        return (
            f"[{mode}] transfer {self.source_repo} -> {self.target_repo}: "
            f"{len(self.matched)} matched, {len(self.created)} created, "
            f"{len(self.closed)} closed"
        )


class IssueMigrator:
    """Runs a purge or transfer against a `GitHubClient`."""

    def __init__(self, *, github: GitHubClient, pause_seconds: float = 1.0) -> None:
        if pause_seconds < 0:
            raise ValueError("pause_seconds must be >= 0")
        self._github = github
        self._pause_seconds = pause_seconds

    def _pause(self) -> None:
        if self._pause_seconds:
            time.sleep(self._pause_seconds)

    def run(self, options: CommandOptions) -> MigrationReport:
        if options.command == "purge":
            return self.purge(options)
        if options.command == "transfer":
            return self.transfer(options)
        raise ConfigurationError(f"Unknown command {options.command!r}: choose purge or transfer")

    def purge(self, options: CommandOptions) -> MigrationReport:
        """Close every matching open issue in the target repository."""

        target = options.target_repo
        if not target:
            raise ConfigurationError("Target repository is not specified.")

        report = MigrationReport(
            command="purge", live=options.live, source_repo=None, target_repo=target
        )
        report.matched = self._github.list_open_issues(
            repo=target, label=options.label, exclude_label=options.exclude_label
        )

        for issue in report.matched:
            if not options.live:
                logger.info(
                    f"[Dry Run] Would purge issue: {issue.title} (#{issue.number}) in {target}",
                    extra={"dry_run": True, "repo": target, "issue_number": issue.number},
                )
                continue

            self._github.close_issue(repo=target, issue_number=issue.number)
            report.closed.append(issue.number)
            self._pause()

        return report

    def transfer(self, options: CommandOptions) -> MigrationReport:
        """Recreate matching issues in the target repository and close the originals."""

        source, target = options.source_repo, options.target_repo
        if not source or not target:
            raise ConfigurationError("Source or target repository is not specified.")

        report = MigrationReport(
            command="transfer", live=options.live, source_repo=source, target_repo=target
        )
        report.matched = self._github.list_open_issues(
            repo=source, label=options.label, exclude_label=options.exclude_label
        )

        if not options.live:
            logger.info("[Dry Run] Not creating issues", extra={"dry_run": True})
            for issue in report.matched:
                logger.info(
                    f"[Dry Run] Would create issue: {issue.title} in {target}",
                    extra={
                        "dry_run": True,
                        "source_repo": source,
                        "target_repo": target,
                        "issue_number": issue.number,
                    },
                )
            return report

        for issue in report.matched:
            logger.info(
                f"Creating issue: {issue.title} in {target}",
                extra={"source_repo": source, "issue_number": issue.number},
            )
            created = self._github.create_issue(
                repo=target,
                title=issue.title,
                body=issue.body,
                labels=list(issue.labels),
                assignees=list(issue.assignees),
            )
            report.created.append(created)
            self._pause()

            logger.info(
                f"Closing original issue: {issue.title} in {source}",
                extra={"issue_number": issue.number, "replacement": created.number},
            )
            self._github.close_issue(repo=source, issue_number=issue.number)
            report.closed.append(issue.number)
            self._pause()

        return report
