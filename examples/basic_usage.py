#!/usr/bin/env python3
"""Programmatic transfer preview example.

This demonstrates using the migrator components directly:

* load settings from `.env`
* list the open issues of a repository that a transfer would move
* optionally run the transfer for real with `--live`

Repository names are passed as arguments (not read from `.env`).
"""

from __future__ import annotations

import argparse
from typing import Sequence

from issue_migrator.arguments import CommandOptions
from issue_migrator.config import MigratorSettings
from issue_migrator.github.client import GitHubClient
from issue_migrator.logging import configure_logging
from issue_migrator.workflows import IssueMigrator


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Transfer issues (programmatic example).")
    parser.add_argument("--source", required=True, help="Source repository name")
    parser.add_argument("--target", required=True, help="Target repository name")
    parser.add_argument("--label", default=None, help="Only issues with this label")
    parser.add_argument("--live", action="store_true", help="Apply changes")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = MigratorSettings()
    configure_logging(settings.log_level, settings.log_format)

    github = GitHubClient(
        token=settings.github_token,
        org=settings.github_org,
        base_url=settings.github_base_url,
    )
    options = CommandOptions(
        command="transfer",
        source_repo=args.source,
        target_repo=args.target,
        label=args.label,
        live=args.live,
    )

    try:
        report = IssueMigrator(github=github, pause_seconds=settings.pause_seconds).run(options)
    finally:
        github.close()

    for issue in report.matched:
        print(f"#{issue.number} {issue.title} labels={list(issue.labels)}")
    for created in report.created:
        print(f"Created {created.html_url or created.url}")
    print(report.summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
