"""CLI entrypoint for the issue migrator."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from issue_migrator import __version__
from issue_migrator.arguments import parse_arguments
from issue_migrator.config import MigratorSettings
from issue_migrator.errors import ConfigurationError, GitHubApiError, GitHubError
from issue_migrator.github.client import GitHubClient
from issue_migrator.logging import configure_logging
from issue_migrator.workflows import IssueMigrator

logger = logging.getLogger(__name__)

_EPILOG = """\
tokens:
  purge | transfer   workflow to run (default: transfer)
  from:<repo>        source repository (transfer)
  target:<repo>      target repository (purge and transfer)
  not:<label>        skip issues carrying this label
  <label>            only issues carrying this label
  live               apply changes; without it nothing is modified

examples:
  issue-migrator purge target:my-repo
  issue-migrator purge target:my-repo bug live
  issue-migrator from:old-repo target:new-repo transfer
  issue-migrator from:old-repo target:new-repo bug not:wontfix transfer live

environment (or .env): GITHUB_ORG, GITHUB_TOKEN, GITHUB_BASE_URL,
LOG_LEVEL, LOG_FORMAT, MIGRATOR_PAUSE_SECONDS, MIGRATOR_REQUEST_TIMEOUT
"""


_PARSER_FLAGS = ("--help", "--version")


def build_parser() -> argparse.ArgumentParser:
    """Parser for the two real flags; every other argument is a command token."""
    parser = argparse.ArgumentParser(
        prog="issue-migrator",
        usage="%(prog)s [--help] [--version] [TOKEN ...]",
        description="Move or close GitHub issues across repositories of one organization",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("--version", action="version", version=f"issue-migrator {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    tokens = list(sys.argv[1:] if argv is None else argv)
    # Only the exact flags go through argparse, so labels like "-wip" or "-h" stay tokens.
    build_parser().parse_args([t for t in tokens if t in _PARSER_FLAGS])
    options = parse_arguments(tokens)

    try:
        settings = MigratorSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 1

    configure_logging(settings.log_level, settings.log_format)
    logger.debug(
        "Parsed options",
        extra={
            "command": options.command,
            "source_repo": options.source_repo,
            "target_repo": options.target_repo,
            "label": options.label,
            "exclude_label": options.exclude_label,
            "live": options.live,
        },
    )

    github = GitHubClient(
        token=settings.github_token,
        org=settings.github_org,
        base_url=settings.github_base_url,
        timeout=settings.request_timeout_seconds,
    )
    try:
        migrator = IssueMigrator(github=github, pause_seconds=settings.pause_seconds)
        report = migrator.run(options)
        print(report.summary())
        return 0

    except ConfigurationError as e:
        logger.error(str(e), extra={"command": options.command})
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except GitHubApiError as e:
        print(e.args[0], file=sys.stderr)
        print(f"Status: {e.status_code}", file=sys.stderr)
        print(f"Data: {e.server_message or ''}", file=sys.stderr)
        return 1

    except GitHubError as e:
        print(e, file=sys.stderr)
        print("The request was made but no response was received", file=sys.stderr)
        return 1

    except Exception:
        logger.exception("Command failed")
        return 1

    finally:
        github.close()


if __name__ == "__main__":
    raise SystemExit(main())
