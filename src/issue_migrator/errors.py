"""Exceptions raised by the migrator.

All of them are fatal: the CLI logs the details and exits non-zero.
"""

from __future__ import annotations


class MigratorError(Exception):
    """Base class for migrator failures."""


class ConfigurationError(MigratorError):
    """Raised when the selected command is missing a required repository name."""


class GitHubError(MigratorError):
    """Base class for failed GitHub API calls."""

    def __init__(self, message: str, *, operation: str) -> None:
        super().__init__(message)
        self.operation = operation


class GitHubTransportError(GitHubError):
    """The request was sent but no response was received."""


class GitHubApiError(GitHubError):
    """GitHub answered with a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        status_code: int,
        server_message: str | None = None,
    ) -> None:
        super().__init__(message, operation=operation)
        self.status_code = status_code
        self.server_message = server_message

    def __str__(self) -> str:
        text = f"{self.args[0]} (status {self.status_code})"
        if self.server_message:
            text += f": {self.server_message}"
        return text
