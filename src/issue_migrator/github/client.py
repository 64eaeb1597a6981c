"""GitHub REST client for the three issue calls the migrator needs.

Every call is synchronous: it returns only once GitHub has answered, and any
failure is raised as a `GitHubError` subclass instead of being logged and dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

from issue_migrator import __version__
from issue_migrator.errors import GitHubApiError, GitHubTransportError

logger = logging.getLogger(__name__)

PER_PAGE = 100


@dataclass(frozen=True, slots=True)
class Issue:
    """The fields of an open issue that the migrator reads."""

    id: int
    number: int
    title: str
    body: str | None
    labels: tuple[str, ...]
    assignees: tuple[str, ...]
    html_url: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Issue:
        number = data.get("number")
        if not isinstance(number, int) or number <= 0:
            raise ValueError("Invalid issue response: missing number")

        title = data.get("title")
        body = data.get("body")
        html_url = data.get("html_url")
        return cls(
            id=int(data.get("id") or 0),
            number=number,
            title=title if isinstance(title, str) else "",
            body=body if isinstance(body, str) else None,
            labels=tuple(_names(data.get("labels"), key="name")),
            assignees=tuple(_names(data.get("assignees"), key="login")),
            html_url=html_url if isinstance(html_url, str) else None,
        )

    def has_label(self, name: str) -> bool:
        return name in self.labels


@dataclass(frozen=True, slots=True)
class CreatedIssue:
    """Minimal metadata of an issue created by `GitHubClient.create_issue`."""

    repository: str
    number: int
    url: str
    html_url: str | None


def _names(value: object, *, key: str) -> list[str]:
    if not isinstance(value, list):
        return []
    names: list[str] = []
    for item in value:
        # The issues API returns label objects, but labels may also be plain strings.
        if isinstance(item, str):
            names.append(item)
        elif isinstance(item, dict):
            name = item.get(key)
            if isinstance(name, str) and name:
                names.append(name)
    return names


def _server_message(resp: requests.Response) -> str | None:
    try:
        data = resp.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return resp.text.strip() or None


class GitHubClient:
    """Thin wrapper around `requests` for listing, closing and creating issues.

    Repository names are given per call; all of them live under ``org``.
    """

    def __init__(
        self,
        *,
        token: str,
        org: str,
        base_url: str = "https://api.github.com",
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self._org = org.strip().strip("/")
        self._rest_base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": f"issue-migrator/{__version__}",
            }
        )

    @property
    def org(self) -> str:
        return self._org

    def _issues_url(self, *, repo: str, issue_number: int | None = None) -> str:
        repo = repo.strip().strip("/")
        if not repo:
            raise ValueError("repo is required")
        url = f"{self._rest_base_url}/repos/{self._org}/{repo}/issues"
        if issue_number is not None:
            if issue_number <= 0:
                raise ValueError("issue_number must be a positive integer")
            url += f"/{issue_number}"
        return url

    def _request(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> requests.Response:
        try:
            resp = self._session.request(
                method, url, params=params, json=json, timeout=self._timeout
            )
        except requests.RequestException as e:
            logger.error(
                "The request was made but no response was received",
                extra={"operation": operation, "url": url, "error": str(e)},
            )
            raise GitHubTransportError(
                f"Error {operation}: {e}", operation=operation
            ) from e

        if not 200 <= resp.status_code < 300:
            server_message = _server_message(resp)
            logger.error(
                "GitHub API call failed",
                extra={
                    "operation": operation,
                    "url": url,
                    "status": resp.status_code,
                    "server_message": server_message,
                },
            )
            raise GitHubApiError(
                f"Error {operation}",
                operation=operation,
                status_code=resp.status_code,
                server_message=server_message,
            )
        return resp

    def list_open_issues(
        self,
        *,
        repo: str,
        label: str | None = None,
        exclude_label: str | None = None,
    ) -> list[Issue]:
        """Fetch every open issue in ``repo``, optionally filtered by label.

        Pages are requested until one comes back short; the endpoint has no
        reliable total count.
        """

        url = self._issues_url(repo=repo)
        params: dict[str, Any] = {"state": "open", "per_page": PER_PAGE}
        if label:
            params["labels"] = label

        issues: list[Issue] = []
        page = 1
        while True:
            resp = self._request(
                "GET",
                url,
                operation="getting issues",
                params={**params, "page": page},
            )
            payload = resp.json()
            if not isinstance(payload, list):
                raise ValueError("Unexpected issues response: expected a list")

            issues.extend(Issue.from_json(item) for item in payload if isinstance(item, dict))
            logger.debug(
                "Fetched issues page",
                extra={"repo": repo, "page": page, "count": len(payload)},
            )

            if len(payload) < PER_PAGE:
                break
            page += 1

        if exclude_label:
            issues = [issue for issue in issues if not issue.has_label(exclude_label)]

        logger.info(
            "Fetched open issues",
            extra={
                "repo": repo,
                "label": label,
                "exclude_label": exclude_label,
                "count": len(issues),
            },
        )
        return issues

    def close_issue(self, *, repo: str, issue_number: int) -> None:
        """Set an issue's state to closed."""

        logger.info("Closing issue", extra={"repo": repo, "issue_number": issue_number})
        url = self._issues_url(repo=repo, issue_number=issue_number)
        self._request("PATCH", url, operation="closing issue", json={"state": "closed"})

    def create_issue(
        self,
        *,
        repo: str,
        title: str,
        body: str | None,
        labels: list[str],
        assignees: list[str],
    ) -> CreatedIssue:
        """Create an issue carrying exactly the given fields."""

        url = self._issues_url(repo=repo)
        payload = {"title": title, "body": body, "labels": labels, "assignees": assignees}
        resp = self._request("POST", url, operation="creating issue", json=payload)
        data: dict[str, Any] = resp.json()

        number = data.get("number")
        if not isinstance(number, int) or number <= 0:
            raise ValueError("Unexpected create issue response: missing number")

        created = CreatedIssue(
            repository=repo,
            number=number,
            url=str(data.get("url") or ""),
            html_url=data.get("html_url"),
        )
        logger.info(
            "Created issue",
            extra={"repo": repo, "issue_number": number, "url": created.url},
        )
        return created

    def close(self) -> None:
        self._session.close()
