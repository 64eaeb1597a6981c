"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from issue_migrator.github.client import GitHubClient


def make_issue_json(
    number: int,
    *,
    title: str | None = None,
    body: str | None = "Body",
    labels: list[str] | None = None,
    assignees: list[str] | None = None,
) -> dict[str, Any]:
    """Build an issue payload shaped like the GitHub REST API response."""
    return {
        "id": 1000 + number,
        "number": number,
        "title": title or f"Issue {number}",
        "body": body,
        "html_url": f"https://github.com/octo-org/old-repo/issues/{number}",
        "labels": [{"id": i, "name": name} for i, name in enumerate(labels or [])],
        "assignees": [{"login": login} for login in assignees or []],
    }


def make_response(status_code: int = 200, payload: Any = None) -> Mock:
    """Build a fake `requests.Response`."""
    resp = Mock(spec=requests.Response)
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.json.return_value = payload
    resp.text = "" if payload is None else str(payload)
    return resp


@pytest.fixture
def issue_json() -> Callable[..., dict[str, Any]]:
    return make_issue_json


@pytest.fixture
def response() -> Callable[..., Mock]:
    return make_response


@pytest.fixture
def session() -> requests.Session:
    """A real session whose `request` method is replaced by a mock."""
    s = requests.Session()
    s.request = Mock(name="request")  # type: ignore[method-assign]
    return s


@pytest.fixture
def client(session: requests.Session) -> GitHubClient:
    return GitHubClient(token="test-token", org="octo-org", session=session)


@pytest.fixture(autouse=True)
def _clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep a developer's local .env out of the tests.
    monkeypatch.chdir(tmp_path)
    for name in (
        "GITHUB_ORG",
        "GITHUB_TOKEN",
        "GITHUB_BASE_URL",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "MIGRATOR_PAUSE_SECONDS",
        "MIGRATOR_REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
