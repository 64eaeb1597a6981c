"""Unit tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from issue_migrator.config import MigratorSettings


def test_settings_defaults() -> None:
    settings = MigratorSettings()

    assert settings.github_org == ""
    assert settings.github_token == ""
    assert settings.github_base_url == "https://api.github.com"
    assert settings.log_level == "INFO"
    assert settings.pause_seconds == 1.0
    assert settings.request_timeout_seconds == 30.0


def test_settings_loads_from_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "\n".join(
            [
                "GITHUB_ORG=octo-org",
                "GITHUB_TOKEN=test-token",
                "LOG_LEVEL=DEBUG",
                "MIGRATOR_PAUSE_SECONDS=0.25",
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = MigratorSettings()

    assert settings.github_org == "octo-org"
    assert settings.github_token == "test-token"
    assert settings.log_level == "DEBUG"
    assert settings.pause_seconds == 0.25


def test_environment_overrides_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("GITHUB_ORG=from-file\n", encoding="utf-8")
    monkeypatch.setenv("GITHUB_ORG", "from-env")

    assert MigratorSettings().github_org == "from-env"


def test_explicit_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("GITHUB_TOKEN=other-token\n", encoding="utf-8")

    settings = MigratorSettings(_env_file=env_file)  # type: ignore[call-arg]

    assert settings.github_token == "other-token"


def test_missing_token_is_not_validated() -> None:
    # A missing token only shows up as a 401 from GitHub.
    assert MigratorSettings().github_token == ""


def test_log_format_setting(monkeypatch: pytest.MonkeyPatch) -> None:
    assert MigratorSettings().log_format == "json"

    monkeypatch.setenv("LOG_FORMAT", "text")
    assert MigratorSettings().log_format == "text"

    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        MigratorSettings()


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("MIGRATOR_PAUSE_SECONDS", "-1"),
        ("MIGRATOR_PAUSE_SECONDS", "soon"),
        ("MIGRATOR_REQUEST_TIMEOUT", "0"),
    ],
)
def test_invalid_numeric_settings_are_rejected(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        MigratorSettings()
