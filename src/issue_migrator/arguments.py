"""Command token parsing.

The CLI takes a flat list of tokens rather than flags, e.g.::

    from:old-repo target:new-repo bug not:wontfix transfer live

Parsing is a fold over the tokens; when a field is given twice, the later token wins.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Literal

Command = Literal["purge", "transfer"]

SOURCE_PREFIX = "from:"
TARGET_PREFIX = "target:"
EXCLUDE_PREFIX = "not:"


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Options for one invocation, built once from the raw tokens."""

    command: Command = "transfer"
    source_repo: str | None = None
    target_repo: str | None = None
    label: str | None = None
    exclude_label: str | None = None
    live: bool = False


def _apply_token(options: CommandOptions, token: str) -> CommandOptions:
    if token.startswith(EXCLUDE_PREFIX):
        return replace(options, exclude_label=token[len(EXCLUDE_PREFIX) :])
    if token == "live":
        return replace(options, live=True)
    if token.startswith(SOURCE_PREFIX):
        return replace(options, source_repo=token[len(SOURCE_PREFIX) :])
    if token.startswith(TARGET_PREFIX):
        return replace(options, target_repo=token[len(TARGET_PREFIX) :])
    if token == "purge":
        return replace(options, command="purge")
    if token == "transfer":
        return replace(options, command="transfer")
    # Anything unrecognised is the label filter.
    return replace(options, label=token)


def parse_arguments(tokens: Iterable[str]) -> CommandOptions:
    """Fold command tokens into a `CommandOptions` record.

    No validation happens here; missing repository names are reported by the
    workflow that needs them.
    """

    options = CommandOptions()
    for token in tokens:
        options = _apply_token(options, token)
    return options
