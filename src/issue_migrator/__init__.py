"""Issue Migrator.

Moves and closes GitHub issues between repositories of one organization:
- `purge` closes matching open issues in a repository
- `transfer` recreates matching issues in another repository and closes the originals

Both workflows are dry runs unless the `live` token is given.
"""

__version__ = "0.1.0"

from issue_migrator.arguments import CommandOptions, parse_arguments
from issue_migrator.config import MigratorSettings

__all__ = ["__version__", "CommandOptions", "MigratorSettings", "parse_arguments"]
