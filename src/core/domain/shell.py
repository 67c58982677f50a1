"""Shell dialects understood by the emitter.

This module centralizes the closed set of shell families dingus can write
export statements for. Keeping it in the domain layer lets both the CLI and
the emitter share a single source of truth; adding a dialect means adding an
enum member and its rendering rule.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath


class ShellDialect(str, Enum):
    """Supported shell families for export statements."""

    POSIX = "posix"
    FISH = "fish"

    @classmethod
    def default(cls) -> "ShellDialect":
        """Return the dialect used when the shell is unknown."""

        return cls.POSIX

    @classmethod
    def detect(cls, shell_path: str | None) -> "ShellDialect":
        """Derive a dialect from a `$SHELL`-style path.

        Only the basename matters (`/usr/local/bin/fish` -> FISH). Anything
        unrecognized, including a missing value, falls back to the default.
        """

        if not shell_path:
            return cls.default()
        name = PurePath(shell_path.strip()).name
        if name == "fish":
            return cls.FISH
        return cls.default()

    def label(self) -> str:
        """Human readable label for diagnostics and logging."""

        return "fish" if self is ShellDialect.FISH else "POSIX (sh/bash/zsh)"
