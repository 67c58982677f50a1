"""Error taxonomy for dingus.

Why a single hierarchy:
- Adapters and services raise; only the CLI catches `DingusError`, so every
  failure is reported the same way (stage + message + exit code).
- Each stage owns one exception type, which makes the failing stage obvious
  to the user without parsing messages.
"""

from __future__ import annotations

from pathlib import Path


class DingusError(Exception):
    """Base class for every failure that terminates an invocation."""

    stage = "dingus"
    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigNotFoundError(DingusError):
    """No configuration file matched the reference (explicit or searched)."""

    stage = "locate"
    exit_code = 2


class AmbiguousConfigError(ConfigNotFoundError):
    """Both `<name>.yaml` and `<name>.yml` exist for the same name."""

    def __init__(self, first: Path, second: Path) -> None:
        super().__init__(
            "found two conflicting config files, specify the extension or rename one: "
            f"{first} / {second}"
        )
        self.first = first
        self.second = second


class ConfigParseError(DingusError):
    """The configuration document is not a mapping of names to scalars."""

    stage = "parse"
    exit_code = 3


class ConfigError(DingusError):
    """Required ambient configuration (e.g. the shell path) is missing."""

    stage = "configure"
    exit_code = 4


class SpawnError(DingusError):
    """The child shell process could not be created."""

    stage = "launch"
    exit_code = 5
