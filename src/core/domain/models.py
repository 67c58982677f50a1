"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict, self-documenting structures (Field) without coupling the core to
  filesystem or process APIs.
- Frozen models make the "constructed once per invocation" entities
  immutable in practice, not only by convention.

Note:
- These models describe *what* an environment is, not *how* it is applied.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

NESTING_COUNTER = "DINGUS_LEVEL"
SHELL_VARIABLE = "SHELL"

VariableMap = dict[str, str]


class ConfigReference(BaseModel):
    """Which configuration file the user asked for.

    `name=None` means "no explicit name": the locator performs the implicit
    upward search instead.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(
        default=None,
        description="Explicit config name (`work`, `work.yaml`) or None for implicit search.",
    )

    @property
    def is_explicit(self) -> bool:
        return self.name is not None


class ConfigFile(BaseModel):
    """A resolved configuration file and its raw bytes."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(..., description="Resolved filesystem path.")
    contents: bytes = Field(default=b"", description="Raw file contents.")


class EnvironmentSnapshot(BaseModel):
    """The inherited process environment, captured once and passed explicitly.

    Why a snapshot instead of `os.environ`:
    - Components never read ambient state ad hoc, so tests inject synthetic
      environments without touching the real process.
    """

    model_config = ConfigDict(frozen=True)

    variables: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def capture(cls, environ: Mapping[str, str] | None = None) -> "EnvironmentSnapshot":
        """Copy `environ` (default: `os.environ`) into a snapshot."""

        source = os.environ if environ is None else environ
        return cls(variables=dict(source))

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.variables.get(key, default)

    @property
    def shell_path(self) -> str | None:
        value = self.variables.get(SHELL_VARIABLE)
        return value if value else None


class ResolvedEnvironment(BaseModel):
    """Result of projecting a `VariableMap` onto an inherited environment."""

    model_config = ConfigDict(frozen=True)

    variables: dict[str, str] = Field(
        ...,
        description="Complete environment to hand to a child process.",
    )
    assignments: dict[str, str] = Field(
        ...,
        description="Entries set by projection: config order, nesting counter last.",
    )
    level: int = Field(..., ge=1, description="New value of the nesting counter.")
