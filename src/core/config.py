"""Core configuration.

Why here:
- Centralizes dingus' own settings (pydantic-settings) without leaking
  `os.environ` reads into the locator, parser or launcher.
- The CLI builds one `AppSettings` per invocation and passes values down.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

IMPLICIT_FILENAME = ".dingus"
CONFIG_EXTENSIONS: tuple[str, ...] = (".yaml", ".yml")


def get_user_config_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Per-user config directory (cross-platform, no extra dependencies).

    Holds the named `<name>.yaml` environment files.
    """

    env = os.environ if environ is None else environ

    if sys.platform.startswith("win"):
        base = Path(env.get("APPDATA", str(Path.home())))
        return base / "dingus"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "dingus"

    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "dingus"
    return Path.home() / ".config" / "dingus"


def get_user_env_file(environ: Mapping[str, str] | None = None) -> Path:
    """Optional `settings.env` next to the named configs.

    Resolved at load time, so `DINGUS_CONFIG_DIR` and `XDG_CONFIG_HOME` set
    after import are honoured.
    """

    env = os.environ if environ is None else environ
    override = (env.get("DINGUS_CONFIG_DIR") or "").strip()
    base = Path(override) if override else get_user_config_dir(env)
    return base / "settings.env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed, validated at the edge (env vars), with one contract shared by
      the CLI and the doctor command.
    """

    model_config = SettingsConfigDict(
        env_prefix="DINGUS_",
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    config_dir: Path = Field(
        default_factory=get_user_config_dir,
        description="Directory holding named `<name>.yaml` config files.",
    )
    implicit_filename: str = Field(
        default=IMPLICIT_FILENAME,
        min_length=1,
        description="Dotfile name searched upwards when no --config is given.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for diagnostics on stderr.",
    )

    @field_validator("implicit_filename")
    @classmethod
    def _plain_filename(cls, value: str) -> str:
        if "/" in value or "\\" in value:
            raise ValueError("implicit_filename must be a bare file name")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "WARNING"

    @classmethod
    def load(cls, environ: Mapping[str, str] | None = None) -> "AppSettings":
        """Build settings from `DINGUS_*` variables and the user `settings.env`."""

        return cls(_env_file=get_user_env_file(environ))
