"""Config discovery for `dingus list`."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from adapters.config_locator import find_implicit_config
from core.config import CONFIG_EXTENSIONS, IMPLICIT_FILENAME
from core.errors import ConfigNotFoundError


@dataclass
class ConfigListing:
    """What `list` shows: the implicit file in scope and the named configs."""

    config_dir: Path
    implicit: Path | None = None
    named: list[str] = field(default_factory=list)


def list_named_configs(config_dir: Path) -> list[str]:
    """Sorted file names of `.yaml`/`.yml` files in `config_dir`."""

    try:
        if not config_dir.is_dir():
            return []
        return sorted(
            entry.name
            for entry in config_dir.iterdir()
            if entry.is_file() and entry.suffix.lower() in CONFIG_EXTENSIONS
        )
    except OSError as exc:
        raise ConfigNotFoundError(f"cannot list {config_dir}: {exc.strerror or exc}") from exc


def build_listing(
    config_dir: Path,
    start_dir: Path | None,
    implicit_name: str = IMPLICIT_FILENAME,
) -> ConfigListing:
    """Without a `start_dir` there is no implicit file in scope."""

    implicit = find_implicit_config(start_dir, implicit_name) if start_dir is not None else None
    return ConfigListing(
        config_dir=config_dir,
        implicit=implicit,
        named=list_named_configs(config_dir),
    )
