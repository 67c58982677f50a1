"""Config file resolution.

Two strategies:
- Explicit name: resolved against the user config directory
  (`<config_dir>/<name>.yaml`, `.yml` also accepted).
- No name: upward search for the implicit dotfile from the working directory
  to the filesystem root, stopping at the first match.

Only filesystem reads happen here (existence checks and the final read).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from core.config import CONFIG_EXTENSIONS, IMPLICIT_FILENAME
from core.domain.models import ConfigFile, ConfigReference
from core.errors import AmbiguousConfigError, ConfigNotFoundError

logger = logging.getLogger(__name__)


def current_dir() -> Path:
    """The working directory, or `ConfigNotFoundError` if it is gone or unreadable."""

    try:
        return Path.cwd()
    except OSError as exc:
        raise ConfigNotFoundError(f"cannot determine the current directory: {exc.strerror or exc}") from exc


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError as exc:
        raise ConfigNotFoundError(f"cannot access {path}: {exc.strerror or exc}") from exc


def iter_search_dirs(start_dir: Path) -> Iterator[Path]:
    """Yield `start_dir` and each of its ancestors, ending at the root."""

    here = Path(start_dir).absolute()
    yield here
    yield from here.parents


def find_implicit_config(start_dir: Path, implicit_name: str = IMPLICIT_FILENAME) -> Path | None:
    """Return the nearest `implicit_name` file at or above `start_dir`."""

    for directory in iter_search_dirs(start_dir):
        candidate = directory / implicit_name
        logger.debug("checking %s", candidate)
        if _is_file(candidate):
            return candidate
    return None


def resolve_named_config(config_dir: Path, name: str) -> Path:
    """Map an explicit config name to a file inside `config_dir`."""

    if not name.strip():
        raise ConfigNotFoundError("empty config name")

    base = Path(config_dir) / name
    suffix = base.suffix.lower()

    if suffix in CONFIG_EXTENSIONS:
        path = base
    elif suffix:
        raise ConfigNotFoundError(
            f"config '{name}' must have a {' or '.join(CONFIG_EXTENSIONS)} extension"
        )
    else:
        candidates = [base.with_name(base.name + ext) for ext in CONFIG_EXTENSIONS]
        existing = [p for p in candidates if _is_file(p)]
        if len(existing) > 1:
            raise AmbiguousConfigError(existing[0], existing[1])
        path = existing[0] if existing else candidates[0]

    if not _is_file(path):
        raise ConfigNotFoundError(f"no config named '{name}' ({path} does not exist)")
    return path


def locate(
    reference: ConfigReference,
    start_dir: Path,
    *,
    config_dir: Path,
    implicit_name: str = IMPLICIT_FILENAME,
) -> ConfigFile:
    """Resolve `reference` to a `ConfigFile`, or raise `ConfigNotFoundError`."""

    if reference.is_explicit:
        path = resolve_named_config(config_dir, reference.name or "")
    else:
        found = find_implicit_config(start_dir, implicit_name)
        if found is None:
            raise ConfigNotFoundError(
                f"no {implicit_name} file found in {Path(start_dir).absolute()} or any parent directory"
            )
        path = found

    logger.debug("using config file %s", path)
    try:
        contents = path.read_bytes()
    except OSError as exc:
        raise ConfigNotFoundError(f"could not read {path}: {exc.strerror or exc}") from exc
    return ConfigFile(path=path, contents=contents)
