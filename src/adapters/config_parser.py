"""YAML config parsing.

PyYAML handles the grammar (quoting, block scalars, folding). What this module
owns is the normalization afterwards: every value becomes exactly one string.

Scalars are built with `yaml.BaseLoader`, which performs no type resolution:
`true`, `010` and `1.10` reach the environment exactly as written instead of
being round-tripped through bool/int/float.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from core.domain.models import NESTING_COUNTER, VariableMap
from core.errors import ConfigParseError

logger = logging.getLogger(__name__)


def _where(source: Path | None) -> str:
    return f" in {source}" if source is not None else ""


def _check_key(key: Any, source: Path | None) -> str:
    if not isinstance(key, str):
        raise ConfigParseError(f"variable names must be plain strings{_where(source)}, got {key!r}")
    if not key:
        raise ConfigParseError(f"empty variable name{_where(source)}")
    if "\n" in key or "\r" in key:
        raise ConfigParseError(f"variable name {key!r} contains a newline{_where(source)}")
    if "=" in key:
        raise ConfigParseError(f"variable name {key!r} contains '='{_where(source)}")
    if "\x00" in key:
        raise ConfigParseError(f"variable name {key!r} contains a NUL character{_where(source)}")
    if key == NESTING_COUNTER:
        raise ConfigParseError(
            f"{NESTING_COUNTER} is managed by dingus and cannot be set{_where(source)}"
        )
    return key


def _check_value(key: str, value: Any, source: Path | None) -> str:
    if not isinstance(value, str):
        kind = "list" if isinstance(value, list) else "mapping"
        raise ConfigParseError(f"value of {key} is a {kind}, expected a scalar{_where(source)}")
    if "\x00" in value:
        raise ConfigParseError(f"value of {key} contains a NUL character{_where(source)}")
    return value


def parse(contents: bytes, *, source: Path | None = None) -> VariableMap:
    """Turn raw config bytes into an ordered name -> value mapping."""

    try:
        text = contents.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"config is not valid UTF-8{_where(source)}: {exc.reason}") from exc

    try:
        document = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"invalid YAML{_where(source)}: {exc}") from exc

    if document is None:
        logger.debug("empty config%s", _where(source))
        return {}
    if not isinstance(document, dict):
        kind = "list" if isinstance(document, list) else "scalar"
        raise ConfigParseError(f"top-level document is a {kind}, expected a mapping{_where(source)}")

    variables: VariableMap = {}
    for raw_key, raw_value in document.items():
        key = _check_key(raw_key, source)
        variables[key] = _check_value(key, raw_value, source)

    logger.debug("parsed %d variables%s", len(variables), _where(source))
    return variables
