"""Environment projection.

Combines a parsed `VariableMap` with the inherited environment and bumps the
nesting counter. Pure: no I/O, no reads of `os.environ`.
"""

from __future__ import annotations

from core.domain.models import (
    NESTING_COUNTER,
    EnvironmentSnapshot,
    ResolvedEnvironment,
    VariableMap,
)


def parse_level(value: str | None) -> int:
    """Read a nesting counter value; anything but ASCII digits counts as 0."""

    if value is None:
        return 0
    value = value.strip()
    if not value or not value.isascii() or not value.isdigit():
        return 0
    return int(value)


def project(variables: VariableMap, inherited: EnvironmentSnapshot) -> ResolvedEnvironment:
    """Apply `variables` over `inherited` and set the counter last.

    The counter is written after the config entries, so even a mapping that
    carries `DINGUS_LEVEL` cannot override it.
    """

    merged = dict(inherited.variables)
    assignments: dict[str, str] = {}
    for key, value in variables.items():
        merged[key] = value
        assignments[key] = value

    level = parse_level(inherited.get(NESTING_COUNTER)) + 1
    merged[NESTING_COUNTER] = str(level)
    assignments.pop(NESTING_COUNTER, None)
    assignments[NESTING_COUNTER] = str(level)

    return ResolvedEnvironment(
        variables=merged,
        assignments=assignments,
        level=level,
    )
