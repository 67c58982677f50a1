"""Export statement rendering.

Output is meant to be evaluated as a whole script:
- POSIX shells: `eval "$(dingus print)"`
- fish: `dingus print | source`

Values are always single-quoted. Newlines stay literal inside the quotes,
which both families accept, so multi-line values survive evaluation intact.

Variable names are written verbatim. Their syntax is not validated, so a
config with a name like `X;rm -rf ~` injects that command into the evaluated
output. Only evaluate configs you trust, and be careful with `.dingus` files
picked up from parent directories you do not control.
"""

from __future__ import annotations

from core.domain.models import ResolvedEnvironment
from core.domain.shell import ShellDialect


def quote_posix(value: str) -> str:
    """Single-quote for sh/bash/zsh: nothing is special except `'` itself."""

    return "'" + value.replace("'", "'\"'\"'") + "'"


def quote_fish(value: str) -> str:
    """Single-quote for fish, where `\\` and `'` are escapable inside quotes."""

    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def render_statement(key: str, value: str, dialect: ShellDialect) -> str:
    if dialect is ShellDialect.FISH:
        return f"set -gx {key} {quote_fish(value)};"
    return f"export {key}={quote_posix(value)};"


def emit(env: ResolvedEnvironment, dialect: ShellDialect) -> str:
    """Render every projected assignment, config order first, counter last."""

    lines = [render_statement(key, value, dialect) for key, value in env.assignments.items()]
    return "\n".join(lines) + "\n"
