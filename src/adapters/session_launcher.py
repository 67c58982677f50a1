"""Nested shell sessions.

Spawns the user's shell as a child process with the projected environment,
inheriting the terminal, and waits for it. The launcher's exit status is the
child's, so scripts wrapping `dingus session` see the shell's own result.
"""

from __future__ import annotations

import contextlib
import logging
import signal
import subprocess
import threading
from typing import Iterator

from core.domain.models import ResolvedEnvironment
from core.errors import ConfigError, SpawnError

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _ignore_sigint() -> Iterator[None]:
    """Let Ctrl-C reach the child shell without killing the parent.

    Signal handlers can only be installed from the main thread; elsewhere
    this is a no-op.
    """

    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def exit_status(returncode: int) -> int:
    """Map a Popen return code to a shell-style exit status."""

    if returncode < 0:
        return 128 + (-returncode)
    return returncode


def launch(env: ResolvedEnvironment, shell_path: str | None) -> int:
    """Run `shell_path` interactively with exactly `env.variables`."""

    if not shell_path or not shell_path.strip():
        raise ConfigError("no shell to launch: $SHELL is not set and --shell was not given")

    logger.debug("spawning %s at level %d", shell_path, env.level)
    try:
        process = subprocess.Popen([shell_path], env=dict(env.variables))
    except OSError as exc:
        raise SpawnError(f"could not start {shell_path}: {exc.strerror or exc}") from exc
    except ValueError as exc:
        raise SpawnError(f"could not start {shell_path}: {exc}") from exc

    with _ignore_sigint():
        returncode = process.wait()

    logger.debug("%s exited with %d", shell_path, returncode)
    return exit_status(returncode)
