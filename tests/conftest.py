"""Shared fixtures for the dingus test suite."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """An empty named-config directory."""
    path = tmp_path / "config"
    path.mkdir()
    return path


@pytest.fixture
def fake_shell(tmp_path: Path) -> Callable[[str], Path]:
    """Build an executable `/bin/sh` script standing in for the user's shell."""
    if sys.platform == "win32":
        pytest.skip("fake shells are POSIX scripts")

    def _build(body: str, name: str = "fake-shell") -> Path:
        script = tmp_path / name
        script.write_text("#!/bin/sh\n" + body + "\n", encoding="utf-8")
        script.chmod(0o755)
        return script

    return _build
