"""Tests for shell dialect detection and export statement rendering.

The strongest check is the round trip: emitted statements evaluated by a
real shell must give back exactly the original values.
"""

import shutil
import subprocess

import pytest

from adapters.shell_emitter import emit, quote_fish, quote_posix
from core.domain.models import EnvironmentSnapshot
from core.domain.shell import ShellDialect
from core.services.projector import project

TRICKY_VALUES = {
    "HELLO": "Hello World!",
    "MULTI_LINE": "Hello there,\nHow are you?",
    "QUOTES": "it's \"quoted\"",
    "SPECIALS": "$HOME `date` $(id) \\n; | & * ~",
    "TRAILING": "ends with newline\n\n",
    "EMPTY": "",
}


class TestDialectDetection:
    """Verify the closed set of dialects and the fallback."""

    @pytest.mark.parametrize("path", ["/usr/bin/fish", "/opt/homebrew/bin/fish", "fish"])
    def test_fish(self, path: str) -> None:
        """Any path ending in `fish` selects the fish dialect."""
        assert ShellDialect.detect(path) is ShellDialect.FISH

    @pytest.mark.parametrize("path", ["/bin/bash", "/bin/zsh", "/bin/sh", "/usr/bin/dash"])
    def test_posix_shells(self, path: str) -> None:
        """Bourne-family shells use POSIX syntax."""
        assert ShellDialect.detect(path) is ShellDialect.POSIX

    @pytest.mark.parametrize("path", [None, "", "/usr/bin/nu", "/bin/fishy"])
    def test_unknown_falls_back(self, path: str | None) -> None:
        """Unknown or missing shells degrade to the default dialect."""
        assert ShellDialect.detect(path) is ShellDialect.default()


class TestQuoting:
    """Verify the single-quote escaping rules."""

    def test_posix_single_quote(self) -> None:
        """POSIX closes the quote, adds a double-quoted `'` and reopens."""
        assert quote_posix("it's") == "'it'\"'\"'s'"

    def test_posix_keeps_backslash(self) -> None:
        """Backslashes are literal inside POSIX single quotes."""
        assert quote_posix("a\\b") == "'a\\b'"

    def test_fish_escapes(self) -> None:
        """Fish escapes backslash and quote inside single quotes."""
        assert quote_fish("it's a\\b") == "'it\\'s a\\\\b'"


class TestEmit:
    """Verify the rendered statements."""

    def test_posix_scenario(self) -> None:
        """Two config exports followed by the counter export."""
        env = project(
            {"HELLO": "Hello World!", "MULTI_LINE": "Hello there,\nHow are you?"},
            EnvironmentSnapshot(variables={"PATH": "/bin"}),
        )
        assert emit(env, ShellDialect.POSIX) == (
            "export HELLO='Hello World!';\n"
            "export MULTI_LINE='Hello there,\nHow are you?';\n"
            "export DINGUS_LEVEL='1';\n"
        )

    def test_fish_scenario(self) -> None:
        """Fish uses `set -gx`."""
        env = project({"HELLO": "Hello World!"}, EnvironmentSnapshot(variables={"DINGUS_LEVEL": "4"}))
        assert emit(env, ShellDialect.FISH) == (
            "set -gx HELLO 'Hello World!';\nset -gx DINGUS_LEVEL '5';\n"
        )

    def test_inherited_only_entries_are_not_emitted(self) -> None:
        """Variables the config does not mention are left alone."""
        env = project({"A": "1"}, EnvironmentSnapshot(variables={"PATH": "/bin"}))
        assert "PATH" not in emit(env, ShellDialect.POSIX)

    def test_names_are_emitted_verbatim(self) -> None:
        """Names are not quoted or validated; only values are escaped."""
        env = project({"X;true": "v"}, EnvironmentSnapshot())
        assert emit(env, ShellDialect.POSIX).splitlines()[0] == "export X;true='v';"

    def test_empty_config_emits_counter_only(self) -> None:
        """An empty config still bumps the level."""
        env = project({}, EnvironmentSnapshot())
        assert emit(env, ShellDialect.POSIX) == "export DINGUS_LEVEL='1';\n"


def _read_back(argv: list[str]) -> str:
    result = subprocess.run(
        argv,
        capture_output=True,
        text=True,
        check=True,
        env={"PATH": "/usr/bin:/bin", "HOME": "/nonexistent"},
    )
    return result.stdout


class TestRoundTrip:
    """Emit, evaluate in a real shell, read the value back."""

    @pytest.mark.skipif(shutil.which("sh") is None, reason="no POSIX sh available")
    @pytest.mark.parametrize("name", sorted(TRICKY_VALUES))
    def test_posix(self, name: str) -> None:
        """`eval "$(dingus print)"` reproduces every value exactly."""
        exports = emit(project(TRICKY_VALUES, EnvironmentSnapshot()), ShellDialect.POSIX)
        script = 'eval "$1"\nprintf "%s" "$' + name + '"\n'
        argv = [shutil.which("sh") or "sh", "-c", script, "sh", exports]
        assert _read_back(argv) == TRICKY_VALUES[name]

    @pytest.mark.skipif(shutil.which("fish") is None, reason="fish is not installed")
    @pytest.mark.parametrize("name", sorted(TRICKY_VALUES))
    def test_fish(self, name: str) -> None:
        """`dingus print | source` reproduces every value exactly."""
        exports = emit(project(TRICKY_VALUES, EnvironmentSnapshot()), ShellDialect.FISH)
        script = exports + 'printf "%s" "$' + name + '"\n'
        argv = [shutil.which("fish") or "fish", "-c", script]
        assert _read_back(argv) == TRICKY_VALUES[name]
