"""Tests for the local invoker."""

import shutil
import stat

import pytest

from epithet.core.exceptions import SpawnError
from epithet.core.result import ExitStatus
from epithet.runner.local import LocalInvoker

pytestmark = pytest.mark.skipif(shutil.which("sh") is None, reason="requires a POSIX shell")


class TestLocalInvoker:
    """Tests for LocalInvoker."""

    def test_invoker_name(self):
        assert LocalInvoker().name == "local"

    def test_success(self):
        assert LocalInvoker().invoke(["true"]) == ExitStatus(code=0)

    def test_exit_code(self):
        assert LocalInvoker().invoke(["sh", "-c", "exit 5"]) == ExitStatus(code=5)

    def test_killed_by_signal(self):
        status = LocalInvoker().invoke(["sh", "-c", "kill -TERM $$"])
        assert status.signal == 15
        assert status.exit_code == 1

    def test_arguments_not_interpreted_by_shell(self, temp_dir):
        """Test that tokens reach the child verbatim."""
        out = temp_dir / "out.txt"
        LocalInvoker().invoke(["sh", "-c", 'printf "%s" "$1" > "$2"', "sh", "$HOME; *", str(out)])
        assert out.read_text() == "$HOME; *"

    def test_missing_executable(self):
        with pytest.raises(SpawnError, match="command not found"):
            LocalInvoker().invoke(["epithet-definitely-not-a-command"])

    def test_empty_tokens(self):
        with pytest.raises(SpawnError):
            LocalInvoker().invoke([])

    def test_home_shorthand_expanded(self, temp_dir, monkeypatch):
        """Test that ~ in the executable is expanded."""
        monkeypatch.setenv("HOME", str(temp_dir))
        script = temp_dir / "script.sh"
        script.write_text("#!/bin/sh\nexit 3\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR)

        assert LocalInvoker().invoke(["~/script.sh"]) == ExitStatus(code=3)
