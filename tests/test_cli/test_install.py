"""Tests for CLI install command."""

import os

import pytest

from epithet.cli import install as install_module
from epithet.cli.install import InstallAction, install_aliases
from epithet.cli.main import cli
from epithet.core.exceptions import InstallError


@pytest.fixture
def target(temp_dir):
    """Stand-in for the epithet executable."""
    path = temp_dir / "epithet"
    path.write_text("#!/bin/sh\n")
    return path


class TestInstallAliases:
    """Tests for install_aliases()."""

    def test_creates_links(self, temp_dir, target):
        bin_dir = temp_dir / "bin"
        actions = install_aliases(["y", "g"], bin_dir, target)

        assert actions == {"g": InstallAction.CREATED, "y": InstallAction.CREATED}
        assert (bin_dir / "y").is_symlink()
        assert os.readlink(bin_dir / "y") == str(target)

    def test_existing_skipped(self, temp_dir, target):
        bin_dir = temp_dir / "bin"
        bin_dir.mkdir()
        (bin_dir / "y").write_text("keep me")

        actions = install_aliases(["y"], bin_dir, target)

        assert actions == {"y": InstallAction.SKIPPED}
        assert (bin_dir / "y").read_text() == "keep me"

    def test_force_replaces(self, temp_dir, target):
        bin_dir = temp_dir / "bin"
        bin_dir.mkdir()
        (bin_dir / "y").write_text("old")

        actions = install_aliases(["y"], bin_dir, target, force=True)

        assert actions == {"y": InstallAction.REPLACED}
        assert (bin_dir / "y").is_symlink()

    def test_dangling_link_counts_as_existing(self, temp_dir, target):
        bin_dir = temp_dir / "bin"
        bin_dir.mkdir()
        (bin_dir / "y").symlink_to(temp_dir / "gone")

        assert install_aliases(["y"], bin_dir, target) == {"y": InstallAction.SKIPPED}

    def test_failure_raises_install_error(self, temp_dir, target):
        blocker = temp_dir / "file"
        blocker.write_text("")

        with pytest.raises(InstallError):
            install_aliases(["y"], blocker / "bin", target)


class TestInstallCommand:
    """Tests for epithet install."""

    @pytest.fixture(autouse=True)
    def _fake_executable(self, target, monkeypatch):
        monkeypatch.setattr(install_module, "current_executable", lambda: target)

    def test_install(self, runner, cli_config, temp_dir, target):
        bin_dir = temp_dir / "links"
        result = runner.invoke(cli, ["-c", str(cli_config), "install", "--bin-dir", str(bin_dir)])

        assert result.exit_code == 0
        assert "export PATH" in result.output
        for name in ("ok", "fail", "fallback", "chain", "y", "markup", "empty"):
            assert (bin_dir / name).resolve() == target.resolve()

    def test_install_twice_skips(self, runner, cli_config, temp_dir):
        bin_dir = temp_dir / "links"
        args = ["-c", str(cli_config), "install", "-b", str(bin_dir)]
        runner.invoke(cli, args)

        result = runner.invoke(cli, args)
        assert result.exit_code == 0
        assert "already exists" in result.output

        result = runner.invoke(cli, args + ["--force"])
        assert result.exit_code == 0
        assert "Replaced" in result.output


class TestCurrentExecutable:
    """Tests for current_executable()."""

    def test_script_path(self, target, monkeypatch):
        monkeypatch.setattr(install_module.sys, "argv", [str(target), "install"])
        assert install_module.current_executable() == target.resolve()

    def test_module_run_uses_console_script(self, temp_dir, target, monkeypatch):
        """Test that ``python -m epithet`` links to the console script, not __main__.py."""
        monkeypatch.setattr(install_module.sys, "argv", [str(temp_dir / "epithet" / "__main__.py")])
        monkeypatch.setattr(install_module.shutil, "which", lambda name: str(target))

        assert install_module.current_executable() == target.resolve()

    def test_module_run_without_console_script(self, temp_dir, monkeypatch):
        monkeypatch.setattr(install_module.sys, "argv", [str(temp_dir / "epithet" / "__main__.py")])
        monkeypatch.setattr(install_module.shutil, "which", lambda name: None)

        with pytest.raises(InstallError, match="Cannot find the epithet executable"):
            install_module.current_executable()
