"""Pytest configuration and fixtures."""

import os
import tempfile
from pathlib import Path

import pytest

from epithet.core.result import ExitStatus
from epithet.runner.base import BaseInvoker


class RecordingInvoker(BaseInvoker):
    """Invoker that records token lists instead of spawning processes.

    ``codes`` gives the exit code for each successive call; calls beyond
    the list succeed.
    """

    name = "recording"

    def __init__(self, codes=None):
        self.codes = list(codes or [])
        self.calls: list[list[str]] = []

    def invoke(self, tokens):
        self.calls.append(list(tokens))
        code = self.codes[len(self.calls) - 1] if len(self.calls) <= len(self.codes) else 0
        if isinstance(code, ExitStatus):
            return code
        return ExitStatus(code=code)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def recording_invoker():
    """A fresh invoker whose commands all succeed."""
    return RecordingInvoker()


SAMPLE_CONFIG = '''
[global_expansions]
v = "--verbose"
mode = "--mode development"

[y]
command = "yarn"
sub_aliases = [
    { name = "b", command = "yarn workspace {0} build" },
    { name = "ci", and = ["yarn install", "yarn test"] },
    { name = "p", pipeline = ["yarn list", "grep react"] },
]
expansions = [{ key = "mode", value = "--mode production" }]

[open]
or = ["xdg-open", "open"]

[g]
sub_aliases = [{ name = "s", command = "git status" }]
'''


@pytest.fixture
def sample_config(temp_dir):
    """Create a sample configuration file."""
    config_file = temp_dir / "epithet.toml"
    config_file.write_text(SAMPLE_CONFIG)
    return config_file


@pytest.fixture
def clean_env(temp_dir):
    """Keep config discovery away from the real user configuration."""
    env_vars = ["EPITHET_CONFIG", "XDG_CONFIG_HOME", "EPITHET_LOG_LEVEL", "HOME"]
    old_values = {var: os.environ.get(var) for var in env_vars}

    for var in env_vars:
        if var in os.environ:
            del os.environ[var]
    os.environ["HOME"] = str(temp_dir / "home")

    yield

    for var, value in old_values.items():
        if value is not None:
            os.environ[var] = value
        elif var in os.environ:
            del os.environ[var]


@pytest.fixture
def make_invoker():
    """Build a RecordingInvoker with scripted exit codes."""
    return RecordingInvoker
