"""Fixtures for CLI tests."""

import pytest
from click.testing import CliRunner

CLI_CONFIG = '''
[global_expansions]
msg = "hello world"

[ok]
command = "true"

[fail]
command = 'sh -c "exit 3"'
sub_aliases = [{ name = "pass", command = "true" }]

[fallback]
or = ["false", "true"]

[chain]
and = ["true", 'sh -c "exit 4"', "true"]

[y]
command = "yarn"
sub_aliases = [
    { name = "b", command = "yarn workspace {0} build" },
    { name = "p", pipeline = ["yarn list", "grep react"] },
]

[markup]
command = "echo [bold]not markup[/bold]"

[empty]
sub_aliases = [{ name = "s", command = "git status" }]
'''


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture
def cli_config(temp_dir):
    """Config whose aliases only run POSIX utilities."""
    config_file = temp_dir / "epithet.toml"
    config_file.write_text(CLI_CONFIG)
    return config_file
