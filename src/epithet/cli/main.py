"""Main CLI entry point using rich-click."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import rich_click as click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from epithet.core.config import EpithetConfig, load_config
from epithet.core.exceptions import EpithetError

# Configure rich-click
click.rich_click.SHOW_ARGUMENTS = True

PROGRAM_NAME = "epithet"
LOG_LEVEL_ENV_VAR = "EPITHET_LOG_LEVEL"

# Global console for Rich output
console = Console()
err_console = Console(stderr=True)


# Context object to pass state between commands
class Context:
    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self._config: Optional[EpithetConfig] = None

    def load_config(self) -> EpithetConfig:
        """Load the configuration once per invocation."""
        if self._config is None:
            self._config = load_config(self.config_path)
        return self._config


pass_context = click.make_pass_decorator(Context, ensure=True)


def configure_logging(verbose: bool = False) -> None:
    """Send epithet log records to stderr through Rich.

    ``--verbose`` selects DEBUG; otherwise $EPITHET_LOG_LEVEL is used,
    defaulting to WARNING.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.WARNING

    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(PROGRAM_NAME)
    logger.handlers = [handler]
    logger.setLevel(level)


def report_error(error: Exception) -> None:
    """Print an error as a single line on stderr."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True)


class EpithetGroup(click.RichGroup):
    """Command group that reports epithet errors as one line and exits 1."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except EpithetError as e:
            report_error(e)
            ctx.exit(1)


@click.group(cls=EpithetGroup)
@click.option(
    "--config", "-c",
    type=click.Path(path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.version_option(package_name="epithet")
@pass_context
def cli(ctx: Context, config: Optional[Path], verbose: bool) -> None:
    """Declarative command aliases.

    Aliases are defined in ~/.config/epithet/epithet.toml and run either
    with 'epithet run ALIAS' or through the symlinks created by
    'epithet install'.
    """
    ctx.config_path = config
    configure_logging(verbose)


# Import and register subcommands
from epithet.cli.run import run
from epithet.cli.lookup import lookup
from epithet.cli.install import install
from epithet.cli.list import list_cmd
from epithet.cli.config import config_cmd

cli.add_command(run)
cli.add_command(lookup)
cli.add_command(install)
cli.add_command(list_cmd, name="list")
cli.add_command(config_cmd, name="config")


def run_as_alias(name: str, args: list[str]) -> int:
    """Run alias ``name`` with ``args`` and return the exit code to use."""
    from epithet.runner import run_alias

    configure_logging()
    try:
        config = load_config()
        result = run_alias(config, name, args)
    except EpithetError as e:
        report_error(e)
        return 1
    except KeyboardInterrupt:
        return 130

    return result.exit_code


def is_primary_name(argv0: str) -> bool:
    """Whether the program was started as epithet itself rather than an alias link."""
    return Path(argv0).name in (PROGRAM_NAME, "__main__.py")


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for console script.

    Started as ``epithet`` the subcommands are available. Started through
    a symlink, the link name is the alias and every argument belongs to it.
    """
    argv = sys.argv if argv is None else argv

    if is_primary_name(argv[0]):
        cli.main(args=argv[1:], prog_name=PROGRAM_NAME)
    else:
        sys.exit(run_as_alias(Path(argv[0]).name, argv[1:]))


if __name__ == "__main__":
    main()
