"""Lookup command - show what an alias resolves to."""

from typing import Tuple

import rich_click as click
from rich.console import Console
from rich.markup import escape

from epithet.cli.main import Context, pass_context

console = Console()


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("alias")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@pass_context
def lookup(ctx: Context, alias: str, args: Tuple[str, ...]) -> None:
    """Show the command an alias resolves to, without running it.

    Sub-alias dispatch is applied to ARGS; placeholders are shown as
    written in the configuration.
    """
    config = ctx.load_config()
    resolution = config.resolve(alias, list(args))

    if resolution.is_noop:
        console.print(f"[yellow]Alias '{escape(alias)}' has no command for these arguments[/yellow]")
        return

    click.echo(str(resolution.execution))
