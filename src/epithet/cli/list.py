"""List command - show configured aliases."""

import rich_click as click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from epithet.cli.main import Context, pass_context

console = Console()


@click.command()
@pass_context
def list_cmd(ctx: Context) -> None:
    """List configured aliases."""
    config = ctx.load_config()

    if not config.aliases:
        console.print("[yellow]No aliases configured[/yellow]")
        return

    table = Table(title="Aliases")
    table.add_column("Alias", style="cyan")
    table.add_column("Command")
    table.add_column("Sub-aliases", style="magenta")
    table.add_column("Expansions", justify="right")

    for name in sorted(config.aliases):
        alias = config.aliases[name]
        command = Text(str(alias.command)) if alias.command else Text("-", style="dim")
        sub_aliases = ", ".join(sub.name for sub in alias.sub_aliases)
        table.add_row(
            Text(name),
            command,
            Text(sub_aliases),
            str(len(alias.expansions)) if alias.expansions else "",
        )

    console.print(table)

    if config.global_expansions:
        console.print(f"[dim]{len(config.global_expansions)} global expansion(s)[/dim]")
