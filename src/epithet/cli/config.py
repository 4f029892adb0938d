"""Config command - inspect configuration."""

import rich_click as click
from rich.console import Console
from rich.syntax import Syntax

from epithet.cli.main import Context, pass_context

console = Console()


@click.group()
def config_cmd() -> None:
    """Inspect configuration."""
    pass


@config_cmd.command("show")
@pass_context
def show(ctx: Context) -> None:
    """Show current configuration."""
    from epithet.core.config import find_config_file

    config_path = ctx.config_path or find_config_file()

    if config_path is None or not config_path.exists():
        console.print("[yellow]No configuration file found[/yellow]")
        console.print("\nSearch locations:")
        console.print("  1. $EPITHET_CONFIG")
        console.print("  2. $XDG_CONFIG_HOME/epithet/epithet.toml")
        console.print("  3. ~/.config/epithet/epithet.toml")
        return

    console.print(f"[bold]Config file:[/bold] {config_path}")
    console.print()

    # Read and display the config file
    content = config_path.read_text()
    syntax = Syntax(content, "toml", theme="monokai", line_numbers=True)
    console.print(syntax)


@config_cmd.command("path")
@pass_context
def path(ctx: Context) -> None:
    """Show path to active configuration file."""
    from epithet.core.config import find_config_file

    config_path = ctx.config_path or find_config_file()

    if config_path:
        console.print(str(config_path))
    else:
        console.print("[yellow]No configuration file found[/yellow]")
