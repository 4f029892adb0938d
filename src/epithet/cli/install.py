"""Install command - create a symlink per alias."""

import os
import shutil
import sys
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

import rich_click as click
from rich.console import Console
from rich.markup import escape

from epithet.cli.main import Context, pass_context
from epithet.core.exceptions import InstallError

console = Console(stderr=True)

DEFAULT_BIN_DIR = Path("~/.local/epithet/bin")


class InstallAction(str, Enum):
    """What happened to one alias entry point."""

    CREATED = "created"
    REPLACED = "replaced"  # Existing entry removed (--force)
    SKIPPED = "skipped"  # Existing entry kept

    def __str__(self) -> str:
        return self.value


def current_executable() -> Path:
    """Resolve the executable this process was started as.

    Under ``python -m epithet`` argv[0] is the package's __main__.py,
    which cannot be exec'd, so the installed console script is used.
    """
    argv0 = sys.argv[0]
    if Path(argv0).name == "__main__.py":
        script = shutil.which("epithet")
        if script is None:
            raise InstallError("Cannot find the epithet executable on PATH to link aliases to")
        return Path(script).resolve()

    found = shutil.which(argv0) if os.sep not in argv0 else argv0
    return Path(found or argv0).resolve()


def install_aliases(
    names: Iterable[str],
    bin_dir: Path,
    target: Path,
    force: bool = False,
) -> dict[str, InstallAction]:
    """Create ``bin_dir/<name>`` symlinks pointing at ``target``.

    Args:
        names: Alias names
        bin_dir: Directory for the links (created if missing)
        target: Executable the links point to
        force: Replace entries that already exist

    Returns:
        Action taken for each alias name
    """
    actions: dict[str, InstallAction] = {}

    try:
        bin_dir.mkdir(parents=True, exist_ok=True)

        for name in sorted(names):
            link = bin_dir / name
            action = InstallAction.CREATED

            # lexists: a dangling symlink still occupies the name
            if os.path.lexists(link):
                if not force:
                    actions[name] = InstallAction.SKIPPED
                    continue
                link.unlink()
                action = InstallAction.REPLACED

            link.symlink_to(target)
            actions[name] = action
    except OSError as e:
        raise InstallError(f"Failed to install aliases into {bin_dir}: {e}") from e

    return actions


@click.command()
@click.option("--force", "-f", is_flag=True, help="Replace existing entries")
@click.option(
    "--bin-dir", "-b",
    type=click.Path(file_okay=False, path_type=Path),
    help=f"Directory for alias links (default: {DEFAULT_BIN_DIR})",
)
@pass_context
def install(ctx: Context, force: bool, bin_dir: Optional[Path]) -> None:
    """Install a symlink for every alias.

    Each link points at the epithet executable, which runs the alias named
    after the link. Existing entries are left alone unless --force is given.
    """
    config = ctx.load_config()
    bin_dir = (bin_dir or DEFAULT_BIN_DIR).expanduser()
    target = current_executable()

    console.print(f"Installing aliases to: [bold]{escape(str(bin_dir))}[/bold]")
    actions = install_aliases(config.aliases, bin_dir, target, force=force)

    for name, action in actions.items():
        link = escape(str(bin_dir / name))
        if action is InstallAction.SKIPPED:
            console.print(
                f"[yellow]Alias already exists (run with --force to overwrite):[/yellow] {link}"
            )
        elif action is InstallAction.REPLACED:
            console.print(f"[green]Replaced[/green] {link} -> {escape(str(target))}")
        else:
            console.print(f"[green]Created[/green] {link} -> {escape(str(target))}")

    console.print()
    console.print("Add the directory to your PATH:")
    console.print(f"  export PATH=$PATH:{escape(str(bin_dir))}", highlight=False)
