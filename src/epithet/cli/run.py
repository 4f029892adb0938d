"""Run command - execute an alias."""

from typing import Tuple

import rich_click as click

from epithet.cli.main import Context, pass_context


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("alias")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@pass_context
def run(ctx: Context, alias: str, args: Tuple[str, ...]) -> None:
    """Run an alias.

    ALIAS is the alias name; ARGS are passed to it unchanged:

        epithet run y workspace app build

        epithet run gst --short
    """
    from epithet.runner import run_alias

    config = ctx.load_config()
    result = run_alias(config, alias, args)

    click.get_current_context().exit(result.exit_code)
