"""Interactive picker command."""

from typing import Optional

import click


@click.command()
@click.argument("color", required=False)
@click.pass_context
def pick(ctx, color: Optional[str]):
    """
    Open the terminal color picker.

    Prints the chosen color on exit (nothing if cancelled with ctrl+q).
    """
    from swatchkit.cli.main import run_picker

    result = run_picker(color, ctx.obj or {})
    if result is not None:
        click.echo(result)
