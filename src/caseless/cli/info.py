"""CLI info command."""

import click

from caseless.cli import get_table
from caseless.decomposition import default_provider


@click.command("info")
@click.pass_context
def info_command(ctx: click.Context) -> None:
    """Show the Unicode data in use."""
    table = get_table(ctx)
    config = ctx.obj["config"]
    source = config.case_folding_file or "interpreter"

    click.echo(f"Case folding: Unicode {'.'.join(map(str, table.unicode_version))}")
    click.echo(f"Fold entries: {len(table)}")
    click.echo(f"Fold source: {source}")
    click.echo(f"Decomposition: Unicode {default_provider().unicode_version}")
