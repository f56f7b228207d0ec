"""CLI fold and key commands."""

import click

from caseless.cli import algorithm_option, get_table
from caseless.matching import Algorithm, caseless_key


@click.command("fold")
@click.argument("text")
@click.pass_context
def fold_command(ctx: click.Context, text: str) -> None:
    """Print the default case folding of TEXT."""
    click.echo(caseless_key(text, Algorithm.DEFAULT, table=get_table(ctx)))


@click.command("key")
@click.argument("text")
@algorithm_option
@click.pass_context
def key_command(ctx: click.Context, text: str, algorithm: str) -> None:
    """Print the matching key of TEXT for an algorithm.

    Two texts match exactly when their keys are equal.
    """
    click.echo(caseless_key(text, Algorithm(algorithm.lower()), table=get_table(ctx)))
