"""CLI match, compare and starts-with commands."""

import logging

import click

from caseless.cli import algorithm_option, get_table
from caseless.cli.exit_codes import ExitCode
from caseless.matching import (
    Algorithm,
    caseless_compare,
    caseless_match,
    caseless_starts_with,
)

logger = logging.getLogger(__name__)


def _report(ctx: click.Context, result: bool) -> None:
    """Print a predicate result and exit with the matching code."""
    click.echo("true" if result else "false")
    ctx.exit(ExitCode.SUCCESS if result else ExitCode.NO_MATCH)


@click.command("match")
@click.argument("left")
@click.argument("right")
@algorithm_option
@click.pass_context
def match_command(ctx: click.Context, left: str, right: str, algorithm: str) -> None:
    """Test whether LEFT and RIGHT match ignoring case.

    Exits with 0 on a match and 1 otherwise.
    """
    selected = Algorithm(algorithm.lower())
    result = caseless_match(left, right, selected, table=get_table(ctx))
    logger.debug("match(%r, %r, %s) -> %s", left, right, selected.value, result)
    _report(ctx, result)


@click.command("compare")
@click.argument("left")
@click.argument("right")
@algorithm_option
@click.pass_context
def compare_command(ctx: click.Context, left: str, right: str, algorithm: str) -> None:
    """Compare LEFT with RIGHT ignoring case.

    Prints less, equal or greater.
    """
    selected = Algorithm(algorithm.lower())
    ordering = caseless_compare(left, right, selected, table=get_table(ctx))
    click.echo(ordering.name.lower())


@click.command("starts-with")
@click.argument("text")
@click.argument("prefix")
@algorithm_option
@click.pass_context
def starts_with_command(
    ctx: click.Context, text: str, prefix: str, algorithm: str
) -> None:
    """Test whether TEXT starts with PREFIX ignoring case.

    Exits with 0 when it does and 1 otherwise.
    """
    selected = Algorithm(algorithm.lower())
    _report(ctx, caseless_starts_with(text, prefix, selected, table=get_table(ctx)))
