"""CLI module for caseless."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from caseless.cli.exit_codes import ExitCode
from caseless.config import get_config
from caseless.exceptions import ConfigError, FoldTableError
from caseless.fold_table import FoldTable, get_fold_table, load_fold_table
from caseless.logging import configure_logging
from caseless.matching import Algorithm

logger = logging.getLogger(__name__)

ALGORITHM_CHOICE = click.Choice([a.value for a in Algorithm], case_sensitive=False)


def algorithm_option(function):
    """Add the shared --algorithm option to a command."""
    return click.option(
        "--algorithm",
        "-a",
        type=ALGORITHM_CHOICE,
        default=Algorithm.DEFAULT.value,
        show_default=True,
        help="Caseless matching algorithm.",
    )(function)


def get_table(ctx: click.Context) -> FoldTable:
    """Return the fold table selected by the group options."""
    return ctx.obj["table"]


@click.group()
@click.version_option(package_name="caseless")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.option(
    "--case-folding-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Build the fold table from this CaseFolding.txt.",
)
@click.pass_context
def main(
    ctx: click.Context,
    log_level: str | None,
    log_json: bool,
    case_folding_file: Path | None,
) -> None:
    """Unicode caseless matching of text."""
    ctx.ensure_object(dict)

    try:
        config = get_config(
            case_folding_file=case_folding_file,
            log_level=log_level,
            log_format="json" if log_json else None,
        )
    except ConfigError as e:
        click.echo(f"Error: {e.message}", err=True)
        ctx.exit(ExitCode.CONFIG_ERROR)

    configure_logging(config.logging)

    try:
        if config.case_folding_file is not None:
            table = load_fold_table(config.case_folding_file)
        else:
            table = get_fold_table()
    except FoldTableError as e:
        logger.error("Invalid case folding data: %s", e.message)
        click.echo(f"Error: {e.message}", err=True)
        ctx.exit(ExitCode.FOLD_TABLE_ERROR)

    ctx.obj["config"] = config
    ctx.obj["table"] = table


# Defer import to avoid circular dependency
def _register_commands():
    from caseless.cli.compare import compare_command, match_command, starts_with_command
    from caseless.cli.fold import fold_command, key_command
    from caseless.cli.info import info_command

    main.add_command(fold_command)
    main.add_command(key_command)
    main.add_command(match_command)
    main.add_command(compare_command)
    main.add_command(starts_with_command)
    main.add_command(info_command)


_register_commands()
