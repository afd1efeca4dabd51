#!/usr/bin/env python3
"""
today CLI
---------

Command-line entry point.

Without options, makes sure today's entry exists (creating it, or carrying
the latest entry forward) and prints its path, so it composes with an
editor:

    $EDITOR "$(today)"

Usage:
    today                 # create/forward today's entry, print its path
    today -b 2            # same, dropping content nested deeper than '##'
    today -e              # print the entries directory
    today -l              # list all entries, oldest first
    today -v              # log what is happening to stderr

Environment:
    TODAY_DIR             # application directory (default: ~/.today)
"""
from __future__ import annotations

import click
from datetime import date
from typing import Optional

from today.core.cli import setup_logger
from today.core.config import load_config
from today.core.exceptions import EntryIOError, TodayError
from today.core.logging_manager import handle_cli_error
from today.core.paths import default_log_dir, get_app_dir
from today.pipeline.forward import create_or_forward
from today.utils.fs import ensure_entries_dir, list_entry_paths


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose mode")
@click.option(
    "-e",
    "--entries-dir",
    "show_entries_dir",
    is_flag=True,
    help="Print the configured directory where entries are stored",
)
@click.option("-l", "--list", "list_entries", is_flag=True, help="List all entries")
@click.option(
    "-b",
    "--bankruptcy",
    "bankruptcy_level",
    type=click.IntRange(min=0),
    default=None,
    help="Drop content under headings deeper than this level when forwarding "
    "(overrides bankruptcy_level in the config file)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    show_entries_dir: bool,
    list_entries: bool,
    bankruptcy_level: Optional[int],
) -> None:
    """Create or forward today's entry and print its path."""
    if show_entries_dir and list_entries:
        raise click.UsageError("options -e and -l are mutually exclusive")

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    app_dir = get_app_dir()
    log_dir = default_log_dir(app_dir)
    try:
        logger = setup_logger(log_dir, "today", verbose=verbose)
    except OSError as e:
        error = EntryIOError(f"creating log directory: {e.strerror or e}", log_dir)
        handle_cli_error(ctx, error, "setup_logger")
        return
    ctx.obj["logger"] = logger
    ctx.call_on_close(logger.close)

    if show_entries_dir:
        operation = "show_entries_dir"
    elif list_entries:
        operation = "list_entries"
    else:
        operation = "create_or_forward"

    try:
        config = load_config(app_dir, logger).with_bankruptcy_level(bankruptcy_level)

        if show_entries_dir:
            click.echo(str(config.entries_dir))
            return

        ensure_entries_dir(config.entries_dir)

        if list_entries:
            for path in list_entry_paths(config.entries_dir):
                click.echo(str(path))
            return

        selection = create_or_forward(
            config.entries_dir,
            date.today(),
            bankruptcy_level=config.bankruptcy_level,
            logger=logger,
        )
        # Always printed, whether the entry was created, forwarded or already there
        click.echo(str(selection.today_path))

    except TodayError as e:
        handle_cli_error(ctx, e, operation, {"app_dir": app_dir})


if __name__ == "__main__":
    cli(obj={})
