"""Main entry point for terminal to-do.

Settings come from TODO_* environment variables (or .env); command-line
options take precedence.
"""
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional
import click
from config import load_settings, parse_level
from logging_setup import setup_logging
from store import TaskStore
from cli import CLI

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--log-level", type=click.Choice(LEVELS, case_sensitive=False), default=None,
              help="Console log level (default: TODO_LOG_LEVEL or WARNING).")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Also write DEBUG logs to this file.")
@click.option("--show-menu-once/--show-menu-always", default=None,
              help="Print the menu only at startup instead of before every prompt.")
@click.version_option(__version__, prog_name="terminal-todo")
def main(log_level: Optional[str], log_file: Optional[Path], show_menu_once: Optional[bool]) -> None:
    """Manage an in-memory to-do list from a numbered menu."""
    settings = load_settings()
    if log_level is not None:
        settings = replace(settings, log_level=parse_level(log_level))
    if log_file is not None:
        settings = replace(settings, log_file=log_file)
    if show_menu_once is not None:
        settings = replace(settings, show_menu_once=show_menu_once)

    setup_logging(console_level=settings.log_level, log_file=settings.log_file)
    logger.info("starting terminal-todo %s", __version__)
    try:
        CLI(TaskStore(), show_menu_once=settings.show_menu_once).run()
    except Exception:
        logger.exception("unexpected error in menu loop")
        raise


if __name__ == "__main__":
    main()
