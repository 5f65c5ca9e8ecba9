#!/usr/bin/env python3
"""Main entrypoint for the jwl command line."""

import argparse
import logging
import sys
from datetime import date
from typing import List, Optional

from jwl.api.errors import ApiError
from jwl.cli.console import WorklogConsole
from jwl.commands.add import AddContext, add_worklog
from jwl.commands.view import ViewContext, view_worklog
from jwl.config import ConfigError, ConfigManager, get_config_manager
from jwl.config.prompt import setup_config
from jwl.utils.date_parser import parse_date, today
from jwl.utils.logging import resolve_level, setup_console_logging

logger = logging.getLogger(__name__)


def _date_argument(value: str) -> date:
    try:
        return parse_date(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jwl", description="Program to create and view worklogs using Jira"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_view = sub.add_parser("view", help="View all worklogs for an issue and date")
    p_view.add_argument("issue", help="Id of the issue")
    p_view.add_argument(
        "-d", "--date", type=_date_argument, help="Date to filter to, defaults to today"
    )
    p_view.add_argument(
        "-c",
        "--context",
        help="Context to use by name, only required when using a config with multiple contexts",
    )

    p_add = sub.add_parser("add", help="Create a new worklog")
    p_add.add_argument("issue", help="Id of the issue")
    p_add.add_argument(
        "time_spend",
        help="The time spent working on the issue as days (#d), hours (#h), or minutes (#m or #)",
    )
    p_add.add_argument("-m", "--comment", help="Comment to add to the worklog")
    p_add.add_argument(
        "-d",
        "--date",
        type=_date_argument,
        help="Date on which the worklog effort was started, defaults to today",
    )
    p_add.add_argument(
        "-c",
        "--context",
        help="Context to use by name, only required when using a config with multiple contexts",
    )

    sub.add_parser("config", help="Setup the configuration using a prompt")
    return parser


def main(
    argv: Optional[List[str]] = None,
    manager: Optional[ConfigManager] = None,
    console: Optional[WorklogConsole] = None,
) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_console_logging(resolve_level(args.verbose))

    manager = manager or get_config_manager()
    console = console or WorklogConsole()

    try:
        if args.command == "view":
            context = manager.read_context(args.context)
            view_worklog(
                context, ViewContext(date=args.date or today(), issue=args.issue), console=console
            )
        elif args.command == "add":
            context = manager.read_context(args.context)
            add_worklog(
                context,
                AddContext(
                    date=args.date or today(),
                    issue=args.issue,
                    comment=args.comment,
                    time_spend=args.time_spend,
                ),
            )
        elif args.command == "config":
            setup_config(manager, console.out)
    except (ApiError, ConfigError) as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        console.show_error(str(e))
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
