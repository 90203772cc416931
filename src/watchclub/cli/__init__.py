"""WatchClub CLI: inspect and drive the client from a terminal.

Entry point registered as ``watchclub`` in ``pyproject.toml``::

    [project.scripts]
    watchclub = "watchclub.cli:main"

Settings come from ``WATCHCLUB_*`` environment variables; the global
options below override them.
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``watchclub`` command."""
    parser = argparse.ArgumentParser(
        prog="watchclub",
        description="WatchClub: watch stuff together.",
    )
    parser.add_argument("--api-url", default=None, help="Backend base URL")
    parser.add_argument("--storage", default=None, help="JSON file holding the signed-in user and cached clubs")
    parser.add_argument("--log-level", default=None, help="Logging level (debug, info, warning, error)")
    subparsers = parser.add_subparsers(dest="command")

    # -- watchclub routes -------------------------------------------------
    subparsers.add_parser("routes", help="List the client's routes")

    # -- watchclub open ---------------------------------------------------
    open_parser = subparsers.add_parser("open", help="Render a page and print its HTML")
    open_parser.add_argument("path", nargs="?", default="/", help="Route path (e.g. /club/abc123)")

    # -- watchclub calendar -----------------------------------------------
    calendar_parser = subparsers.add_parser("calendar", help="Download a started club's schedule as .ics")
    calendar_parser.add_argument("club_id", help="Club id")
    calendar_parser.add_argument("--output", default=None, help="Directory to save the file in")

    # -- watchclub logout -------------------------------------------------
    subparsers.add_parser("logout", help="Forget the signed-in user and cached clubs")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from watchclub.cli._routes import run_routes

        run_routes(args)
    elif args.command == "open":
        from watchclub.cli._open import run_open

        run_open(args)
    elif args.command == "calendar":
        from watchclub.cli._calendar import run_calendar

        run_calendar(args)
    elif args.command == "logout":
        from watchclub.cli._logout import run_logout

        run_logout(args)
