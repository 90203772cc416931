"""``watchclub calendar``: save a started club's schedule as an ``.ics`` file."""

import argparse
import sys

import anyio

from watchclub import actions
from watchclub.app import WatchClubApp
from watchclub.browser import ConsoleDialogs
from watchclub.cli._config import load_config
from watchclub.routing import Location


async def _download(app: WatchClubApp, club_id: str) -> str | None:
    async with app:
        await app.settle()
        return await actions.download_calendar(app, club_id)


def run_calendar(args: argparse.Namespace) -> None:
    """Download the calendar for ``args.club_id``. Exits with status 1 on failure."""
    overrides: dict[str, object] = {}
    if args.output:
        overrides["downloads_dir"] = args.output
    config = load_config(args, **overrides)
    app = WatchClubApp(config, location=Location(f"/club/{args.club_id}"), dialogs=ConsoleDialogs())
    path = anyio.run(_download, app, args.club_id)
    if path is None:
        region = app.document.find("calendar_status")
        message = getattr(region.view, "text", "") if region is not None else ""
        print(message or "Error: could not download the calendar", file=sys.stderr)
        raise SystemExit(1)
    print(path)
