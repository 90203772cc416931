"""``watchclub open``: resolve a route against the backend and print the page."""

import argparse

import anyio

from watchclub.app import WatchClubApp
from watchclub.cli._config import load_config
from watchclub.routing import Location


async def _render(app: WatchClubApp) -> str:
    async with app:
        await app.settle()
        return app.html()


def run_open(args: argparse.Namespace) -> None:
    """Resolve ``args.path``, wait for every region to load, and print the HTML."""
    config = load_config(args)
    app = WatchClubApp(config, location=Location(args.path))
    print(anyio.run(_render, app))
