"""The "your clubs" region shared by the home and profile screens."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from watchclub.dom import Page
from watchclub.models import Identity
from watchclub.rpc import Failure, Ok, attempt
from watchclub.views.builders import build_club_list
from watchclub.views.models import Message

if TYPE_CHECKING:
    from watchclub.app import WatchClubApp

logger = logging.getLogger("watchclub.pages")

CLUBS_REGION = "clubs"


async def render_user_clubs(app: WatchClubApp, page: Page, identity: Identity) -> None:
    """ListUserClubs, reconcile the cache with the answer, and re-render the clubs region."""
    result = await attempt(app.gateway.list_user_clubs(identity.id))
    region = page.region(CLUBS_REGION)
    if region is None or not region.attached:
        logger.debug("Dropping club list for %s; page is no longer shown", identity.id)
        return
    match result:
        case Ok(value=clubs):
            app.cache.replace_club_summaries(clubs)
            region.render(build_club_list(clubs))
        case Failure(message=message):
            region.render(Message(f"Error loading clubs: {message}", kind="error"))
