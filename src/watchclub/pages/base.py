"""Two-phase page controllers.

A controller is the route handler for one screen. Resolution calls it with
the route parameters and it works in two phases:

1. ``mount()`` runs synchronously inside the router's resolution. It puts
   the page shell in the document using only the cached identity and club
   summaries, with loading placeholders in the regions that wait on the
   backend. No RPC call happens in this phase.
2. ``load()`` runs as a background task on the app's task group. It calls
   the gateway through ``attempt()`` and renders each result into its own
   region. Region updates are dropped once the user has navigated away;
   anything else with a side effect (cache writes, navigation, follow-up
   RPC calls) checks ``page.attached`` first.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from watchclub.dom import Page
from watchclub.models import ClubDetails, Identity
from watchclub.rpc import Failure, Ok, attempt
from watchclub.views.builders import PROFILE_LINK
from watchclub.views.models import Message, Notice

if TYPE_CHECKING:
    from watchclub.app import WatchClubApp

logger = logging.getLogger("watchclub.pages")

LOADING = Message("Loading...", kind="loading")
BLANK = Message()


def error_message(text: str) -> Message:
    return Message(text, kind="error")


class PageController:
    """Base route handler. Subclasses implement ``mount`` and optionally ``load``."""

    requires_identity: ClassVar[bool] = False

    __slots__ = ("app",)

    def __init__(self, app: WatchClubApp) -> None:
        self.app = app

    def __call__(self, params: Mapping[str, str]) -> None:
        identity = self.app.identity
        if self.requires_identity and identity is None:
            logger.info("%s needs a signed-in user; redirecting home", type(self).__name__)
            self.app.router.navigate("/")
            return
        page = self.mount(params, identity)
        if type(self).load is not PageController.load:
            self.app.spawn(self.load, page, dict(params), identity)

    def shell(self, view: Any, **regions: Any) -> Page:
        """Mount *view* as the current page with the given region placeholders."""
        return self.app.document.mount(view, token=self.app.router.token(), regions=regions)

    def mount(self, params: Mapping[str, str], identity: Identity | None) -> Page:
        raise NotImplementedError

    async def load(self, page: Page, params: dict[str, str], identity: Identity | None) -> None:
        """Fill the page's regions from the backend."""


class ClubPageController(PageController):
    """Base for screens that show one club to its members."""

    requires_identity = True

    __slots__ = ()

    async def fetch_club(self, page: Page, club_id: str, region_id: str) -> ClubDetails | None:
        """GetClub, rendering a load failure into *region_id*.

        Returns ``None`` on failure or when the page went stale.
        """
        result = await attempt(self.app.gateway.get_club(club_id))
        region = page.region(region_id)
        match result:
            case Failure(message=message):
                if region is not None:
                    region.render(
                        Notice(
                            title="Could not load club",
                            message=f"Error loading club: {message}",
                            link=PROFILE_LINK,
                            kind="error",
                        )
                    )
                return None
            case Ok(value=details):
                if not page.attached:
                    logger.debug("Ignoring GetClub(%s) for a page that is no longer shown", club_id)
                    return None
                return details
