"""Home screen: account creation when signed out, club dashboard when signed in."""

from collections.abc import Mapping

from watchclub.dom import Page
from watchclub.models import Identity
from watchclub.pages.base import BLANK, PageController
from watchclub.pages.clubs import render_user_clubs
from watchclub.views.builders import build_club_list
from watchclub.views.models import HomeView


class HomePage(PageController):
    __slots__ = ()

    def mount(self, params: Mapping[str, str], identity: Identity | None) -> Page:
        if identity is None:
            return self.shell(HomeView(signed_in=False), user_error=BLANK)
        return self.shell(
            HomeView(signed_in=True, user_name=identity.name),
            create_club_error=BLANK,
            join_club_error=BLANK,
            clubs=build_club_list(self.app.cache.club_summaries(), from_cache=True),
        )

    async def load(self, page: Page, params: dict[str, str], identity: Identity | None) -> None:
        if identity is not None:
            await render_user_clubs(self.app, page, identity)
