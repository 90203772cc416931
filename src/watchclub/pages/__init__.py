"""Page controllers and the route table.

Routes are registered in this order and matched first-match-wins::

    /                               HomePage
    /login                          LoginPage
    /login/:userId                  LoginLinkPage
    /profile                        ProfilePage
    /about                          AboutPage
    /club/:clubId                   ClubDetailPage
    /club/:clubId/join              JoinPage
    /club/:clubId/add-pick          AddPickPage
    /club/:clubId/pick/:pickId      PickPage
    /my-clubs                       ProfilePage (legacy link)
    /recover                        LoginPage (legacy link)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from watchclub.pages.about import AboutPage
from watchclub.pages.account import LoginLinkPage, LoginPage, ProfilePage
from watchclub.pages.base import PageController
from watchclub.pages.club import AddPickPage, ClubDetailPage, JoinPage, PickPage
from watchclub.pages.home import HomePage

if TYPE_CHECKING:
    from watchclub.app import WatchClubApp

ROUTES: tuple[tuple[str, type[PageController], str], ...] = (
    ("/", HomePage, "home"),
    ("/login", LoginPage, "login"),
    ("/login/:userId", LoginLinkPage, "login_link"),
    ("/profile", ProfilePage, "profile"),
    ("/about", AboutPage, "about"),
    ("/club/:clubId", ClubDetailPage, "club"),
    ("/club/:clubId/join", JoinPage, "join_club"),
    ("/club/:clubId/add-pick", AddPickPage, "add_pick"),
    ("/club/:clubId/pick/:pickId", PickPage, "pick"),
    ("/my-clubs", ProfilePage, "my_clubs"),
    ("/recover", LoginPage, "recover"),
)


def register_pages(app: WatchClubApp) -> None:
    """Register every page controller on *app*'s router."""
    for pattern, controller, name in ROUTES:
        app.router.register(pattern, controller(app), name=name)


__all__ = [
    "ROUTES",
    "AboutPage",
    "AddPickPage",
    "ClubDetailPage",
    "HomePage",
    "JoinPage",
    "LoginLinkPage",
    "LoginPage",
    "PageController",
    "PickPage",
    "ProfilePage",
    "register_pages",
]
