"""Account screens: log in by email, the emailed login link, and the profile."""

import logging
from collections.abc import Mapping

from watchclub.dom import Page
from watchclub.models import Identity
from watchclub.pages.base import BLANK, PageController
from watchclub.pages.clubs import render_user_clubs
from watchclub.rpc import Failure, Ok, attempt
from watchclub.views.builders import HOME_LINK, build_club_list
from watchclub.views.models import LoginLinkView, LoginView, Message, Notice, ProfileView

logger = logging.getLogger("watchclub.pages")

INVALID_LINK = Notice(
    title="Invalid Login Link",
    message="This login link is invalid or expired.",
    link=HOME_LINK,
    kind="error",
)


class LoginPage(PageController):
    __slots__ = ()

    def mount(self, params: Mapping[str, str], identity: Identity | None) -> Page:
        return self.shell(LoginView(), login_result=BLANK)


class LoginLinkPage(PageController):
    """``/login/:userId``: the target of the emailed login link."""

    __slots__ = ()

    def mount(self, params: Mapping[str, str], identity: Identity | None) -> Page:
        return self.shell(
            LoginLinkView(user_id=params["userId"]),
            login_status=Message("Please wait while we verify your account.", kind="loading"),
        )

    async def load(self, page: Page, params: dict[str, str], identity: Identity | None) -> None:
        result = await attempt(self.app.gateway.get_user(params["userId"]))
        match result:
            case Failure(message=message):
                logger.info("Login link for %s rejected: %s", params["userId"], message)
                region = page.region("login_status")
                if region is not None:
                    region.render(INVALID_LINK)
            case Ok(value=user):
                if not page.attached:
                    return
                self.app.sign_in(Identity.from_user(user))
                self.app.router.navigate("/profile")


class ProfilePage(PageController):
    """The signed-in user's details and every club they belong to."""

    requires_identity = True

    __slots__ = ()

    def mount(self, params: Mapping[str, str], identity: Identity | None) -> Page:
        assert identity is not None
        return self.shell(
            ProfileView(user_id=identity.id, name=identity.name, email=identity.email),
            clubs=build_club_list(self.app.cache.club_summaries(), from_cache=True),
        )

    async def load(self, page: Page, params: dict[str, str], identity: Identity | None) -> None:
        if identity is None:
            return
        await render_user_clubs(self.app, page, identity)
