"""Club screens: detail, join, add pick, and pick detail.

Every club screen re-fetches the club with GetClub. The detail, add-pick
and pick screens are members-only: a non-member gets the denied notice and
no further RPC call is made.
"""

import logging
from collections.abc import Mapping

from watchclub.dom import Page
from watchclub.models import Identity
from watchclub.pages.base import BLANK, LOADING, ClubPageController, PageController, error_message
from watchclub.rpc import Failure, Ok, attempt
from watchclub.views.builders import (
    PROFILE_LINK,
    build_club_detail,
    build_club_info,
    build_pick_detail,
    build_quota,
    build_schedule,
    club_href,
)
from watchclub.views.models import AddPickView, ClubDetailView, JoinView, Message, NavLink, ShellView

logger = logging.getLogger("watchclub.pages")


def _cached_title(page: PageController, club_id: str) -> str:
    summary = page.app.cache.get_club_summary(club_id)
    return summary.name if summary is not None else "Club"


class ClubDetailPage(ClubPageController):
    """``/club/:clubId``: members, picks, start action, and the schedule once started."""

    __slots__ = ()

    def mount(self, params: Mapping[str, str], identity: Identity | None) -> Page:
        club_id = params["clubId"]
        return self.shell(
            ShellView(title=_cached_title(self, club_id), back=PROFILE_LINK),
            club_content=LOADING,
        )

    async def load(self, page: Page, params: dict[str, str], identity: Identity | None) -> None:
        if identity is None:
            return
        club_id = params["clubId"]
        details = await self.fetch_club(page, club_id, "club_content")
        if details is None:
            return

        view = build_club_detail(details, identity, self.app.config.share_base)
        region = page.region("club_content")
        if region is None:
            return
        if not isinstance(view, ClubDetailView):
            logger.info("User %s is not a member of club %s", identity.id, club_id)
            region.render(view)
            return

        self.app.cache.upsert_club_summary(details.club)
        if view.can_start:
            page.add_region("start_error", BLANK)
        if view.started:
            page.add_region("schedule", Message("Loading schedule...", kind="loading"))
            page.add_region("calendar_status", BLANK)
        region.render(view)

        if not view.started:
            return
        result = await attempt(self.app.gateway.get_scheduled_picks(club_id))
        schedule = page.region("schedule")
        if schedule is None:
            return
        match result:
            case Ok(value=assignments):
                schedule.render(build_schedule(details.club, assignments, details.members))
            case Failure(message=message):
                schedule.render(error_message(f"Error loading schedule: {message}"))


class JoinPage(PageController):
    """``/club/:clubId/join``: the invitation target. Signed-out visitors sign up inline."""

    __slots__ = ()

    def mount(self, params: Mapping[str, str], identity: Identity | None) -> Page:
        return self.shell(
            JoinView(
                club_id=params["clubId"],
                needs_account=identity is None,
                user_name=identity.name if identity is not None else "",
            ),
            club_info=Message("Loading club info...", kind="loading"),
            join_error=BLANK,
        )

    async def load(self, page: Page, params: dict[str, str], identity: Identity | None) -> None:
        result = await attempt(self.app.gateway.get_club(params["clubId"]))
        region = page.region("club_info")
        if region is None:
            return
        match result:
            case Ok(value=details):
                region.render(build_club_info(details, identity))
            case Failure(message=message):
                region.render(error_message(f"Error loading club: {message}"))


class AddPickPage(ClubPageController):
    """``/club/:clubId/add-pick``: the pick form plus the member's remaining quota."""

    __slots__ = ()

    def mount(self, params: Mapping[str, str], identity: Identity | None) -> Page:
        club_id = params["clubId"]
        return self.shell(
            AddPickView(club_id=club_id, cancel_href=club_href(club_id)),
            quota=LOADING,
            add_pick_error=BLANK,
        )

    async def load(self, page: Page, params: dict[str, str], identity: Identity | None) -> None:
        if identity is None:
            return
        details = await self.fetch_club(page, params["clubId"], "quota")
        region = page.region("quota")
        if details is None or region is None:
            return
        region.render(build_quota(details, identity))


class PickPage(ClubPageController):
    """``/club/:clubId/pick/:pickId``: one pick, deletable by its owner before the start."""

    __slots__ = ()

    def mount(self, params: Mapping[str, str], identity: Identity | None) -> Page:
        club_id = params["clubId"]
        return self.shell(
            ShellView(title=_cached_title(self, club_id), back=NavLink("Back to club", club_href(club_id))),
            pick_content=LOADING,
        )

    async def load(self, page: Page, params: dict[str, str], identity: Identity | None) -> None:
        if identity is None:
            return
        details = await self.fetch_club(page, params["clubId"], "pick_content")
        region = page.region("pick_content")
        if details is None or region is None:
            return
        region.render(build_pick_detail(details, identity, params["pickId"]))
