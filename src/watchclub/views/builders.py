"""Pure builders: ``(domain data) -> view model``.

The client-side business display rules live here so they can be tested
without a document, a router, or a network:

- **membership gate**: club screens render only for members,
- **pick quota**: ``max_picks_per_member == 0`` means unlimited,
- **start readiness**: a club can start once it has at least one pick,
- **navigation**: links are a projection of the current identity.
"""

from collections.abc import Iterable, Sequence

from watchclub.models import Assignment, Club, ClubDetails, ClubSummary, Identity, Pick, User
from watchclub.views.formatting import (
    describe_interval,
    format_date,
    interval_unit_label,
    sequence_label,
)
from watchclub.views.models import (
    ClubDetailView,
    ClubInfoView,
    ClubListItem,
    ClubListView,
    MemberRow,
    NavLink,
    NavView,
    Notice,
    PickDetailView,
    PickQuota,
    PickRow,
    QuotaView,
    ScheduleRow,
    ScheduleView,
)

MIN_PICKS_TO_START = 1


# -- Links --


def club_href(club_id: str) -> str:
    return f"/club/{club_id}"


def pick_href(club_id: str, pick_id: str) -> str:
    return f"/club/{club_id}/pick/{pick_id}"


def share_url(share_base: str, club_id: str) -> str:
    """Invitation link: ``{public_url}#/club/{id}/join``."""
    return f"{share_base}#/club/{club_id}/join"


HOME_LINK = NavLink("Go to Home", "/")
PROFILE_LINK = NavLink("Back to My Clubs", "/profile")


# -- Navigation --


def build_nav(identity: Identity | None) -> NavView:
    """Navigation links for the current identity."""
    if identity is None:
        return NavView(
            links=(
                NavLink("Home", "/"),
                NavLink("Log in", "/login"),
                NavLink("About", "/about"),
            ),
        )
    return NavView(
        links=(
            NavLink("Home", "/"),
            NavLink("My Clubs", "/profile"),
            NavLink("About", "/about"),
            NavLink(f"Logout ({identity.name})", "/", action="logout"),
        ),
        user_name=identity.name,
    )


# -- Club lists --


def club_status_label(started: bool) -> str:
    return "Started" if started else "Pending"


def build_club_list(clubs: Iterable[Club | ClubSummary], *, from_cache: bool = False) -> ClubListView:
    items = tuple(
        ClubListItem(
            id=club.id,
            name=club.name,
            href=club_href(club.id),
            status_label=club_status_label(club.started),
            started=club.started,
        )
        for club in clubs
    )
    return ClubListView(items=items, from_cache=from_cache)


# -- Business display rules --


def pick_quota(club: Club, picks: Iterable[Pick], user_id: str) -> PickQuota:
    """Quota for *user_id*: unlimited when ``max_picks_per_member == 0``."""
    used = sum(1 for pick in picks if pick.user_id == user_id)
    limit = club.max_picks_per_member if club.max_picks_per_member > 0 else None
    return PickQuota(limit=limit, used=used)


def quota_text(quota: PickQuota) -> str:
    if quota.unlimited:
        if quota.used == 0:
            return "You haven't added any picks yet. Add as many as you like."
        return f"You've added {quota.used} {'pick' if quota.used == 1 else 'picks'}. Add as many as you like."
    remaining = quota.remaining or 0
    if remaining == 0:
        return f"You've added all {quota.limit} of your picks."
    return f"You can add {remaining} more {'pick' if remaining == 1 else 'picks'}."


def can_add_pick(club: Club, quota: PickQuota) -> bool:
    """Offer "add pick" while the club is pending and the quota allows it."""
    return not club.started and quota.can_add


def can_start_club(club: Club, picks: Sequence[Pick]) -> bool:
    """The start action is offered to a pending club with at least one pick."""
    return not club.started and len(picks) >= MIN_PICKS_TO_START


def denied_notice() -> Notice:
    return Notice(
        title="Members only",
        message="You are not a member of this club.",
        link=PROFILE_LINK,
        kind="denied",
    )


def _pick_row(pick: Pick, details: ClubDetails, user_id: str) -> PickRow:
    return PickRow(
        id=pick.id,
        title=pick.title,
        year_text=f"({pick.year})" if pick.year else "",
        notes=pick.notes,
        link=pick.link,
        owner_name=details.member_name(pick.user_id) or "Former member",
        href=pick_href(details.club.id, pick.id),
        is_mine=pick.user_id == user_id,
    )


def _member_row(member: User, details: ClubDetails, user_id: str) -> MemberRow:
    return MemberRow(
        id=member.id,
        name=member.name,
        pick_count=len(details.picks_by(member.id)),
        is_me=member.id == user_id,
    )


def build_club_detail(details: ClubDetails, identity: Identity, share_base: str) -> ClubDetailView | Notice:
    """Club page body, or the access-denied notice for non-members."""
    if not details.is_member(identity.id):
        return denied_notice()

    club = details.club
    quota = pick_quota(club, details.picks, identity.id)
    return ClubDetailView(
        club_id=club.id,
        name=club.name,
        start_date_text=format_date(club.start_date),
        interval_text=describe_interval(club.schedule_interval_quantity, club.schedule_interval_unit),
        started=club.started,
        status_label=club_status_label(club.started),
        share_url=share_url(share_base, club.id),
        members=tuple(_member_row(m, details, identity.id) for m in details.members),
        picks=tuple(_pick_row(p, details, identity.id) for p in details.picks),
        quota=quota,
        quota_text=quota_text(quota),
        can_add_pick=can_add_pick(club, quota),
        add_pick_href=f"/club/{club.id}/add-pick",
        can_start=can_start_club(club, details.picks),
    )


def build_schedule(
    club: Club,
    assignments: Iterable[Assignment],
    members: Iterable[User] = (),
) -> ScheduleView:
    """Schedule rows ordered by sequence number."""
    names = {member.id: member.name for member in members}
    rows = tuple(
        ScheduleRow(
            sequence_number=a.sequence_number,
            label=sequence_label(a.sequence_number, club.schedule_interval_unit),
            title=a.pick.title,
            year_text=f"({a.pick.year})" if a.pick.year else "",
            date_text=format_date(a.start_date),
            picked_by=names.get(a.pick.user_id, ""),
            href=pick_href(club.id, a.pick.id),
        )
        for a in sorted(assignments, key=lambda a: a.sequence_number)
    )
    return ScheduleView(
        rows=rows,
        interval_text=describe_interval(club.schedule_interval_quantity, club.schedule_interval_unit),
    )


def build_club_info(details: ClubDetails, identity: Identity | None) -> ClubInfoView:
    """Join page summary of the club being joined."""
    club = details.club
    return ClubInfoView(
        name=club.name,
        start_date_text=format_date(club.start_date),
        member_count=len(details.members),
        started=club.started,
        already_member=identity is not None and details.is_member(identity.id),
        club_href=club_href(club.id),
    )


def build_quota(details: ClubDetails, identity: Identity) -> QuotaView | Notice:
    """Add-pick page quota line, or the denied notice for non-members."""
    if not details.is_member(identity.id):
        return denied_notice()
    club = details.club
    quota = pick_quota(club, details.picks, identity.id)
    if club.started:
        return QuotaView(club_name=club.name, text="This club has already started.", can_add=False)
    unit = interval_unit_label(club.schedule_interval_quantity, club.schedule_interval_unit)
    text = f"{quota_text(quota)} One pick is shown every {club.schedule_interval_quantity} {unit}."
    if club.schedule_interval_quantity == 1:
        text = f"{quota_text(quota)} One pick is shown every {unit}."
    return QuotaView(club_name=club.name, text=text, can_add=quota.can_add)


def build_pick_detail(details: ClubDetails, identity: Identity, pick_id: str) -> PickDetailView | Notice:
    """Pick page body: membership gate first, then the pick lookup."""
    if not details.is_member(identity.id):
        return denied_notice()
    club = details.club
    pick = next((p for p in details.picks if p.id == pick_id), None)
    if pick is None:
        return Notice(
            title="Pick not found",
            message="This pick doesn't exist or was removed.",
            link=NavLink("Back to club", club_href(club.id)),
            kind="not_found",
        )
    return PickDetailView(
        club_id=club.id,
        club_name=club.name,
        pick=_pick_row(pick, details, identity.id),
        can_delete=pick.user_id == identity.id and not club.started,
        back_href=club_href(club.id),
    )
