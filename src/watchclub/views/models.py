"""View models: what each page region shows, as plain frozen data.

Builders in ``watchclub.views.builders`` produce these from domain data;
the rendering adapter turns them into HTML through the template named by
each class's ``template`` attribute. Nothing here knows about the network
or the document.
"""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class NavLink:
    label: str
    href: str
    action: str | None = None  # e.g. "logout" for links that trigger an action


@dataclass(frozen=True, slots=True)
class NavView:
    template: ClassVar[str] = "nav.html"

    links: tuple[NavLink, ...]
    user_name: str | None = None


@dataclass(frozen=True, slots=True)
class Message:
    """A one-line region state: loading placeholder, inline error, success note.

    An empty ``text`` renders nothing (a cleared error slot).
    """

    template: ClassVar[str] = "message.html"

    text: str = ""
    kind: str = "info"  # "loading" | "error" | "success" | "info"
    link: NavLink | None = None

    @property
    def is_error(self) -> bool:
        return self.kind == "error"


@dataclass(frozen=True, slots=True)
class Notice:
    """A dedicated state with a recovery link (access denied, not found, bad login link)."""

    template: ClassVar[str] = "notice.html"

    title: str
    message: str
    link: NavLink
    kind: str = "denied"  # "denied" | "not_found" | "error"


# -- Shells --


@dataclass(frozen=True, slots=True)
class HomeView:
    template: ClassVar[str] = "home.html"

    signed_in: bool
    user_name: str = ""


@dataclass(frozen=True, slots=True)
class LoginView:
    template: ClassVar[str] = "login.html"

    heading: str = "Log in"


@dataclass(frozen=True, slots=True)
class LoginLinkView:
    template: ClassVar[str] = "login_link.html"

    user_id: str


@dataclass(frozen=True, slots=True)
class ProfileView:
    template: ClassVar[str] = "profile.html"

    user_id: str
    name: str
    email: str


@dataclass(frozen=True, slots=True)
class AboutView:
    template: ClassVar[str] = "about.html"

    version: str


@dataclass(frozen=True, slots=True)
class ShellView:
    """Page frame whose body arrives later (club detail, pick detail)."""

    template: ClassVar[str] = "shell.html"

    title: str
    back: NavLink | None = None


@dataclass(frozen=True, slots=True)
class JoinView:
    template: ClassVar[str] = "join.html"

    club_id: str
    needs_account: bool
    user_name: str = ""


@dataclass(frozen=True, slots=True)
class AddPickView:
    template: ClassVar[str] = "add_pick.html"

    club_id: str
    cancel_href: str


# -- Region bodies --


@dataclass(frozen=True, slots=True)
class ClubListItem:
    id: str
    name: str
    href: str
    status_label: str
    started: bool


@dataclass(frozen=True, slots=True)
class ClubListView:
    template: ClassVar[str] = "club_list.html"

    items: tuple[ClubListItem, ...]
    from_cache: bool = False
    empty_text: str = "You haven't joined any clubs yet."


@dataclass(frozen=True, slots=True)
class PickQuota:
    """How many more picks the current user may add.

    ``limit`` and ``remaining`` are ``None`` when picks are unlimited.
    """

    limit: int | None
    used: int

    @property
    def unlimited(self) -> bool:
        return self.limit is None

    @property
    def remaining(self) -> int | None:
        if self.limit is None:
            return None
        return max(self.limit - self.used, 0)

    @property
    def can_add(self) -> bool:
        return self.limit is None or self.limit - self.used > 0


@dataclass(frozen=True, slots=True)
class MemberRow:
    id: str
    name: str
    pick_count: int
    is_me: bool

    @property
    def has_picked(self) -> bool:
        return self.pick_count > 0


@dataclass(frozen=True, slots=True)
class PickRow:
    id: str
    title: str
    year_text: str
    notes: str
    link: str
    owner_name: str
    href: str
    is_mine: bool


@dataclass(frozen=True, slots=True)
class ClubDetailView:
    template: ClassVar[str] = "club_detail.html"

    club_id: str
    name: str
    start_date_text: str
    interval_text: str
    started: bool
    status_label: str
    share_url: str
    members: tuple[MemberRow, ...]
    picks: tuple[PickRow, ...]
    quota: PickQuota
    quota_text: str
    can_add_pick: bool
    add_pick_href: str
    can_start: bool

    @property
    def state(self) -> str:
        """Lifecycle state of the club as displayed: ``"pending"`` or ``"started"``."""
        return "started" if self.started else "pending"


@dataclass(frozen=True, slots=True)
class ScheduleRow:
    sequence_number: int
    label: str
    title: str
    year_text: str
    date_text: str
    picked_by: str
    href: str


@dataclass(frozen=True, slots=True)
class ScheduleView:
    template: ClassVar[str] = "schedule.html"

    rows: tuple[ScheduleRow, ...]
    interval_text: str = ""


@dataclass(frozen=True, slots=True)
class ClubInfoView:
    template: ClassVar[str] = "club_info.html"

    name: str
    start_date_text: str
    member_count: int
    started: bool
    already_member: bool
    club_href: str


@dataclass(frozen=True, slots=True)
class QuotaView:
    template: ClassVar[str] = "quota.html"

    club_name: str
    text: str
    can_add: bool


@dataclass(frozen=True, slots=True)
class PickDetailView:
    template: ClassVar[str] = "pick_detail.html"

    club_id: str
    club_name: str
    pick: PickRow
    can_delete: bool
    back_href: str
