"""User actions: validate, call the backend, update the cache, navigate.

Each action takes the running app plus the submitted form (a mapping of
field name to value) or the ids it acts on. The order is always:

1. local validation; a failure is rendered into the action's error
   region and no RPC call is made,
2. the RPC call(s), through ``attempt()``; a failure is rendered into the
   same region, or reported with ``Dialogs.alert`` for destructive actions,
3. identity and cache updates,
4. navigation, skipped when the user already left the page the action
   was started from.

Actions return True on success so callers (the CLI, tests) can tell what
happened without inspecting the document.
"""

import logging
from collections.abc import Mapping

from watchclub.app import WatchClubApp
from watchclub.browser import calendar_file
from watchclub.dom import Page, Region
from watchclub.models import Identity, IntervalUnit
from watchclub.rpc import Failure, Ok, attempt
from watchclub.validation import field, require
from watchclub.views.builders import club_href
from watchclub.views.formatting import coerce_int, parse_date
from watchclub.views.models import Message

logger = logging.getLogger("watchclub.actions")

type Form = Mapping[str, object]

DEFAULT_PICKS_PER_MEMBER = 1
DEFAULT_INTERVAL_QUANTITY = 1
DEFAULT_INTERVAL_UNIT = IntervalUnit.WEEKS


# -- Helpers --


def _target(app: WatchClubApp, region_id: str) -> Region | None:
    """Handle on *region_id* of the page showing now.

    Take it before awaiting the backend: once the user navigates away the
    handle detaches and late writes through it are dropped.
    """
    region = app.document.find(region_id)
    if region is None:
        logger.debug("No region %r on the current page", region_id)
    return region


def _show(region: Region | None, message: Message) -> None:
    if region is not None:
        region.render(message)


def _error(region: Region | None, text: str) -> bool:
    _show(region, Message(text, kind="error"))
    return False


def _follow(app: WatchClubApp, origin: Page | None, path: str) -> None:
    """Navigate to *path* unless the user already moved on from *origin*."""
    if origin is not None and not origin.attached:
        logger.debug("Not following to %s; the originating page is gone", path)
        return
    app.navigate(path)


def _require_identity(app: WatchClubApp) -> Identity | None:
    identity = app.identity
    if identity is None:
        logger.info("Action needs a signed-in user; redirecting home")
        app.navigate("/")
    return identity


# -- Account --


async def create_account(app: WatchClubApp, form: Form) -> bool:
    """CreateUser, then sign in and go home."""
    status = _target(app, "user_error")
    result = require(form, name="Please enter your name", email="Please enter your email")
    if not result:
        return _error(status, result.first_error)

    origin = app.document.page
    _show(status, Message())
    match await attempt(app.gateway.create_user(result.data["name"], result.data["email"])):
        case Failure(message=message):
            return _error(status, f"Error: {message}")
        case Ok(value=user):
            app.sign_in(Identity.from_user(user))
            _follow(app, origin, "/")
            return True


async def send_login_email(app: WatchClubApp, form: Form) -> bool:
    """SendLoginEmail; the backend's confirmation text is shown as is."""
    status = _target(app, "login_result")
    result = require(form, email="Please enter your email")
    if not result:
        return _error(status, result.first_error)

    match await attempt(app.gateway.send_login_email(result.data["email"])):
        case Failure(message=message):
            return _error(status, f"Error: {message}")
        case Ok(value=text):
            _show(status, Message(f"Check your email! {text}".strip(), kind="success"))
            return True


async def logout(app: WatchClubApp) -> bool:
    """Forget the identity and cached clubs, then go home."""
    app.reset()
    app.navigate("/")
    return True


# -- Clubs --


async def create_club(app: WatchClubApp, form: Form) -> bool:
    """CreateClub, then JoinClub so the creator is the first member."""
    status = _target(app, "create_club_error")
    result = require(form, name="Please fill in all fields", start_date="Please fill in all fields")
    if not result:
        return _error(status, result.first_error)

    start_date = parse_date(result.data["start_date"])
    if start_date is None:
        return _error(status, "Please enter the start date as YYYY-MM-DD")

    max_picks = coerce_int(form.get("max_picks_per_member"), DEFAULT_PICKS_PER_MEMBER)
    if max_picks is None or max_picks < 0:
        return _error(status, "Picks per member cannot be negative")

    quantity = coerce_int(form.get("schedule_interval_quantity"), DEFAULT_INTERVAL_QUANTITY)
    if quantity is None or quantity < 1:
        return _error(status, "The schedule interval must be at least 1")

    unit = coerce_int(form.get("schedule_interval_unit"), DEFAULT_INTERVAL_UNIT)
    if unit not in (IntervalUnit.DAYS, IntervalUnit.WEEKS, IntervalUnit.MONTHS):
        unit = DEFAULT_INTERVAL_UNIT

    identity = _require_identity(app)
    if identity is None:
        return False

    origin = app.document.page
    _show(status, Message())
    created = await attempt(
        app.gateway.create_club(result.data["name"], start_date, max_picks, quantity, IntervalUnit(unit))
    )
    if isinstance(created, Failure):
        return _error(status, f"Error: {created.message}")

    club = created.value
    joined = await attempt(app.gateway.join_club(club.id, identity.id))
    if isinstance(joined, Failure):
        return _error(status, f"Club created but failed to join: {joined.message}")

    app.cache.upsert_club_summary(joined.value)
    logger.info("Created club %s (%s)", club.name, club.id)
    _follow(app, origin, club_href(club.id))
    return True


async def join_club_by_code(app: WatchClubApp, form: Form) -> bool:
    """Go to the join page for the entered club code."""
    result = require(form, code="Please enter a club code")
    if not result:
        return _error(_target(app, "join_club_error"), result.first_error)
    app.navigate(f"{club_href(result.data['code'])}/join")
    return True


async def join_club(app: WatchClubApp, club_id: str, form: Form | None = None) -> bool:
    """JoinClub as the current user, creating the account first when signed out."""
    status = _target(app, "join_error")
    form = form or {}
    origin = app.document.page
    identity = app.identity

    if identity is None:
        result = require(form, name="Please enter your name", email="Please enter your email")
        if not result:
            return _error(status, result.first_error)
        _show(status, Message())
        match await attempt(app.gateway.create_user(result.data["name"], result.data["email"])):
            case Failure(message=message):
                return _error(status, f"Error: {message}")
            case Ok(value=user):
                identity = Identity.from_user(user)
                app.sign_in(identity)

    match await attempt(app.gateway.join_club(club_id, identity.id)):
        case Failure(message=message):
            return _error(status, f"Error: {message}")
        case Ok(value=club):
            app.cache.upsert_club_summary(club)
            _follow(app, origin, club_href(club_id))
            return True


async def start_club(app: WatchClubApp, club_id: str) -> bool:
    """StartClub (the backend shuffles the picks), then re-render the club page."""
    status = _target(app, "start_error")
    origin = app.document.page
    match await attempt(app.gateway.start_club(club_id)):
        case Failure(message=message):
            return _error(status, f"Error: {message}")
        case Ok(value=club):
            app.cache.upsert_club_summary(club)
            logger.info("Started club %s", club_id)
            _follow(app, origin, club_href(club_id))
            return True


async def delete_club(app: WatchClubApp, club_id: str) -> bool:
    """DeleteClub after confirmation. Failures are reported with an alert."""
    if not app.dialogs.confirm("Are you sure you want to delete this club? This cannot be undone."):
        return False
    origin = app.document.page
    match await attempt(app.gateway.delete_club(club_id)):
        case Failure(message=message):
            app.dialogs.alert(f"Error deleting club: {message}")
            return False
        case Ok():
            app.cache.remove_club_summary(club_id)
            logger.info("Deleted club %s", club_id)
            _follow(app, origin, "/profile")
            return True


async def download_calendar(app: WatchClubApp, club_id: str, club_name: str | None = None) -> str | None:
    """GetClubCalendar and save it as ``<club>-schedule.ics``. Returns the saved path."""
    status = _target(app, "calendar_status")
    if club_name is None:
        summary = app.cache.get_club_summary(club_id)
        club_name = summary.name if summary is not None else club_id

    match await attempt(app.gateway.get_club_calendar(club_id)):
        case Failure(message=message):
            _error(status, f"Error downloading calendar: {message}")
            return None
        case Ok(value=ics_data):
            path = app.downloads.save(calendar_file(club_name, ics_data))
            _show(status, Message(f"Saved {path}", kind="success"))
            return path


# -- Picks --


async def add_pick(app: WatchClubApp, club_id: str, form: Form) -> bool:
    """AddPick for the current user, then back to the club page."""
    status = _target(app, "add_pick_error")
    result = require(form, title="Please enter a title")
    if not result:
        return _error(status, result.first_error)

    identity = _require_identity(app)
    if identity is None:
        return False

    origin = app.document.page
    _show(status, Message())
    call = app.gateway.add_pick(
        club_id,
        identity.id,
        result.data["title"],
        year=coerce_int(form.get("year")) or None,
        link=field(form, "link") or None,
        notes=field(form, "notes") or None,
    )
    match await attempt(call):
        case Failure(message=message):
            return _error(status, f"Error: {message}")
        case Ok():
            _follow(app, origin, club_href(club_id))
            return True


async def delete_pick(app: WatchClubApp, club_id: str, pick_id: str) -> bool:
    """DeletePick after confirmation. Failures are reported with an alert."""
    identity = _require_identity(app)
    if identity is None:
        return False
    if not app.dialogs.confirm("Are you sure you want to delete this pick?"):
        return False
    origin = app.document.page
    match await attempt(app.gateway.delete_pick(pick_id, identity.id)):
        case Failure(message=message):
            app.dialogs.alert(f"Error deleting pick: {message}")
            return False
        case Ok():
            _follow(app, origin, club_href(club_id))
            return True
