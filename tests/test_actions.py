"""Tests for watchclub.actions: validation, RPC, cache, navigation."""

import anyio
import pytest

from watchclub import actions
from watchclub.models import Club, IntervalUnit, User
from watchclub.testing import FakeGateway, MemoryDownloads, ScriptedDialogs
from watchclub.views.models import Message


def _region_text(app, region_id: str) -> str:
    region = app.document.find(region_id)
    assert region is not None
    return region.view.text


@pytest.mark.anyio
class TestCreateAccount:
    async def test_validation_issues_no_rpc(self, make_app, gateway: FakeGateway) -> None:
        async with make_app() as app:
            await app.settle()
            assert await actions.create_account(app, {"name": "  ", "email": "a@x"}) is False
            assert _region_text(app, "user_error") == "Please enter your name"
            assert await actions.create_account(app, {"name": "Alice"}) is False
            assert _region_text(app, "user_error") == "Please enter your email"
        assert gateway.called("create_user") == []

    async def test_success_signs_in(self, make_app, gateway: FakeGateway) -> None:
        async with make_app() as app:
            await app.settle()
            assert await actions.create_account(app, {"name": " Dana ", "email": "dana@example.com"})
            await app.settle()
            assert app.identity is not None
            assert app.identity.name == "Dana"
            html = app.html()
        assert "Create a Club" in html
        assert "Logout (Dana)" in html

    async def test_backend_error_inline(self, make_app, gateway: FakeGateway) -> None:
        gateway.fail("create_user", "email already registered", code="already_exists")
        async with make_app() as app:
            await app.settle()
            assert not await actions.create_account(app, {"name": "Dana", "email": "dana@example.com"})
            assert _region_text(app, "user_error") == "Error: email already registered"
            assert app.identity is None


@pytest.mark.anyio
class TestLogin:
    async def test_send_login_email(self, make_app, gateway: FakeGateway) -> None:
        async with make_app(path="/login") as app:
            await app.settle()
            assert await actions.send_login_email(app, {"email": "alice@example.com"})
            assert "a login link is on its way" in _region_text(app, "login_result")
        assert gateway.login_emails == ["alice@example.com"]

    async def test_send_login_email_requires_email(self, make_app, gateway: FakeGateway) -> None:
        async with make_app(path="/recover") as app:
            await app.settle()
            assert not await actions.send_login_email(app, {})
            assert _region_text(app, "login_result") == "Please enter your email"
        assert gateway.login_emails == []

    async def test_logout(self, make_app, alice: User, club: Club) -> None:
        async with make_app(alice, path="/profile") as app:
            await app.settle()
            assert app.cache.club_summaries()
            await actions.logout(app)
            await app.settle()
            assert app.identity is None
            assert app.cache.club_summaries() == []
            assert app.router.location.path == "/"
            html = app.html()
        assert ">Log in<" in html
        assert "Logout" not in html


@pytest.mark.anyio
class TestCreateClub:
    FORM = {
        "name": "Noir Season",
        "start_date": "2026-03-01",
        "max_picks_per_member": "2",
        "schedule_interval_quantity": "2",
        "schedule_interval_unit": "1",
    }

    async def test_creates_joins_and_navigates(self, make_app, gateway: FakeGateway, alice: User) -> None:
        async with make_app(alice) as app:
            await app.settle()
            assert await actions.create_club(app, self.FORM)
            await app.settle()
            club_id = app.cache.club_summaries()[0].id
            assert app.router.location.path == f"/club/{club_id}"
            assert "Every 2 days" in app.html()

        created = gateway.called("create_club")[0].args
        assert created["start_date"] == 1_772_323_200
        assert created["max_picks_per_member"] == 2
        assert created["schedule_interval_unit"] == IntervalUnit.DAYS
        assert gateway.called("join_club")[0].args == {"club_id": club_id, "user_id": alice.id}

    async def test_defaults(self, make_app, gateway: FakeGateway, alice: User) -> None:
        async with make_app(alice) as app:
            await app.settle()
            assert await actions.create_club(app, {"name": "Docs", "start_date": "2026-03-01"})
            await app.settle()
        created = gateway.called("create_club")[0].args
        assert created["max_picks_per_member"] == 1
        assert created["schedule_interval_quantity"] == 1
        assert created["schedule_interval_unit"] == IntervalUnit.WEEKS

    @pytest.mark.parametrize(
        ("form", "message"),
        [
            ({"name": "Docs"}, "Please fill in all fields"),
            ({"name": "Docs", "start_date": "March"}, "Please enter the start date as YYYY-MM-DD"),
            ({"name": "Docs", "start_date": "2026-03-01", "max_picks_per_member": "-1"}, "cannot be negative"),
            ({"name": "Docs", "start_date": "2026-03-01", "schedule_interval_quantity": "0"}, "at least 1"),
        ],
    )
    async def test_validation(self, make_app, gateway: FakeGateway, alice: User, form, message: str) -> None:
        async with make_app(alice) as app:
            await app.settle()
            assert not await actions.create_club(app, form)
            assert message in _region_text(app, "create_club_error")
        assert gateway.called("create_club") == []

    async def test_join_failure_after_create(self, make_app, gateway: FakeGateway, alice: User) -> None:
        gateway.fail("join_club", "club is full")
        async with make_app(alice) as app:
            await app.settle()
            assert not await actions.create_club(app, self.FORM)
            assert _region_text(app, "create_club_error") == "Club created but failed to join: club is full"
            assert app.router.location.path == "/"


@pytest.mark.anyio
class TestJoin:
    async def test_join_by_code(self, make_app, alice: User, club: Club) -> None:
        async with make_app(alice) as app:
            await app.settle()
            assert await actions.join_club_by_code(app, {"code": f" {club.id} "})
            assert app.router.location.path == f"/club/{club.id}/join"
            assert not await actions.join_club_by_code(app, {"code": ""})

    async def test_signed_out_join_creates_account(self, make_app, gateway: FakeGateway, club: Club) -> None:
        async with make_app(path=f"/club/{club.id}/join") as app:
            await app.settle()
            assert await actions.join_club(app, club.id, {"name": "Erin", "email": "erin@example.com"})
            await app.settle()
            assert app.identity is not None
            assert app.identity.name == "Erin"
            assert app.router.location.path == f"/club/{club.id}"
            assert app.cache.get_club_summary(club.id) is not None
            assert "Erin" in app.html()
        assert [c.method for c in gateway.calls if c.method in ("create_user", "join_club")] == [
            "create_user",
            "join_club",
        ]

    async def test_signed_out_join_validates(self, make_app, gateway: FakeGateway, club: Club) -> None:
        async with make_app(path=f"/club/{club.id}/join") as app:
            await app.settle()
            assert not await actions.join_club(app, club.id, {"name": "Erin"})
            assert _region_text(app, "join_error") == "Please enter your email"
        assert gateway.called("join_club") == []

    async def test_join_failure_inline(self, make_app, alice: User) -> None:
        async with make_app(alice, path="/club/nope/join") as app:
            await app.settle()
            assert not await actions.join_club(app, "nope")
            assert _region_text(app, "join_error") == "Error: club not found"


@pytest.mark.anyio
class TestPicks:
    async def test_add_pick(self, make_app, gateway: FakeGateway, alice: User, club: Club) -> None:
        async with make_app(alice, path=f"/club/{club.id}/add-pick") as app:
            await app.settle()
            form = {"title": "Heat", "year": "1995", "link": "", "notes": "Best diner scene"}
            assert await actions.add_pick(app, club.id, form)
            await app.settle()
            assert app.router.location.path == f"/club/{club.id}"
            assert "Heat" in app.html()
        args = gateway.called("add_pick")[0].args
        assert args["year"] == 1995
        assert args["link"] is None
        assert args["notes"] == "Best diner scene"

    async def test_add_pick_requires_title(self, make_app, gateway: FakeGateway, alice: User, club: Club) -> None:
        async with make_app(alice, path=f"/club/{club.id}/add-pick") as app:
            await app.settle()
            assert not await actions.add_pick(app, club.id, {"title": " ", "year": "abc"})
            assert _region_text(app, "add_pick_error") == "Please enter a title"
        assert gateway.called("add_pick") == []

    async def test_add_pick_over_quota(self, make_app, gateway: FakeGateway, alice: User, club: Club) -> None:
        gateway.seed_pick(club, alice, "Heat")
        async with make_app(alice, path=f"/club/{club.id}/add-pick") as app:
            await app.settle()
            assert not await actions.add_pick(app, club.id, {"title": "Alien"})
            assert "pick limit" in _region_text(app, "add_pick_error")

    async def test_delete_pick_confirmed(
        self, make_app, gateway: FakeGateway, dialogs: ScriptedDialogs, alice: User, club: Club
    ) -> None:
        pick = gateway.seed_pick(club, alice, "Heat")
        async with make_app(alice, path=f"/club/{club.id}/pick/{pick.id}") as app:
            await app.settle()
            assert await actions.delete_pick(app, club.id, pick.id)
            await app.settle()
            assert app.router.location.path == f"/club/{club.id}"
        assert pick.id not in gateway.picks
        assert dialogs.confirmations == ["Are you sure you want to delete this pick?"]

    async def test_delete_pick_declined(
        self, make_app, gateway: FakeGateway, dialogs: ScriptedDialogs, alice: User, club: Club
    ) -> None:
        pick = gateway.seed_pick(club, alice, "Heat")
        dialogs.answers = [False]
        async with make_app(alice) as app:
            await app.settle()
            assert not await actions.delete_pick(app, club.id, pick.id)
        assert gateway.called("delete_pick") == []

    async def test_delete_pick_failure_alerts(
        self, make_app, gateway: FakeGateway, dialogs: ScriptedDialogs, alice: User, bob: User, club: Club
    ) -> None:
        pick = gateway.seed_pick(club, bob, "Alien")
        async with make_app(alice) as app:
            await app.settle()
            assert not await actions.delete_pick(app, club.id, pick.id)
        assert dialogs.alerts == ["Error deleting pick: you can only delete your own picks"]


@pytest.mark.anyio
class TestClubLifecycle:
    async def test_start_club_rerenders(self, make_app, gateway: FakeGateway, alice: User, club: Club) -> None:
        gateway.seed_pick(club, alice, "Heat")
        async with make_app(alice, path=f"/club/{club.id}") as app:
            await app.settle()
            assert 'data-action="start_club"' in app.html()
            assert await actions.start_club(app, club.id)
            await app.settle()
            html = app.html()
            summary = app.cache.get_club_summary(club.id)
        assert summary is not None
        assert summary.started
        assert "Week 1" in html
        assert 'data-action="start_club"' not in html
        assert len(gateway.called("get_club")) == 2

    async def test_start_club_failure_inline(self, make_app, gateway: FakeGateway, alice: User, club: Club) -> None:
        gateway.seed_pick(club, alice, "Heat")
        gateway.fail("start_club", "only the creator can start the club", code="permission_denied")
        async with make_app(alice, path=f"/club/{club.id}") as app:
            await app.settle()
            assert not await actions.start_club(app, club.id)
            assert _region_text(app, "start_error") == "Error: only the creator can start the club"

    async def test_delete_club(
        self, make_app, gateway: FakeGateway, dialogs: ScriptedDialogs, alice: User, club: Club
    ) -> None:
        async with make_app(alice, path=f"/club/{club.id}") as app:
            await app.settle()
            assert app.cache.get_club_summary(club.id) is not None
            assert await actions.delete_club(app, club.id)
            await app.settle()
            assert app.cache.get_club_summary(club.id) is None
            assert app.router.location.path == "/profile"
        assert club.id not in gateway.clubs
        assert len(dialogs.confirmations) == 1

    async def test_delete_club_failure_alerts(
        self, make_app, gateway: FakeGateway, dialogs: ScriptedDialogs, alice: User, club: Club
    ) -> None:
        gateway.fail("delete_club", "not allowed")
        async with make_app(alice, path=f"/club/{club.id}") as app:
            await app.settle()
            assert not await actions.delete_club(app, club.id)
            assert app.router.location.path == f"/club/{club.id}"
        assert dialogs.alerts == ["Error deleting club: not allowed"]

    async def test_download_calendar(
        self, make_app, gateway: FakeGateway, downloads: MemoryDownloads, alice: User, club: Club
    ) -> None:
        gateway.seed_pick(club, alice, "Heat")
        await gateway.start_club(club.id)
        async with make_app(alice, path=f"/club/{club.id}") as app:
            await app.settle()
            path = await actions.download_calendar(app, club.id)
            assert path == "memory://movie-night-schedule.ics"
            assert _region_text(app, "calendar_status") == f"Saved {path}"
        saved = downloads.files["movie-night-schedule.ics"]
        assert saved.media_type == "text/calendar"
        assert "SUMMARY:Heat" in saved.content

    async def test_download_calendar_not_started(
        self, make_app, downloads: MemoryDownloads, alice: User, club: Club
    ) -> None:
        async with make_app(alice) as app:
            await app.settle()
            assert await actions.download_calendar(app, club.id, "Movie Night") is None
        assert downloads.files == {}


async def _until_called(gateway: FakeGateway, method: str) -> None:
    while not gateway.called(method):
        await anyio.sleep(0)


@pytest.mark.anyio
class TestLateResponses:
    async def test_late_add_pick_error_stays_on_its_page(
        self, make_app, gateway: FakeGateway, alice: User, club: Club
    ) -> None:
        other = gateway.seed_club("Documentaries", members=(alice,))
        async with make_app(alice, path=f"/club/{club.id}/add-pick") as app:
            await app.settle()
            first = app.document.find("add_pick_error")
            gate = gateway.hold("add_pick", club_id=club.id)
            gateway.fail("add_pick", "quota exceeded")
            app.spawn(actions.add_pick, app, club.id, {"title": "Heat"})
            await _until_called(gateway, "add_pick")

            app.navigate(f"/club/{other.id}/add-pick")
            await app.settle(remaining=1)
            current = app.document.find("add_pick_error")
            assert current is not None
            assert current is not first

            gate.release()
            await app.settle()

            assert app.document.find("add_pick_error") is current
            assert current.version == 0
            assert current.view == Message()
            assert app.router.location.path == f"/club/{other.id}/add-pick"
            assert "quota exceeded" not in app.html()

    async def test_late_add_pick_success_does_not_navigate(
        self, make_app, gateway: FakeGateway, alice: User, club: Club
    ) -> None:
        async with make_app(alice, path=f"/club/{club.id}/add-pick") as app:
            await app.settle()
            gate = gateway.hold("add_pick", club_id=club.id)
            app.spawn(actions.add_pick, app, club.id, {"title": "Heat"})
            await _until_called(gateway, "add_pick")

            app.navigate("/about")
            await app.settle(remaining=1)
            gate.release()
            await app.settle()

            assert app.router.location.path == "/about"
            assert "About WatchClub" in app.html()
        assert [pick.title for pick in gateway.picks.values()] == ["Heat"]

    async def test_late_start_club_error_stays_on_its_page(
        self, make_app, gateway: FakeGateway, alice: User, club: Club
    ) -> None:
        other = gateway.seed_club("Documentaries", members=(alice,))
        gateway.seed_pick(club, alice, "Heat")
        gateway.seed_pick(other, alice, "Koyaanisqatsi")
        async with make_app(alice, path=f"/club/{club.id}") as app:
            await app.settle()
            gate = gateway.hold("start_club", club_id=club.id)
            gateway.fail("start_club", "only the creator can start the club", code="permission_denied")
            app.spawn(actions.start_club, app, club.id)
            await _until_called(gateway, "start_club")

            app.navigate(f"/club/{other.id}")
            await app.settle(remaining=1)
            current = app.document.find("start_error")
            assert current is not None

            gate.release()
            await app.settle()

            assert current.attached
            assert current.view == Message()
            assert app.router.location.path == f"/club/{other.id}"
            assert "only the creator" not in app.html()
