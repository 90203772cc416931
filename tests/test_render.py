"""Tests for watchclub.views.render: kida templates for view models."""

import pytest

from watchclub.models import Identity
from watchclub.views.builders import build_nav
from watchclub.views.models import ClubListItem, ClubListView, HomeView, Message, NavLink, Notice
from watchclub.views.render import Renderer, create_environment
from watchclub.views.templates import TEMPLATES


@pytest.fixture(scope="module")
def renderer() -> Renderer:
    return Renderer()


class TestRenderer:
    def test_every_template_compiles(self) -> None:
        env = create_environment()
        for name in TEMPLATES:
            assert env.get_template(name) is not None

    def test_autoescape(self, renderer: Renderer) -> None:
        html = renderer.render(Message("<script>alert(1)</script>", kind="error"))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_empty_message_renders_nothing(self, renderer: Renderer) -> None:
        assert renderer.render(Message()).strip() == ""

    def test_nav_signed_in(self, renderer: Renderer) -> None:
        html = renderer.render(build_nav(Identity(id="u1", name="Alice", email="a@x")))
        assert "Logout (Alice)" in html
        assert 'data-action="logout"' in html

    def test_home_signed_out(self, renderer: Renderer) -> None:
        html = renderer.render(HomeView(signed_in=False))
        assert "First, create your account" in html
        assert "Create a Club" not in html

    def test_home_signed_in(self, renderer: Renderer) -> None:
        html = renderer.render(HomeView(signed_in=True, user_name="Alice"))
        assert "Create a Club" in html
        assert "First, create your account" not in html

    def test_club_list_empty(self, renderer: Renderer) -> None:
        html = renderer.render(ClubListView(items=(), empty_text="No clubs yet."))
        assert "empty-state" in html
        assert "No clubs yet." in html

    def test_club_list_items(self, renderer: Renderer) -> None:
        item = ClubListItem(id="c1", name="Noir", href="/club/c1", status_label="Started", started=True)
        html = renderer.render(ClubListView(items=(item,)))
        assert 'href="#/club/c1"' in html
        assert "club-status started" in html

    def test_notice(self, renderer: Renderer) -> None:
        html = renderer.render(Notice("Members only", "You are not a member of this club.", NavLink("Back", "/profile")))
        assert "You are not a member of this club." in html

    def test_template_override(self) -> None:
        renderer = Renderer(create_environment({"message.html": "[{{ view.text }}]"}))
        assert renderer.render(Message("hi")) == "[hi]"
