"""Tests for watchclub.routing: hash router with segment matching."""

import pytest

from watchclub.errors import ConfigurationError
from watchclub.routing import Location, Router, normalize_path, parse_pattern


class Recorder:
    """Route handler that records the parameters it was called with."""

    def __init__(self) -> None:
        self.calls: list[dict[str, str]] = []

    def __call__(self, params: dict[str, str]) -> None:
        self.calls.append(params)


def _router(*patterns: str) -> tuple[Router, dict[str, Recorder]]:
    router = Router(Location())
    handlers = {}
    for pattern in patterns:
        handlers[pattern] = Recorder()
        router.register(pattern, handlers[pattern])
    return router, handlers


class TestParsePattern:
    def test_static(self) -> None:
        segments = parse_pattern("/about")
        assert [s.value for s in segments] == ["", "about"]
        assert not any(s.is_param for s in segments)

    def test_param(self) -> None:
        segments = parse_pattern("/club/:clubId")
        assert segments[2].is_param is True
        assert segments[2].param_name == "clubId"

    def test_empty_param_name(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_pattern("/club/:")

    def test_must_start_with_slash(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_pattern("club/:clubId")
        assert "club/:clubId" in str(exc_info.value)


class TestNormalizePath:
    @pytest.mark.parametrize(("raw", "expected"), [("", "/"), ("#", "/"), ("#/about", "/about"), ("/x", "/x")])
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_path(raw) == expected


class TestMatch:
    def test_params_bound_by_name(self) -> None:
        router, _ = _router("/", "/club/:clubId/pick/:pickId")
        match = router.match("/club/c1/pick/p9")
        assert match is not None
        assert match.params == {"clubId": "c1", "pickId": "p9"}

    def test_values_not_decoded(self) -> None:
        router, _ = _router("/", "/club/:clubId")
        match = router.match("/club/a%20b")
        assert match is not None
        assert match.params == {"clubId": "a%20b"}

    def test_segment_count_must_match(self) -> None:
        router, _ = _router("/", "/club/:clubId")
        assert router.match("/club/c1/extra") is None
        assert router.match("/club") is None

    def test_empty_param_segment_does_not_match(self) -> None:
        router, _ = _router("/", "/club/:clubId")
        assert router.match("/club/") is None

    def test_first_registered_wins(self) -> None:
        router, _ = _router("/", "/club/:clubId", "/club/special")
        match = router.match("/club/special")
        assert match is not None
        assert match.route.pattern == "/club/:clubId"

    def test_duplicate_pattern_replaces_in_place(self) -> None:
        router, _ = _router("/", "/a", "/b")
        replacement = Recorder()
        router.register("/a", replacement)
        assert [r.pattern for r in router.routes] == ["/", "/a", "/b"]
        router.resolve("/a")
        assert replacement.calls == [{}]


class TestResolve:
    def test_unmatched_falls_back_to_root(self) -> None:
        router, handlers = _router("/", "/about")
        result = router.resolve("/nope/nothing")
        assert result.route.pattern == "/"
        assert handlers["/"].calls == [{}]

    def test_empty_hash_resolves_root(self) -> None:
        router, handlers = _router("/", "/about")
        router.resolve("")
        assert handlers["/"].calls == [{}]

    def test_no_root_route(self) -> None:
        router, _ = _router("/about")
        with pytest.raises(ConfigurationError):
            router.resolve("/missing")

    def test_generation_advances(self) -> None:
        router, _ = _router("/")
        token = router.token()
        router.resolve("/")
        assert not token.is_current
        assert router.token().is_current

    def test_after_resolve_runs_even_when_handler_raises(self) -> None:
        hooks: list[int] = []
        router = Router(Location(), after_resolve=lambda: hooks.append(1))

        def broken(params: dict[str, str]) -> None:
            raise RuntimeError("boom")

        router.register("/", broken)
        with pytest.raises(RuntimeError):
            router.resolve("/")
        assert hooks == [1]


class TestNavigate:
    def test_navigate_resolves_once(self) -> None:
        router, handlers = _router("/", "/club/:clubId")
        router.start()
        router.navigate("/club/42")
        assert handlers["/club/:clubId"].calls == [{"clubId": "42"}]
        assert router.location.hash == "#/club/42"

    def test_navigate_to_current_path_still_resolves(self) -> None:
        router, handlers = _router("/", "/club/:clubId")
        router.start()
        router.navigate("/club/42")
        router.navigate("/club/42")
        assert len(handlers["/club/:clubId"].calls) == 2

    def test_location_change_resolves(self) -> None:
        router, handlers = _router("/", "/about")
        router.start()
        router.location.assign("/about")
        assert handlers["/about"].calls == [{}]

    def test_stop_unsubscribes(self) -> None:
        router, handlers = _router("/", "/about")
        router.start()
        router.stop()
        router.location.assign("/about")
        assert handlers["/about"].calls == []

    def test_navigate_before_start(self) -> None:
        router, handlers = _router("/", "/about")
        router.navigate("/about")
        assert handlers["/about"].calls == [{}]


class TestUrlFor:
    def test_builds_path(self) -> None:
        router = Router()
        router.register("/", Recorder(), name="home")
        router.register("/club/:clubId/pick/:pickId", Recorder(), name="pick")
        assert router.url_for("pick", clubId="c1", pickId="p2") == "/club/c1/pick/p2"
        assert router.url_for("home") == "/"

    def test_missing_param(self) -> None:
        router = Router()
        router.register("/club/:clubId", Recorder(), name="club")
        with pytest.raises(ConfigurationError):
            router.url_for("club")


class TestLocation:
    def test_notifies_only_on_change(self) -> None:
        seen: list[str] = []
        location = Location("/a")
        location.subscribe(seen.append)
        assert location.assign("/a") is False
        assert location.assign("/b") is True
        assert seen == ["/b"]
