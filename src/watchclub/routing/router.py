"""Hash router with first-match-wins segment matching.

Patterns are plain paths whose segments may be named parameters::

    /club/:clubId/pick/:pickId

Matching is declarative: pattern and path are split on ``/`` and compared
segment by segment. Static segments must be equal; a parameter segment
matches any non-empty segment and binds it, unchanged, under its name.
Patterns are tried in registration order and the first match wins; an
unmatched path falls back to the root pattern ``/``.

Every resolution advances a generation counter. Page controllers capture a
``NavigationToken`` before they start asynchronous work and check
``token.is_current`` before touching the page again, so a response that
arrives after the user navigated away is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from watchclub.errors import ConfigurationError
from watchclub.routing.route import Handler, PathSegment, Route, RouteMatch

logger = logging.getLogger("watchclub.router")

ROOT = "/"
PARAM_MARKER = ":"


def normalize_path(path: str | None) -> str:
    """Strip the fragment marker; an empty location means the root path."""
    if not path:
        return ROOT
    if path.startswith("#"):
        path = path[1:]
    return path or ROOT


def parse_pattern(pattern: str) -> tuple[PathSegment, ...]:
    """Parse a route pattern into segments.

    Examples::

        "/"                  -> (PathSegment(""), PathSegment(""))
        "/about"             -> (PathSegment(""), PathSegment("about"))
        "/club/:clubId"      -> (..., PathSegment(":clubId", is_param=True, param_name="clubId"))

    Raises ``ConfigurationError`` for a parameter without a name or a
    pattern that does not start with ``/``.
    """
    if not pattern.startswith("/"):
        msg = f"Route pattern {pattern!r} must start with '/'."
        raise ConfigurationError(msg)

    segments: list[PathSegment] = []
    for part in pattern.split("/"):
        if part.startswith(PARAM_MARKER):
            name = part[len(PARAM_MARKER) :]
            if not name or any(ch.isspace() for ch in name):
                msg = f"Route pattern {pattern!r} has an invalid parameter segment {part!r}."
                raise ConfigurationError(msg)
            segments.append(PathSegment(value=part, is_param=True, param_name=name))
        else:
            segments.append(PathSegment(value=part))
    return tuple(segments)


def match_segments(segments: tuple[PathSegment, ...], path: str) -> dict[str, str] | None:
    """Match *path* against parsed *segments*.

    Returns the bound parameters (left to right) or ``None``.
    """
    parts = path.split("/")
    if len(parts) != len(segments):
        return None

    params: dict[str, str] = {}
    for seg, part in zip(segments, parts, strict=True):
        if seg.is_param:
            if not part:
                return None
            params[seg.param_name or ""] = part
        elif seg.value != part:
            return None
    return params


@dataclass(frozen=True, slots=True, eq=False)
class NavigationToken:
    """Identifies one route resolution.

    ``is_current`` turns False as soon as the router starts resolving
    another location.
    """

    router: Router
    generation: int

    @property
    def is_current(self) -> bool:
        return self.router.generation == self.generation


class Location:
    """The addressable location (the ``#fragment`` of the page URL).

    Listeners are notified only when the hash actually changes, the same
    way a browser fires ``hashchange``.
    """

    __slots__ = ("_hash", "_listeners")

    def __init__(self, hash: str = "") -> None:  # noqa: A002
        self._hash = ""
        self._listeners: list[Callable[[str], None]] = []
        if hash:
            self._hash = hash if hash.startswith("#") else f"#{hash}"

    @property
    def hash(self) -> str:
        return self._hash

    @property
    def path(self) -> str:
        """The routable path: the hash without its marker, ``/`` when empty."""
        return normalize_path(self._hash)

    def assign(self, path: str) -> bool:
        """Set the hash to *path*. Returns True when the location changed."""
        new_hash = path if path.startswith("#") else f"#{path}"
        if new_hash == self._hash:
            return False
        self._hash = new_hash
        for listener in list(self._listeners):
            listener(self.path)
        return True

    def subscribe(self, listener: Callable[[str], None]) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe


class Router:
    """Route table plus location-driven resolution.

    Usage::

        router = Router(Location())
        router.register("/", home)
        router.register("/club/:clubId", club_detail)
        router.start()                 # resolves the current location
        router.navigate("/club/42")    # club_detail({"clubId": "42"})
    """

    __slots__ = (
        "_after_resolve",
        "_generation",
        "_routes",
        "_unsubscribe",
        "location",
    )

    def __init__(
        self,
        location: Location | None = None,
        *,
        after_resolve: Callable[[], None] | None = None,
    ) -> None:
        self.location = location or Location()
        self._after_resolve = after_resolve
        self._routes: dict[str, Route] = {}
        self._generation = 0
        self._unsubscribe: Callable[[], None] | None = None

    # -- Route table --

    def register(self, pattern: str, handler: Handler, *, name: str | None = None) -> Route:
        """Add a route. Re-registering a pattern replaces its handler in place."""
        route = Route(pattern=pattern, segments=parse_pattern(pattern), handler=handler, name=name)
        if pattern in self._routes:
            logger.debug("Replacing handler for route %s", pattern)
        self._routes[pattern] = route
        return route

    @property
    def routes(self) -> list[Route]:
        """Registered routes in registration (and therefore match) order."""
        return list(self._routes.values())

    def url_for(self, name: str, **params: str) -> str:
        """Build the path of the route called *name*."""
        for route in self._routes.values():
            if route.name != name:
                continue
            parts = []
            for seg in route.segments:
                if seg.is_param:
                    try:
                        parts.append(params[seg.param_name or ""])
                    except KeyError:
                        msg = f"Route {name!r} needs parameter {seg.param_name!r}"
                        raise ConfigurationError(msg) from None
                else:
                    parts.append(seg.value)
            return "/".join(parts)
        msg = f"No route named {name!r}"
        raise ConfigurationError(msg)

    def match(self, path: str) -> RouteMatch | None:
        """First registered route matching *path*, or ``None``."""
        path = normalize_path(path)
        for route in self._routes.values():
            params = match_segments(route.segments, path)
            if params is not None:
                return RouteMatch(route=route, params=params)
        return None

    # -- Resolution --

    @property
    def generation(self) -> int:
        return self._generation

    def token(self) -> NavigationToken:
        """A token for the resolution currently in effect."""
        return NavigationToken(self, self._generation)

    def resolve(self, path: str | None = None) -> RouteMatch:
        """Run the handler for *path* (default: the current location).

        Unmatched paths run the root handler with no parameters. The
        ``after_resolve`` hook runs afterwards even when the handler raises;
        the handler's exception still propagates.
        """
        path = normalize_path(self.location.hash if path is None else path)
        result = self.match(path)
        if result is None:
            root = self._routes.get(ROOT)
            if root is None:
                msg = "No root route registered; register a handler for '/'."
                raise ConfigurationError(msg)
            logger.debug("No route matches %r; falling back to root", path)
            result = RouteMatch(route=root, params={})

        self._generation += 1
        logger.debug("Resolving %r -> %s (generation %d)", path, result.route.pattern, self._generation)
        try:
            result.route.handler(dict(result.params))
        finally:
            if self._after_resolve is not None:
                self._after_resolve()
        return result

    def navigate(self, path: str) -> None:
        """Move to *path*. Exactly one resolution follows.

        When the location already shows *path* no change event fires, so
        the router re-resolves directly.
        """
        changed = self.location.assign(path)
        if not (changed and self._unsubscribe is not None):
            self.resolve()

    def reload(self) -> RouteMatch:
        """Re-resolve the current location."""
        return self.resolve()

    def start(self) -> RouteMatch:
        """Follow location changes and resolve the current location once."""
        if self._unsubscribe is None:
            self._unsubscribe = self.location.subscribe(self.resolve)
        return self.resolve()

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
