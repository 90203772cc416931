"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

type Handler = Callable[[Mapping[str, str]], Any]


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Static:  ``club``     (is_param=False)
    Param:   ``:clubId``  (is_param=True, param_name="clubId")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route: pattern, parsed segments, and handler.

    Created by ``Router.register()``; immutable afterwards.
    """

    pattern: str
    segments: tuple[PathSegment, ...]
    handler: Handler
    name: str | None = None

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(s.param_name for s in self.segments if s.is_param and s.param_name)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    params: dict[str, str]
