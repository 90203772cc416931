"""Routing: ordered route table with segment matching over a hash location.

Routes are registered during setup; resolution walks them in registration
order and falls back to the root route.
"""

from watchclub.routing.route import PathSegment, Route, RouteMatch
from watchclub.routing.router import (
    Location,
    NavigationToken,
    Router,
    normalize_path,
    parse_pattern,
)

__all__ = [
    "Location",
    "NavigationToken",
    "PathSegment",
    "Route",
    "RouteMatch",
    "Router",
    "normalize_path",
    "parse_pattern",
]
