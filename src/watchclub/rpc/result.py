"""Result-or-error values for RPC calls.

Page controllers and actions never let a gateway failure escape as an
exception: they ``await attempt(gateway.get_club(club_id))`` and branch on
the result::

    match await attempt(gateway.get_club(club_id)):
        case Ok(value=details):
            ...
        case Failure(message=message):
            ...
"""

import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Literal

from watchclub.errors import RPCError

logger = logging.getLogger("watchclub.rpc")


@dataclass(frozen=True)
class Ok[T]:
    """A successful call and its typed response."""

    value: T

    @property
    def ok(self) -> Literal[True]:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """A failed call. ``message`` is the backend text, shown verbatim."""

    message: str
    code: str = "unknown"

    @property
    def ok(self) -> Literal[False]:
        return False


type Result[T] = Ok[T] | Failure


async def attempt[T](call: Awaitable[T]) -> Result[T]:
    """Await *call*, turning an ``RPCError`` into a ``Failure``.

    Any other exception is a bug and propagates.
    """
    try:
        return Ok(await call)
    except RPCError as exc:
        logger.info("RPC failed (%s): %s", exc.code, exc.message)
        return Failure(message=exc.message or exc.code, code=exc.code)
