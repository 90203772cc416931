"""HTTP adapter for the WatchClub gateway.

Unary calls in the Connect JSON style::

    POST {api_url}/api.v1.WatchClubService/GetClub
    Content-Type: application/json

    {"clubId": "..."}

A 2xx response carries the protobuf-JSON response message. Anything else
carries ``{"code": "...", "message": "..."}`` and becomes an ``RPCError``
with the backend message preserved verbatim. Transport failures become
``RPCError("unavailable", ...)``.

No retries and no backoff: every call is fire-and-forget from the page's
point of view.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from watchclub.config import ClientConfig
from watchclub.errors import RPCError
from watchclub.models import Assignment, Club, ClubDetails, Pick, User
from watchclub.rpc import codec

logger = logging.getLogger("watchclub.rpc")

SERVICE = "api.v1.WatchClubService"

_STATUS_CODES = {
    400: "invalid_argument",
    401: "unauthenticated",
    403: "permission_denied",
    404: "not_found",
    409: "already_exists",
    412: "failed_precondition",
    429: "resource_exhausted",
    503: "unavailable",
}


class HttpGateway:
    """``Gateway`` implementation over ``httpx.AsyncClient``.

    Usage::

        async with HttpGateway.from_config(config) as gateway:
            details = await gateway.get_club("club-id")

    Pass ``client`` to supply a preconfigured ``httpx.AsyncClient`` (tests
    use ``httpx.MockTransport``); the gateway then does not close it.
    """

    __slots__ = ("_client", "_owns_client", "base_url")

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(cls, config: ClientConfig) -> HttpGateway:
        return cls(config.api_url, timeout=config.rpc_timeout)

    async def __aenter__(self) -> HttpGateway:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _call(self, method: str, body: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}/{SERVICE}/{method}"
        logger.debug("RPC %s", method)
        try:
            response = await self._client.post(
                url,
                json=body,
                headers={"Content-Type": "application/json", "Connect-Protocol-Version": "1"},
            )
        except httpx.HTTPError as exc:
            raise RPCError(code="unavailable", message=f"{method} failed: {exc}") from exc

        if not response.is_success:
            raise _error_from_response(response)

        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as exc:
            raise RPCError(code="internal", message=f"{method} returned invalid JSON") from exc
        if not isinstance(data, dict):
            raise RPCError(code="internal", message=f"{method} returned a non-object response")
        return data

    async def _decode[T](self, method: str, body: dict[str, Any], decode: Any) -> T:
        data = await self._call(method, body)
        try:
            return decode(data)
        except (KeyError, TypeError, ValueError) as exc:
            raise RPCError(code="internal", message=f"{method} returned an unexpected response") from exc

    # -- Users --

    async def create_user(self, name: str, email: str) -> User:
        return await self._decode(
            "CreateUser", {"name": name, "email": email}, lambda d: codec.decode_user(d.get("user"))
        )

    async def get_user(self, user_id: str) -> User:
        return await self._decode("GetUser", {"userId": user_id}, lambda d: codec.decode_user(d.get("user")))

    async def send_login_email(self, email: str) -> str:
        return await self._decode("SendLoginEmail", {"email": email}, lambda d: str(d.get("message", "")))

    # -- Clubs --

    async def create_club(
        self,
        name: str,
        start_date: int,
        max_picks_per_member: int,
        schedule_interval_quantity: int,
        schedule_interval_unit: int,
    ) -> Club:
        body = {
            "name": name,
            "startDate": codec.encode_timestamp(start_date),
            "maxPicksPerMember": max_picks_per_member,
            "scheduleIntervalQuantity": schedule_interval_quantity,
            "scheduleIntervalUnit": codec.encode_unit(schedule_interval_unit),
        }
        return await self._decode("CreateClub", body, lambda d: codec.decode_club(d.get("club")))

    async def join_club(self, club_id: str, user_id: str) -> Club:
        return await self._decode(
            "JoinClub", {"clubId": club_id, "userId": user_id}, lambda d: codec.decode_club(d.get("club"))
        )

    async def get_club(self, club_id: str) -> ClubDetails:
        return await self._decode("GetClub", {"clubId": club_id}, codec.decode_club_details)

    async def delete_club(self, club_id: str) -> None:
        await self._call("DeleteClub", {"clubId": club_id})

    async def start_club(self, club_id: str) -> Club:
        return await self._decode("StartClub", {"clubId": club_id}, lambda d: codec.decode_club(d.get("club")))

    async def list_user_clubs(self, user_id: str) -> list[Club]:
        return await self._decode(
            "ListUserClubs",
            {"userId": user_id},
            lambda d: [codec.decode_club(c) for c in d.get("clubs", ())],
        )

    # -- Picks and schedule --

    async def add_pick(
        self,
        club_id: str,
        user_id: str,
        title: str,
        year: int | None = None,
        link: str | None = None,
        notes: str | None = None,
    ) -> Pick:
        body: dict[str, Any] = {"clubId": club_id, "userId": user_id, "title": title}
        if year:
            body["year"] = year
        if link:
            body["link"] = link
        if notes:
            body["notes"] = notes
        return await self._decode("AddPick", body, lambda d: codec.decode_pick(d.get("pick")))

    async def delete_pick(self, pick_id: str, user_id: str) -> None:
        await self._call("DeletePick", {"pickId": pick_id, "userId": user_id})

    async def get_scheduled_picks(self, club_id: str) -> list[Assignment]:
        return await self._decode(
            "GetScheduledPicks",
            {"clubId": club_id},
            lambda d: [codec.decode_assignment(a) for a in d.get("assignments", ())],
        )

    async def get_club_calendar(self, club_id: str) -> str:
        return await self._decode("GetClubCalendar", {"clubId": club_id}, lambda d: str(d.get("icsData", "")))

    def __repr__(self) -> str:
        return f"HttpGateway({self.base_url!r})"


def _error_from_response(response: httpx.Response) -> RPCError:
    """Build an ``RPCError`` from a non-2xx response."""
    code = _STATUS_CODES.get(response.status_code, "internal" if response.status_code >= 500 else "unknown")
    message = response.reason_phrase or f"HTTP {response.status_code}"
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        code = str(data.get("code") or code)
        message = str(data.get("message") or message)
    return RPCError(code=code, message=message)
