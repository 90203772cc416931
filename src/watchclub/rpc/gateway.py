"""The RPC gateway contract consumed by the client.

One async method per backend operation. Implementations raise
``RPCError`` on failure; callers wrap calls in ``attempt()``. The gateway
carries no client state: the signed-in user's id is always passed
explicitly.
"""

from typing import Protocol, runtime_checkable

from watchclub.models import Assignment, Club, ClubDetails, Pick, User


@runtime_checkable
class Gateway(Protocol):
    """Async client for the WatchClub backend service."""

    async def create_user(self, name: str, email: str) -> User: ...

    async def get_user(self, user_id: str) -> User: ...

    async def create_club(
        self,
        name: str,
        start_date: int,
        max_picks_per_member: int,
        schedule_interval_quantity: int,
        schedule_interval_unit: int,
    ) -> Club: ...

    async def join_club(self, club_id: str, user_id: str) -> Club: ...

    async def get_club(self, club_id: str) -> ClubDetails: ...

    async def add_pick(
        self,
        club_id: str,
        user_id: str,
        title: str,
        year: int | None = None,
        link: str | None = None,
        notes: str | None = None,
    ) -> Pick: ...

    async def delete_pick(self, pick_id: str, user_id: str) -> None: ...

    async def delete_club(self, club_id: str) -> None: ...

    async def start_club(self, club_id: str) -> Club: ...

    async def get_scheduled_picks(self, club_id: str) -> list[Assignment]: ...

    async def get_club_calendar(self, club_id: str) -> str: ...

    async def list_user_clubs(self, user_id: str) -> list[Club]: ...

    async def send_login_email(self, email: str) -> str: ...
