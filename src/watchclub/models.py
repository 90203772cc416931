"""Domain models shared by the cache, RPC layer, and view builders.

All models are frozen dataclasses. RPC adapters decode wire payloads into
them; the cache persists ``Identity`` and ``ClubSummary`` as flat JSON
objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class IntervalUnit(IntEnum):
    """Schedule interval unit. Values match the backend enum."""

    UNSPECIFIED = 0
    DAYS = 1
    WEEKS = 2
    MONTHS = 3


@dataclass(frozen=True, slots=True)
class User:
    """A member as reported by the backend."""

    id: str
    name: str
    email: str = ""


@dataclass(frozen=True, slots=True)
class Identity:
    """The signed-in user, as far as the client knows."""

    id: str
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> Identity:
        return cls(id=user.id, name=user.name, email=user.email)

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "email": self.email}

    @classmethod
    def from_dict(cls, data: Any) -> Identity:
        """Build from persisted data.

        Raises ``TypeError`` or ``KeyError`` when *data* is not a flat
        ``{id, name, email}`` object of strings.
        """
        if not isinstance(data, dict):
            msg = f"identity must be an object, got {type(data).__name__}"
            raise TypeError(msg)
        values = {key: data[key] for key in ("id", "name", "email")}
        for key, value in values.items():
            if not isinstance(value, str):
                msg = f"identity field {key!r} must be a string"
                raise TypeError(msg)
        if not values["id"]:
            msg = "identity id must not be empty"
            raise TypeError(msg)
        return cls(**values)


@dataclass(frozen=True, slots=True)
class Club:
    """A club as returned by the backend."""

    id: str
    name: str
    start_date: int | None = None  # epoch seconds
    started: bool = False
    max_picks_per_member: int = 1  # 0 = unlimited
    schedule_interval_quantity: int = 1
    schedule_interval_unit: int = IntervalUnit.WEEKS
    member_ids: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ClubSummary:
    """The cache-resident shape of a club (no member list)."""

    id: str
    name: str
    start_date: int | None = None
    started: bool = False
    max_picks_per_member: int = 1
    schedule_interval_quantity: int = 1
    schedule_interval_unit: int = IntervalUnit.WEEKS

    @classmethod
    def from_club(cls, club: Club) -> ClubSummary:
        return cls(
            id=club.id,
            name=club.name,
            start_date=club.start_date,
            started=club.started,
            max_picks_per_member=club.max_picks_per_member,
            schedule_interval_quantity=club.schedule_interval_quantity,
            schedule_interval_unit=int(club.schedule_interval_unit),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "startDate": self.start_date,
            "started": self.started,
            "maxPicksPerMember": self.max_picks_per_member,
            "scheduleIntervalQuantity": self.schedule_interval_quantity,
            "scheduleIntervalUnit": self.schedule_interval_unit,
        }

    @classmethod
    def from_dict(cls, data: Any) -> ClubSummary:
        """Build from persisted data. Missing optional fields take defaults.

        Raises ``TypeError``, ``KeyError`` or ``ValueError`` on malformed data.
        """
        if not isinstance(data, dict):
            msg = f"club summary must be an object, got {type(data).__name__}"
            raise TypeError(msg)
        club_id = data["id"]
        name = data["name"]
        if not isinstance(club_id, str) or not isinstance(name, str):
            msg = "club summary id and name must be strings"
            raise TypeError(msg)
        start_date = data.get("startDate")
        return cls(
            id=club_id,
            name=name,
            start_date=None if start_date is None else int(start_date),
            started=bool(data.get("started", False)),
            max_picks_per_member=int(data.get("maxPicksPerMember", 1)),
            schedule_interval_quantity=int(data.get("scheduleIntervalQuantity", 1)),
            schedule_interval_unit=int(data.get("scheduleIntervalUnit", IntervalUnit.WEEKS)),
        )


@dataclass(frozen=True, slots=True)
class Pick:
    """A content item a member submitted toward the schedule."""

    id: str
    club_id: str
    user_id: str
    title: str
    year: int | None = None
    link: str = ""
    notes: str = ""


@dataclass(frozen=True, slots=True)
class ClubDetails:
    """GetClub response: the club with its members and picks."""

    club: Club
    members: tuple[User, ...] = ()
    picks: tuple[Pick, ...] = ()

    def is_member(self, user_id: str) -> bool:
        return any(member.id == user_id for member in self.members)

    def picks_by(self, user_id: str) -> tuple[Pick, ...]:
        return tuple(pick for pick in self.picks if pick.user_id == user_id)

    def member_name(self, user_id: str) -> str | None:
        for member in self.members:
            if member.id == user_id:
                return member.name
        return None


@dataclass(frozen=True, slots=True)
class Assignment:
    """One scheduled slot: a sequence position and date for a pick."""

    sequence_number: int
    start_date: int | None
    pick: Pick
