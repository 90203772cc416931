"""Protobuf-JSON wire codec for the WatchClub service.

The backend speaks protobuf; over HTTP its messages use the canonical JSON
mapping:

- field names are lowerCamelCase,
- fields holding their default value may be omitted,
- ``int64`` values may arrive as strings,
- ``google.protobuf.Timestamp`` is an RFC 3339 string,
- enums are encoded by name (numbers are accepted too).

Decoders are lenient about those variations and raise ``ValueError`` on
payloads they cannot interpret.
"""

from datetime import UTC, datetime
from typing import Any

from watchclub.models import Assignment, Club, ClubDetails, IntervalUnit, Pick, User

UNIT_PREFIX = "SCHEDULE_INTERVAL_UNIT_"


def encode_timestamp(seconds: int) -> str:
    """Epoch seconds -> RFC 3339 UTC string."""
    return datetime.fromtimestamp(seconds, tz=UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def decode_timestamp(value: Any) -> int | None:
    """RFC 3339 string, ``{"seconds": ...}`` object, or number -> epoch seconds."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        msg = f"invalid timestamp {value!r}"
        raise ValueError(msg)
    if isinstance(value, int | float):
        return int(value)
    if isinstance(value, dict):
        return int(value.get("seconds", 0))
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return int(parsed.timestamp())
    msg = f"invalid timestamp {value!r}"
    raise ValueError(msg)


def encode_unit(unit: int) -> str:
    """IntervalUnit value -> enum name on the wire."""
    try:
        return UNIT_PREFIX + IntervalUnit(unit).name
    except ValueError:
        return UNIT_PREFIX + IntervalUnit.UNSPECIFIED.name


def decode_unit(value: Any) -> int:
    """Enum name or number -> integer unit (unknown names map to UNSPECIFIED)."""
    if value is None:
        return IntervalUnit.UNSPECIFIED
    if isinstance(value, int):
        return value
    name = str(value).upper()
    if name.startswith(UNIT_PREFIX):
        name = name[len(UNIT_PREFIX) :]
    try:
        return IntervalUnit[name]
    except KeyError:
        return IntervalUnit.UNSPECIFIED


def _int(value: Any, default: int = 0) -> int:
    if value is None or value == "":
        return default
    return int(value)


def _obj(payload: Any, what: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        msg = f"expected {what} object, got {type(payload).__name__}"
        raise ValueError(msg)
    return payload


def decode_user(payload: Any) -> User:
    data = _obj(payload, "user")
    return User(id=str(data["id"]), name=str(data.get("name", "")), email=str(data.get("email", "")))


def decode_club(payload: Any) -> Club:
    data = _obj(payload, "club")
    return Club(
        id=str(data["id"]),
        name=str(data.get("name", "")),
        start_date=decode_timestamp(data.get("startDate")),
        started=bool(data.get("started", False)),
        max_picks_per_member=_int(data.get("maxPicksPerMember")),
        schedule_interval_quantity=_int(data.get("scheduleIntervalQuantity"), 1) or 1,
        schedule_interval_unit=decode_unit(data.get("scheduleIntervalUnit")),
        member_ids=tuple(str(m) for m in data.get("memberIds", ())),
    )


def decode_pick(payload: Any) -> Pick:
    data = _obj(payload, "pick")
    year = _int(data.get("year"))
    return Pick(
        id=str(data["id"]),
        club_id=str(data.get("clubId", "")),
        user_id=str(data.get("userId", "")),
        title=str(data.get("title", "")),
        year=year or None,
        link=str(data.get("link", "")),
        notes=str(data.get("notes", "")),
    )


def decode_club_details(payload: Any) -> ClubDetails:
    """GetClub response ``{club, members, picks}``."""
    data = _obj(payload, "GetClub response")
    return ClubDetails(
        club=decode_club(data.get("club")),
        members=tuple(decode_user(m) for m in data.get("members", ())),
        picks=tuple(decode_pick(p) for p in data.get("picks", ())),
    )


def decode_assignment(payload: Any) -> Assignment:
    data = _obj(payload, "assignment")
    return Assignment(
        sequence_number=_int(data.get("sequenceNumber")),
        start_date=decode_timestamp(data.get("startDate")),
        pick=decode_pick(data.get("pick")),
    )
