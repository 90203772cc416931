"""Pure formatting helpers shared by view builders and actions."""

from datetime import UTC, date, datetime

from watchclub.models import IntervalUnit

UNIT_LABELS: dict[int, tuple[str, str]] = {
    IntervalUnit.DAYS: ("day", "days"),
    IntervalUnit.WEEKS: ("week", "weeks"),
    IntervalUnit.MONTHS: ("month", "months"),
}
FALLBACK_UNIT_LABEL = "intervals"


def interval_unit_label(quantity: int, unit: int) -> str:
    """``(1, WEEKS) -> "week"``, ``(3, WEEKS) -> "weeks"``; unknown units -> ``"intervals"``."""
    labels = UNIT_LABELS.get(unit)
    if labels is None:
        return FALLBACK_UNIT_LABEL
    singular, plural = labels
    return singular if quantity == 1 else plural


def describe_interval(quantity: int, unit: int) -> str:
    """Human schedule cadence: ``"Every week"``, ``"Every 2 weeks"``."""
    label = interval_unit_label(quantity, unit)
    if quantity == 1 and unit in UNIT_LABELS:
        return f"Every {label}"
    return f"Every {quantity} {label}"


def sequence_label(sequence_number: int, unit: int) -> str:
    """Schedule slot heading: ``"Week 3"``; unknown units -> ``"#3"``."""
    labels = UNIT_LABELS.get(unit)
    if labels is None:
        return f"#{sequence_number}"
    return f"{labels[0].capitalize()} {sequence_number}"


def format_date(seconds: int | None) -> str:
    """Epoch seconds -> ``"January 5, 2026"`` (UTC); missing -> ``"N/A"``."""
    if not seconds:
        return "N/A"
    moment = datetime.fromtimestamp(seconds, tz=UTC)
    return f"{moment:%B} {moment.day}, {moment.year}"


def parse_date(text: str) -> int | None:
    """``"YYYY-MM-DD"`` -> epoch seconds at UTC midnight, or ``None`` if invalid."""
    try:
        day = date.fromisoformat(text.strip())
    except ValueError:
        return None
    return int(datetime(day.year, day.month, day.day, tzinfo=UTC).timestamp())


def coerce_int(value: object, default: int | None = None) -> int | None:
    """Best-effort integer from form input; *default* when blank or not a number."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return default
    try:
        return int(text)
    except ValueError:
        try:
            return int(float(text))
        except (ValueError, OverflowError):
            return default
