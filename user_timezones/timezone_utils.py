"""
Timezone utilities shared across the app.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from user_timezones.exceptions import InvalidTimezoneData


def utc_now() -> datetime:
    """Default clock: the current instant in UTC."""
    return datetime.now(timezone.utc)


def resolve_timezone(identifier: str) -> ZoneInfo:
    """
    Load the rule set for an IANA identifier.

    Raises:
        InvalidTimezoneData: If the identifier is unknown or malformed
    """
    try:
        return ZoneInfo(identifier)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTimezoneData() from e


def to_rfc3339(moment: datetime) -> str:
    """Format an aware datetime as RFC 3339 with second precision.

    A zero offset is written as 'Z'.
    """
    text = moment.isoformat(timespec='seconds')
    if text.endswith('+00:00'):
        text = text[:-6] + 'Z'
    return text


def current_time_in(identifier: str, now: datetime | None = None) -> str:
    """Return the current wall-clock time in `identifier` as RFC 3339.

    The offset is the one in effect at `now`, so DST is reflected.
    """
    tz = resolve_timezone(identifier)
    moment = now if now is not None else utc_now()
    return to_rfc3339(moment.astimezone(tz))
