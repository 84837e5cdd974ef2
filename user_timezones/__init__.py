"""
User Timezones Package

Timezone catalog and in-memory user timezone registry behind the
User Timezones web service.
"""

from user_timezones.catalog import DEFAULT_TIMEZONES, TimezoneCatalog
from user_timezones.models import TimezoneEntry
from user_timezones.registry import UserTimezoneRegistry
from user_timezones.timezone_utils import current_time_in, resolve_timezone

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_TIMEZONES",
    "TimezoneCatalog",
    "TimezoneEntry",
    "UserTimezoneRegistry",
    "current_time_in",
    "resolve_timezone",
]
