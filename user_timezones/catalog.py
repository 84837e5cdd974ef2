"""
Static catalog of timezones clients may choose from.

Order matters: clients display the entries exactly as listed.
"""

from typing import Iterable, Optional, Tuple

from user_timezones.models import TimezoneEntry

DEFAULT_TIMEZONES: Tuple[TimezoneEntry, ...] = (
    TimezoneEntry('UTC (Coordinated Universal Time)', 'UTC', 'UTC + 0:00'),
    TimezoneEntry('GMT (Greenwich Mean Time)', 'Europe/London', 'UTC + 0:00'),
    TimezoneEntry('CET (Central European Time)', 'Europe/Berlin', 'UTC + 1:00'),
    TimezoneEntry('EET (Eastern European Time)', 'Europe/Athens', 'UTC + 2:00'),
    TimezoneEntry('MSK (Moscow Standard Time)', 'Europe/Moscow', 'UTC + 3:00'),
    TimezoneEntry('GST (Gulf Standard Time)', 'Asia/Dubai', 'UTC + 4:00'),
    TimezoneEntry('IST (Indian Standard Time)', 'Asia/Kolkata', 'UTC + 5:30'),
    TimezoneEntry('BST (Bangladesh Standard Time)', 'Asia/Dhaka', 'UTC + 6:00'),
    TimezoneEntry('ICT (Indochina Time)', 'Asia/Bangkok', 'UTC + 7:00'),
    TimezoneEntry('CST (China Standard Time)', 'Asia/Shanghai', 'UTC + 8:00'),
    TimezoneEntry('AWST (Australian Western Standard Time)', 'Australia/Perth', 'UTC + 8:00'),
    TimezoneEntry('JST (Japan Standard Time)', 'Asia/Tokyo', 'UTC + 9:00'),
    TimezoneEntry('KST (Korea Standard Time)', 'Asia/Seoul', 'UTC + 9:00'),
    TimezoneEntry('ACST (Australia Central Standard Time)', 'Australia/Adelaide', 'UTC + 9:30'),
    TimezoneEntry('AEST (Australia Eastern Standard Time)', 'Australia/Sydney', 'UTC + 10:00'),
    TimezoneEntry('ChST (Chamorro Standard Time)', 'Pacific/Guam', 'UTC + 10:00'),
    TimezoneEntry('NZST (New Zealand Standard Time)', 'Pacific/Auckland', 'UTC + 12:00'),
    TimezoneEntry('SST (Samoa Standard Time)', 'Pacific/Pago_Pago', 'UTC-11:00'),
    TimezoneEntry('HST (Hawaii Standard Time)', 'Pacific/Honolulu', 'UTC-10:00'),
    TimezoneEntry('AKST (Alaska Standard Time)', 'America/Anchorage', 'UTC - 9:00'),
    TimezoneEntry('PST (Pacific Standard Time)', 'America/Los_Angeles', 'UTC - 8:00'),
    TimezoneEntry('MST (Mountain Standard Time)', 'America/Denver', 'UTC - 7:00'),
    TimezoneEntry('CST (Central Standard Time)', 'America/Chicago', 'UTC - 6:00'),
    TimezoneEntry('EST (Eastern Standard Time)', 'America/New_York', 'UTC - 5:00'),
    TimezoneEntry('AST (Atlantic Standard Time)', 'America/Puerto_Rico', 'UTC - 4:00'),
    TimezoneEntry('NST (Newfoundland Standard Time)', 'America/St_Johns', 'UTC - 3:30'),
    TimezoneEntry('BRT (Brasília Time)', 'America/Sao_Paulo', 'UTC - 3:00'),
    TimezoneEntry('ART (Argentina Time)', 'America/Argentina/Buenos_Aires', 'UTC - 3:00'),
)


class TimezoneCatalog:
    """Read-only, ordered collection of TimezoneEntry values."""

    def __init__(self, entries: Iterable[TimezoneEntry] = DEFAULT_TIMEZONES):
        """
        Initialize catalog.

        Args:
            entries: Timezone entries in display order (default: DEFAULT_TIMEZONES)
        """
        self._entries = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def list_all(self) -> Tuple[TimezoneEntry, ...]:
        """Return every entry in catalog order."""
        return self._entries

    def find_by_label(self, label: str) -> Optional[TimezoneEntry]:
        """
        Find the entry whose label matches exactly.

        Args:
            label: Display label chosen by the client

        Returns:
            First matching TimezoneEntry, or None if the label is unknown
        """
        for entry in self._entries:
            if entry.label == label:
                return entry
        return None

    def identifiers(self) -> list[str]:
        """Return the IANA identifiers in catalog order."""
        return [entry.identifier for entry in self._entries]
