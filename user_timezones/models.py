"""
Data models for the timezone catalog.
"""

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class TimezoneEntry:
    """A selectable timezone as shown to clients."""

    label: str
    identifier: str
    utc_offset: str  # display only, never used for computation

    def to_dict(self) -> dict[str, str]:
        """Serialize to the JSON shape returned by GET /timezones."""
        return asdict(self)
