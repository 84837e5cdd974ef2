"""
In-memory mapping of user IDs to their chosen timezone identifier.
"""
import threading
from typing import Optional


class UserTimezoneRegistry:
    """Thread-safe user_id -> timezone identifier store.

    A single lock covers the whole dict. Each save/lookup is atomic on its
    own; nothing is atomic across calls.
    Callers must validate identifiers against the catalog before saving.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._timezones: dict[str, str] = {}

    def save(self, user_id: str, identifier: str) -> None:
        """Store `identifier` for `user_id`, replacing any earlier choice."""
        with self._lock:
            self._timezones[user_id] = identifier

    def lookup(self, user_id: str) -> Optional[str]:
        """Return the stored identifier, or None if the user never saved one."""
        with self._lock:
            return self._timezones.get(user_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._timezones)
