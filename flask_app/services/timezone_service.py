"""
Service layer for the timezone endpoints.
"""
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from flask_app.utils.validators import validate_save_timezone_payload
from user_timezones.catalog import TimezoneCatalog
from user_timezones.exceptions import (
    InvalidSelection,
    MalformedRequest,
    MissingParameter,
    UserNotFound,
)
from user_timezones.registry import UserTimezoneRegistry
from user_timezones.timezone_utils import current_time_in, utc_now

logger = logging.getLogger(__name__)


class TimezoneService:
    """Validates requests against the catalog and reads/writes the registry."""

    def __init__(self, catalog: TimezoneCatalog, registry: UserTimezoneRegistry,
                 clock: Callable[[], datetime] = utc_now):
        self.catalog = catalog
        self.registry = registry
        self.clock = clock

    def list_timezones(self) -> List[Dict[str, str]]:
        """Return the catalog as JSON-ready dicts, in catalog order."""
        return [entry.to_dict() for entry in self.catalog.list_all()]

    def save_user_timezone(self, payload: Any) -> Dict[str, str]:
        """
        Save a user's timezone selected by catalog label.

        Args:
            payload: Decoded JSON body ({'user_id': str, 'timezone': label})

        Returns:
            Success message and the resolved identifier

        Raises:
            MalformedRequest: If the body is not a JSON object of strings
            InvalidSelection: If the label is not in the catalog
        """
        errors = validate_save_timezone_payload(payload)
        if errors:
            logger.info("Rejected save request: %s", '; '.join(errors))
            raise MalformedRequest()

        user_id = payload.get('user_id', '')
        label = payload.get('timezone', '')

        entry = self.catalog.find_by_label(label)
        if entry is None:
            logger.info("Unknown timezone label %r for user %r", label, user_id)
            raise InvalidSelection()

        self.registry.save(user_id, entry.identifier)
        logger.debug("Saved timezone %s for user %r", entry.identifier, user_id)

        return {
            'message': 'Timezone saved successfully',
            'timezone': entry.identifier,
        }

    def get_current_time(self, user_id: Optional[str]) -> Dict[str, str]:
        """
        Get the current wall-clock time in the user's saved timezone.

        Raises:
            MissingParameter: If user_id is missing or empty
            UserNotFound: If the user has not saved a timezone
            InvalidTimezoneData: If the stored identifier cannot be resolved
        """
        if not user_id:
            raise MissingParameter()

        identifier = self.registry.lookup(user_id)
        if identifier is None:
            logger.debug("No timezone saved for user %r", user_id)
            raise UserNotFound()

        return {
            'user_id': user_id,
            'timezone': identifier,
            'current_time': current_time_in(identifier, self.clock()),
        }
