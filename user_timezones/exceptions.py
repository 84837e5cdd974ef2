"""
Errors raised while handling timezone requests.

Each error carries the HTTP status and client-facing message it maps to.
"""


class TimezoneServiceError(Exception):
    """Base class for request-terminating errors."""

    status_code = 500
    message = 'Internal server error'

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {'error': self.message}


class MalformedRequest(TimezoneServiceError):
    """Request body is not JSON or does not match the expected shape."""

    status_code = 400
    message = 'Invalid request payload'


class InvalidSelection(TimezoneServiceError):
    """Requested label is not in the catalog."""

    status_code = 400
    message = 'Invalid timezone selection'


class MissingParameter(TimezoneServiceError):
    status_code = 400
    message = 'User ID is required'


class UserNotFound(TimezoneServiceError):
    status_code = 404
    message = 'User timezone not found'


class InvalidTimezoneData(TimezoneServiceError):
    """Stored identifier cannot be resolved by the timezone database."""

    status_code = 500
    message = 'Invalid timezone'
