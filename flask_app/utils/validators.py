"""
Request payload validation utilities.
"""
from typing import List, Any


def validate_save_timezone_payload(data: Any) -> List[str]:
    """
    Validate a POST /users/timezone body.

    Missing fields are allowed and read as empty strings; present fields
    must be strings.

    Args:
        data: Decoded JSON body, or None if it did not parse

    Returns:
        List of error messages (empty if valid)
    """
    if not isinstance(data, dict):
        return ['Request body must be a JSON object.']

    errors = []
    for field in ('user_id', 'timezone'):
        value = data.get(field, '')
        if not isinstance(value, str):
            errors.append(f'{field} must be a string.')

    return errors
