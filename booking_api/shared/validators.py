"""Shared validation utilities"""

from typing import Any, Mapping

REQUIRED_BOOKING_FIELDS = ("name", "email", "phone", "date", "time")


def validate_booking_fields(payload: Mapping[str, Any]) -> list[str]:
    """
    Check that every required booking field is present and truthy.

    Only presence is checked: an empty string fails, a whitespace-only
    string passes, and no format validation is done on email or date.

    Args:
        payload: Booking submission as a mapping

    Returns:
        Names of the missing fields, empty when the payload is valid
    """
    return [field for field in REQUIRED_BOOKING_FIELDS if not payload.get(field)]
