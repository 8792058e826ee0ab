"""Appointment domain errors

Each error carries the HTTP status and the fixed message returned to the
caller. Details of the underlying failure are logged, never returned.
"""

from typing import Optional


class AppointmentError(Exception):
    """Base class for errors surfaced through the response envelope"""

    status_code = 500
    message = "Something went wrong. Please try again."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class AppointmentValidationError(AppointmentError):
    status_code = 400
    message = "Missing required fields"


class AppointmentNotFoundError(AppointmentError):
    status_code = 404
    message = "Appointment not found"


class EmailDispatchError(AppointmentError):
    """Raised when a booking email could not be delivered"""

    status_code = 500
    message = "Failed to book appointment. Please try again."


class UnexpectedAppointmentError(AppointmentError):
    status_code = 500
