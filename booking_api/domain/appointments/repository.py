"""Appointment repository - In-memory storage for appointments"""

from typing import Optional

from .exceptions import AppointmentNotFoundError
from .schemas import Appointment


class AppointmentStore:
    """
    Ordered in-memory collection of appointments.

    One store is created per application at startup and lives until the
    process exits. Every method is synchronous, so a call completes
    before another request handler can touch the store.
    """

    def __init__(self, appointments: Optional[list[Appointment]] = None):
        self._appointments: list[Appointment] = list(appointments or [])

    def __len__(self) -> int:
        return len(self._appointments)

    def list(self) -> list[Appointment]:
        """Get all appointments in insertion order"""
        return list(self._appointments)

    def append(self, appointment: Appointment) -> Appointment:
        """Add an appointment at the end. Ids are not checked for duplicates."""
        self._appointments.append(appointment)
        return appointment

    def find_by_id(self, appointment_id: str) -> Optional[Appointment]:
        """Get the first appointment with the given id"""
        return next((a for a in self._appointments if a.id == appointment_id), None)

    def update_status(self, appointment_id: str, status: str) -> Appointment:
        """Replace the status of an appointment in place"""
        appointment = self.find_by_id(appointment_id)
        if appointment is None:
            raise AppointmentNotFoundError()
        appointment.status = status
        return appointment

    def delete(self, appointment_id: str) -> Appointment:
        """Remove the first appointment with the given id"""
        for index, appointment in enumerate(self._appointments):
            if appointment.id == appointment_id:
                return self._appointments.pop(index)
        raise AppointmentNotFoundError()
