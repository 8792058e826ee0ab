"""Appointment service - Business logic for appointment operations"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from ... import email_service
from ...shared.validators import validate_booking_fields
from .exceptions import AppointmentNotFoundError, AppointmentValidationError
from .repository import AppointmentStore
from .schemas import Appointment, BookingRequest, LineItem

logger = logging.getLogger(__name__)


def calculate_total(cart_items: Optional[Iterable[LineItem]]) -> float:
    """Sum of price x quantity over the cart, zero for a missing cart"""
    return sum((item.price * item.quantity for item in cart_items or []), 0)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_appointment(payload: BookingRequest) -> Appointment:
    """Derive a complete pending appointment from a validated booking request"""
    cart_items = tuple(payload.cartItems or ())
    return Appointment(
        id=str(uuid.uuid4()),
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        date=payload.date,
        time=payload.time,
        cartItems=cart_items,
        notes=payload.notes or "",
        status="pending",
        createdAt=utc_timestamp(),
        total=calculate_total(cart_items),
    )


class AppointmentService:
    """Service layer for appointment business logic"""

    def __init__(self, store: AppointmentStore):
        self.store = store

    def create_appointment(self, payload: BookingRequest) -> Appointment:
        """Validate a booking and store the resulting appointment"""
        missing = validate_booking_fields(payload.model_dump())
        if missing:
            logger.warning(f"⚠️ Booking rejected, missing fields: {', '.join(missing)}")
            raise AppointmentValidationError()

        appointment = build_appointment(payload)
        self.store.append(appointment)
        logger.info(
            f"📥 Appointment {appointment.id} booked for {appointment.date} {appointment.time} "
            f"({len(appointment.cartItems)} item(s), total {appointment.total})"
        )
        return appointment

    async def book(self, payload: BookingRequest) -> Appointment:
        """
        Store a booking, then email the business and the customer.

        The appointment is stored before any email goes out and is kept
        when delivery fails; the EmailDispatchError still propagates.
        """
        appointment = self.create_appointment(payload)

        try:
            await email_service.send_new_booking_notification(appointment)
            await email_service.send_booking_confirmation(appointment)
        except Exception:
            logger.error(f"❌ Booking emails failed for appointment {appointment.id}")
            raise

        return appointment

    def list_appointments(self) -> list[Appointment]:
        """Get all appointments"""
        return self.store.list()

    def get_appointment(self, appointment_id: str) -> Appointment:
        """Get a specific appointment"""
        appointment = self.store.find_by_id(appointment_id)
        if appointment is None:
            logger.warning(f"⚠️ Appointment {appointment_id} not found")
            raise AppointmentNotFoundError()
        return appointment

    def update_status(self, appointment_id: str, status: str) -> Appointment:
        """Replace the status of an appointment"""
        try:
            appointment = self.store.update_status(appointment_id, status)
        except AppointmentNotFoundError:
            logger.warning(f"⚠️ Status update for unknown appointment {appointment_id}")
            raise
        logger.info(f"✅ Appointment {appointment_id} status set to {status!r}")
        return appointment

    def delete_appointment(self, appointment_id: str) -> Appointment:
        """Delete an appointment"""
        try:
            appointment = self.store.delete(appointment_id)
        except AppointmentNotFoundError:
            logger.warning(f"⚠️ Delete requested for unknown appointment {appointment_id}")
            raise
        logger.info(f"🗑️ Appointment {appointment_id} deleted")
        return appointment
