"""Appointment router - FastAPI endpoints for appointment operations"""

import logging

from fastapi import APIRouter, Depends, Request

from .exceptions import AppointmentError, UnexpectedAppointmentError
from .repository import AppointmentStore
from .schemas import (
    AppointmentEnvelope,
    AppointmentListEnvelope,
    BookingRequest,
    MessageEnvelope,
    StatusUpdate,
)
from .service import AppointmentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Appointments"])


def get_appointment_store(request: Request) -> AppointmentStore:
    """The store created for this application at startup"""
    return request.app.state.appointment_store


def get_appointment_service(
    store: AppointmentStore = Depends(get_appointment_store),
) -> AppointmentService:
    """Dependency injection for AppointmentService"""
    return AppointmentService(store)


@router.post("/book-appointment", response_model=AppointmentEnvelope)
async def book_appointment(
    data: BookingRequest,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Book an appointment and send the confirmation emails"""
    try:
        appointment = await service.book(data)
    except AppointmentError:
        raise
    except Exception as e:
        logger.exception(f"Error booking appointment: {e}")
        raise UnexpectedAppointmentError("Failed to book appointment. Please try again.") from e

    return AppointmentEnvelope(
        success=True,
        message="Appointment booked successfully! Confirmation emails sent.",
        appointment=appointment,
    )


@router.get("/appointments", response_model=AppointmentListEnvelope)
async def list_appointments(service: AppointmentService = Depends(get_appointment_service)):
    """Get all appointments (admin dashboard)"""
    try:
        appointments = service.list_appointments()
    except Exception as e:
        logger.exception(f"Error fetching appointments: {e}")
        raise UnexpectedAppointmentError("Failed to fetch appointments") from e

    return AppointmentListEnvelope(success=True, appointments=appointments)


@router.get("/appointments/{appointment_id}", response_model=AppointmentEnvelope)
async def get_appointment(
    appointment_id: str,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Get a specific appointment"""
    try:
        appointment = service.get_appointment(appointment_id)
    except AppointmentError:
        raise
    except Exception as e:
        logger.exception(f"Error fetching appointment {appointment_id}: {e}")
        raise UnexpectedAppointmentError("Failed to fetch appointments") from e

    return AppointmentEnvelope(
        success=True,
        message="Appointment retrieved successfully",
        appointment=appointment,
    )


@router.put("/appointments/{appointment_id}", response_model=AppointmentEnvelope)
async def update_appointment_status(
    appointment_id: str,
    data: StatusUpdate,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Update the status of an appointment"""
    try:
        appointment = service.update_status(appointment_id, data.status)
    except AppointmentError:
        raise
    except Exception as e:
        logger.exception(f"Error updating appointment {appointment_id}: {e}")
        raise UnexpectedAppointmentError("Failed to update appointment") from e

    return AppointmentEnvelope(
        success=True,
        message="Appointment status updated successfully",
        appointment=appointment,
    )


@router.delete("/appointments/{appointment_id}", response_model=MessageEnvelope)
async def delete_appointment(
    appointment_id: str,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Delete an appointment"""
    try:
        service.delete_appointment(appointment_id)
    except AppointmentError:
        raise
    except Exception as e:
        logger.exception(f"Error deleting appointment {appointment_id}: {e}")
        raise UnexpectedAppointmentError("Failed to delete appointment") from e

    return MessageEnvelope(success=True, message="Appointment deleted successfully")
