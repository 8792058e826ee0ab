"""Tests for the appointment factory and booking service."""
import asyncio
from datetime import datetime

import pytest

from booking_api.domain.appointments.exceptions import (
    AppointmentNotFoundError,
    AppointmentValidationError,
    EmailDispatchError,
)
from booking_api.domain.appointments.schemas import BookingRequest, LineItem
from booking_api.domain.appointments.service import (
    AppointmentService,
    build_appointment,
    calculate_total,
)


class TestCalculateTotal:

    def test_sums_price_times_quantity(self):
        items = [
            LineItem(name="Ring", price=100, quantity=2),
            LineItem(name="Chain", price=49.5, quantity=1),
        ]
        assert calculate_total(items) == 249.5

    def test_missing_cart_is_zero(self):
        assert calculate_total(None) == 0
        assert calculate_total([]) == 0

    def test_zero_quantity_contributes_nothing(self):
        assert calculate_total([LineItem(name="Ring", price=100, quantity=0)]) == 0


class TestBuildAppointment:

    def test_example_booking(self, booking_request):
        appointment = build_appointment(booking_request)

        assert appointment.total == 200
        assert appointment.status == "pending"
        assert appointment.name == "A"
        assert appointment.cartItems[0].name == "Ring"

    def test_defaults_for_optional_fields(self):
        appointment = build_appointment(
            BookingRequest(name="A", email="a@x.com", phone="555", date="2024-01-01", time="10:00")
        )
        assert appointment.cartItems == ()
        assert appointment.notes == ""
        assert appointment.total == 0

    def test_generates_unique_ids(self, booking_request):
        ids = {build_appointment(booking_request).id for _ in range(50)}
        assert len(ids) == 50

    def test_created_at_is_utc_iso(self, booking_request):
        created_at = build_appointment(booking_request).createdAt
        assert created_at.endswith("Z")
        datetime.fromisoformat(created_at.replace("Z", "+00:00"))


class TestAppointmentService:

    def test_create_rejects_missing_fields(self, store):
        service = AppointmentService(store)
        with pytest.raises(AppointmentValidationError):
            service.create_appointment(BookingRequest(name="A", email="a@x.com"))
        assert len(store) == 0

    def test_book_sends_both_emails(self, store, booking_request, mock_mailer):
        notify, confirm = mock_mailer
        service = AppointmentService(store)

        appointment = asyncio.run(service.book(booking_request))

        assert store.find_by_id(appointment.id) is appointment
        notify.assert_awaited_once_with(appointment)
        confirm.assert_awaited_once_with(appointment)

    def test_book_keeps_record_when_dispatch_fails(self, store, booking_request, mock_mailer):
        notify, confirm = mock_mailer
        notify.side_effect = EmailDispatchError()
        service = AppointmentService(store)

        with pytest.raises(EmailDispatchError):
            asyncio.run(service.book(booking_request))

        assert len(store) == 1
        confirm.assert_not_awaited()

    def test_book_confirmation_failure_propagates(self, store, booking_request, mock_mailer):
        _, confirm = mock_mailer
        confirm.side_effect = EmailDispatchError()

        with pytest.raises(EmailDispatchError):
            asyncio.run(AppointmentService(store).book(booking_request))
        assert len(store) == 1

    def test_get_unknown_raises(self, store):
        with pytest.raises(AppointmentNotFoundError):
            AppointmentService(store).get_appointment("missing")

    def test_status_and_delete(self, store, booking_request):
        service = AppointmentService(store)
        appointment = service.create_appointment(booking_request)

        assert service.update_status(appointment.id, "confirmed").status == "confirmed"
        service.delete_appointment(appointment.id)

        assert service.list_appointments() == []
        with pytest.raises(AppointmentNotFoundError):
            service.delete_appointment(appointment.id)


def test_validation_happens_before_any_email(store, mock_mailer):
    notify, confirm = mock_mailer
    with pytest.raises(AppointmentValidationError):
        asyncio.run(AppointmentService(store).book(BookingRequest(name="A")))
    notify.assert_not_awaited()
    confirm.assert_not_awaited()
