"""Tests for booking email templates."""
import pytest

from booking_api.domain.appointments.schemas import BookingRequest
from booking_api.domain.appointments.service import build_appointment
from booking_api.email_service import compile_mjml_to_html
from booking_api.email_templates import (
    booking_confirmation_template,
    format_amount,
    format_date,
    new_booking_notification_template,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (200, "$200"),
        (1500.0, "$1,500"),
        (1234.5, "$1,234.50"),
        (0, "$0"),
    ],
)
def test_format_amount(value, expected):
    assert format_amount(value) == expected


def test_format_date():
    assert format_date("2024-01-31") == "01/31/2024"
    assert format_date("2024-01-31T10:00:00.000Z") == "01/31/2024"
    assert format_date("next Tuesday") == "next Tuesday"


class TestNewBookingNotification:

    def test_customer_details_and_items(self, booking_request):
        mjml = new_booking_notification_template(build_appointment(booking_request))

        assert "New Appointment Booking" in mjml
        assert "<strong>Email:</strong> a@x.com" in mjml
        assert "01/01/2024" in mjml
        assert "/img/ring.jpg" in mjml
        assert "Grand Total: $200" in mjml
        assert "Please contact the customer to confirm the appointment details." in mjml

    def test_notes_only_when_present(self, booking_payload):
        without_notes = new_booking_notification_template(
            build_appointment(BookingRequest(**booking_payload))
        )
        booking_payload["notes"] = "Prefers white gold"
        with_notes = new_booking_notification_template(
            build_appointment(BookingRequest(**booking_payload))
        )

        assert "Notes:" not in without_notes
        assert "<strong>Notes:</strong> Prefers white gold" in with_notes

    def test_empty_cart(self, booking_payload):
        booking_payload["cartItems"] = []
        mjml = new_booking_notification_template(build_appointment(BookingRequest(**booking_payload)))

        assert "No items selected for consultation." in mjml
        assert "Grand Total" not in mjml

    def test_escapes_customer_input(self, booking_payload):
        booking_payload["name"] = "<script>alert(1)</script>"
        mjml = new_booking_notification_template(build_appointment(BookingRequest(**booking_payload)))

        assert "<script>" not in mjml
        assert "&lt;script&gt;" in mjml


def test_booking_confirmation():
    mjml = booking_confirmation_template(name="Ana", date="2024-03-05", time="14:30")

    assert "Thank You for Your Booking!" in mjml
    assert "Dear Ana," in mjml
    assert "<strong>03/05/2024</strong> at <strong>14:30</strong>" in mjml
    assert "Your Jewelry Team" in mjml


def test_booking_confirmation_compiles_to_html():
    html = compile_mjml_to_html(booking_confirmation_template(name="Ana", date="2024-03-05", time="14:30"))

    assert "<html" in html
    assert "Thank You for Your Booking!" in html
