"""Shared test fixtures."""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from booking_api.domain.appointments.repository import AppointmentStore
from booking_api.domain.appointments.schemas import BookingRequest
from booking_api.main import app


@pytest.fixture
def booking_payload() -> dict:
    """Valid storefront booking submission."""
    return {
        "name": "A",
        "email": "a@x.com",
        "phone": "555",
        "date": "2024-01-01",
        "time": "10:00",
        "cartItems": [
            {"name": "Ring", "image": "/img/ring.jpg", "price": 100, "quantity": 2},
        ],
    }


@pytest.fixture
def booking_request(booking_payload) -> BookingRequest:
    return BookingRequest(**booking_payload)


@pytest.fixture
def store() -> AppointmentStore:
    return AppointmentStore()


@pytest.fixture
def client():
    """Test client with a fresh appointment store per test."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def app_store(client) -> AppointmentStore:
    """The store the running test application writes to."""
    return client.app.state.appointment_store


@pytest.fixture
def mock_mailer():
    """Replace both booking emails so no transport is touched."""
    with patch(
        "booking_api.email_service.send_new_booking_notification", new_callable=AsyncMock
    ) as notify, patch(
        "booking_api.email_service.send_booking_confirmation", new_callable=AsyncMock
    ) as confirm:
        yield notify, confirm
