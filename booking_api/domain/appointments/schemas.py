"""Appointment domain schemas - Pydantic models for validation"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LineItem(BaseModel):
    """
    Product selected in the storefront cart (embedded, not addressable)
    """

    name: str = Field(..., description="Product name")
    image: Optional[str] = Field(None, description="Image URL or path")
    price: float = Field(..., description="Unit price")
    quantity: int = Field(..., ge=0, description="Quantity selected")


class BookingRequest(BaseModel):
    """
    Booking submission from the storefront.

    Required fields are typed optional; their presence is checked by the
    booking validator, which answers a missing field with the generic 400
    envelope. Numbers are accepted for text fields and kept as strings.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    notes: Optional[str] = None
    cartItems: Optional[list[LineItem]] = None


class Appointment(BaseModel):
    """
    Stored appointment record.

    Only `status` may change after creation; assigning any other field
    raises a validation error.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(..., frozen=True)
    name: str = Field(..., frozen=True)
    email: str = Field(..., frozen=True)
    phone: str = Field(..., frozen=True)
    date: str = Field(..., frozen=True)
    time: str = Field(..., frozen=True)
    cartItems: tuple[LineItem, ...] = Field(default_factory=tuple, frozen=True)
    notes: str = Field("", frozen=True)
    status: str = Field("pending", description="pending | confirmed | cancelled | ...")
    createdAt: str = Field(..., frozen=True, description="ISO-8601 UTC timestamp")
    total: float = Field(0, frozen=True, description="Sum of price x quantity at creation")


class StatusUpdate(BaseModel):
    """Schema for replacing an appointment status"""

    status: str


class AppointmentEnvelope(BaseModel):
    success: bool = True
    message: str
    appointment: Appointment


class AppointmentListEnvelope(BaseModel):
    success: bool = True
    appointments: list[Appointment]


class MessageEnvelope(BaseModel):
    success: bool
    message: str


class HealthResponse(BaseModel):
    status: str = "OK"
    message: str = "Server is running"
