"""
MJML Email Templates
Booking emails using MJML for responsive, cross-client compatibility
"""

from datetime import date as date_type
from typing import Union

from .config import BUSINESS_SIGNATURE
from .domain.appointments.schemas import Appointment, LineItem
from .utils.sanitization import sanitize_string

# Showroom theme colors - Slate/Navy color scheme
THEME = {
    "primary": "#2c3e50",
    "background": "#f8f9fa",
    "card_bg": "#ffffff",
    "text_primary": "#2c3e50",
    "text_secondary": "#333333",
    "border": "#dddddd",
    "row_border": "#eeeeee",
    "table_header": "#f1f1f1",
    "notice_bg": "#e8f4fd",
}


def format_amount(value: Union[int, float]) -> str:
    """Format a price with thousands separators, dropping decimals on whole amounts"""
    if float(value).is_integer():
        return f"${int(value):,}"
    return f"${value:,.2f}"


def format_date(value: str) -> str:
    """Render an ISO date as MM/DD/YYYY, leaving anything else as given"""
    try:
        return date_type.fromisoformat(value[:10]).strftime("%m/%d/%Y")
    except (TypeError, ValueError):
        return value


def get_base_template(title: str, preview_text: str, content_sections: str) -> str:
    """Base MJML template wrapper for all emails"""
    return f"""
    <mjml>
      <mj-head>
        <mj-title>{title}</mj-title>
        <mj-preview>{preview_text}</mj-preview>
        <mj-attributes>
          <mj-all font-family="Arial, sans-serif" />
          <mj-text font-size="16px" line-height="1.6" color="{THEME['text_secondary']}" />
        </mj-attributes>
      </mj-head>
      <mj-body background-color="{THEME['card_bg']}" width="600px">
        <mj-section padding="20px">
          <mj-column>
            {content_sections}
          </mj-column>
        </mj-section>
      </mj-body>
    </mjml>
    """


def _line_item_row(item: LineItem) -> str:
    cell = f"padding: 10px; border-bottom: 1px solid {THEME['row_border']};"
    name = sanitize_string(item.name)
    return f"""
        <tr>
          <td style="{cell}">
            <img src="{sanitize_string(item.image)}" alt="{name}" style="width: 50px; height: 50px; object-fit: cover; border-radius: 4px;" />
          </td>
          <td style="{cell}">{name}</td>
          <td style="{cell}">{format_amount(item.price)}</td>
          <td style="{cell}">{item.quantity}</td>
          <td style="{cell}">{format_amount(item.price * item.quantity)}</td>
        </tr>
    """


def _cart_items_section(appointment: Appointment) -> str:
    if not appointment.cartItems:
        return """
        <mj-section padding="20px 0">
          <mj-column>
            <mj-text>No items selected for consultation.</mj-text>
          </mj-column>
        </mj-section>
        """

    rows = "".join(_line_item_row(item) for item in appointment.cartItems)
    return f"""
    <mj-wrapper border="1px solid {THEME['border']}" border-radius="8px" padding="20px">
      <mj-section padding="0">
        <mj-column>
          <mj-text font-size="22px" font-weight="600" color="{THEME['primary']}" padding="0 0 12px 0">
            Selected Items
          </mj-text>
          <mj-table>
            <tr style="background-color: {THEME['table_header']}; text-align: left;">
              <th style="padding: 10px;">Image</th>
              <th style="padding: 10px;">Product</th>
              <th style="padding: 10px;">Price</th>
              <th style="padding: 10px;">Qty</th>
              <th style="padding: 10px;">Total</th>
            </tr>
            {rows}
          </mj-table>
          <mj-text align="right" font-size="18px" padding="20px 0 0 0">
            <strong>Grand Total: {format_amount(appointment.total)}</strong>
          </mj-text>
        </mj-column>
      </mj-section>
    </mj-wrapper>
    """


def new_booking_notification_template(appointment: Appointment) -> str:
    """New appointment booking notification for the business inbox"""
    name = sanitize_string(appointment.name)

    notes_line = ""
    if appointment.notes:
        notes_line = f"""
            <p><strong>Notes:</strong> {sanitize_string(appointment.notes)}</p>
        """

    return f"""
    <mjml>
      <mj-head>
        <mj-title>New Appointment Booking</mj-title>
        <mj-preview>New Appointment Booking - {name}</mj-preview>
        <mj-attributes>
          <mj-all font-family="Arial, sans-serif" />
          <mj-text font-size="16px" line-height="1.6" color="{THEME['text_secondary']}" />
        </mj-attributes>
      </mj-head>
      <mj-body background-color="{THEME['card_bg']}" width="600px">
        <mj-section padding="20px 20px 0 20px">
          <mj-column>
            <mj-text align="center" font-size="32px" font-weight="600" color="{THEME['primary']}">
              New Appointment Booking
            </mj-text>
          </mj-column>
        </mj-section>

        <!-- Customer Information -->
        <mj-section background-color="{THEME['background']}" border-radius="8px" padding="20px">
          <mj-column>
            <mj-text font-size="22px" font-weight="600" color="{THEME['primary']}" padding="0 0 12px 0">
              Customer Information
            </mj-text>
            <mj-text padding="0">
              <p><strong>Name:</strong> {name}</p>
              <p><strong>Email:</strong> {sanitize_string(appointment.email)}</p>
              <p><strong>Phone:</strong> {sanitize_string(appointment.phone)}</p>
              <p><strong>Appointment Date:</strong> {sanitize_string(format_date(appointment.date))}</p>
              <p><strong>Appointment Time:</strong> {sanitize_string(appointment.time)}</p>
              {notes_line}
            </mj-text>
          </mj-column>
        </mj-section>

        {_cart_items_section(appointment)}

        <mj-section background-color="{THEME['notice_bg']}" border-radius="8px" padding="15px">
          <mj-column>
            <mj-text align="center" color="{THEME['primary']}" padding="0">
              Please contact the customer to confirm the appointment details.
            </mj-text>
          </mj-column>
        </mj-section>
      </mj-body>
    </mjml>
    """


def booking_confirmation_template(name: str, date: str, time: str) -> str:
    """Booking received confirmation for the customer"""
    content = f"""
    <mj-text font-size="32px" font-weight="600" color="{THEME['primary']}">
      Thank You for Your Booking!
    </mj-text>

    <mj-text>
      Dear {sanitize_string(name)},
    </mj-text>

    <mj-text>
      We have received your appointment booking for <strong>{sanitize_string(format_date(date))}</strong> at <strong>{sanitize_string(time)}</strong>.
    </mj-text>

    <mj-text>
      We will contact you soon to confirm your appointment details.
    </mj-text>

    <mj-text>
      If you have any questions, please don't hesitate to reach out.
    </mj-text>

    <mj-text padding-top="24px">
      Best regards,<br/>{sanitize_string(BUSINESS_SIGNATURE)}
    </mj-text>
    """

    return get_base_template(
        title="Appointment Booking Confirmation",
        preview_text="We have received your appointment booking",
        content_sections=content,
    )


__all__ = [
    "get_base_template",
    "new_booking_notification_template",
    "booking_confirmation_template",
    "format_amount",
    "format_date",
    "THEME",
]
