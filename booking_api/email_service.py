"""
Booking Email Service using SMTP (Gmail by default) or Resend (fallback)
Provides email functionality using MJML templates for responsive design
"""

import asyncio
import logging
import smtplib
import ssl
from datetime import datetime, timezone
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import parseaddr
from typing import Optional, Union

import resend
from mjml import mjml_to_html

from .config import (
    BUSINESS_EMAIL,
    EMAIL_FROM_ADDRESS,
    EMAIL_PASS,
    EMAIL_USER,
    RESEND_API_KEY,
    SMTP_HOST,
    SMTP_PORT,
    SMTP_USE_TLS,
)
from .domain.appointments.exceptions import EmailDispatchError
from .domain.appointments.schemas import Appointment
from .email_templates import booking_confirmation_template, new_booking_notification_template

logger = logging.getLogger(__name__)

# Initialize Resend as fallback
resend.api_key = RESEND_API_KEY


def _as_list(value: Union[str, list[str], None]) -> list[str]:
    if not value:
        return []
    return [value] if isinstance(value, str) else list(value)


def smtp_configured() -> bool:
    """Whether SMTP credentials are available"""
    return bool(EMAIL_USER and EMAIL_PASS)


def send_via_smtp(
    to: list[str],
    subject: str,
    html_content: str,
    from_address: str,
    cc: Optional[list[str]] = None,
) -> dict:
    """Send email through the configured SMTP account"""
    cc = cc or []
    try:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = from_address
        msg["To"] = ", ".join(to)
        if cc:
            msg["Cc"] = ", ".join(cc)

        msg.attach(MIMEText(html_content, "html"))

        if SMTP_PORT == 465:
            context = ssl.create_default_context()
            server = smtplib.SMTP_SSL(SMTP_HOST, SMTP_PORT, context=context, timeout=30)
        else:
            server = smtplib.SMTP(SMTP_HOST, SMTP_PORT, timeout=30)
            if SMTP_USE_TLS:
                context = ssl.create_default_context()
                server.starttls(context=context)

        try:
            server.login(EMAIL_USER, EMAIL_PASS)
            server.sendmail(parseaddr(from_address)[1], to + cc, msg.as_string())
        finally:
            server.quit()

        logger.info(f"✅ SMTP email sent successfully via {SMTP_HOST}")
        return {"id": f"smtp-{datetime.now(timezone.utc).timestamp()}", "success": True}

    except Exception as e:
        logger.error(f"❌ SMTP send failed: {e}")
        raise EmailDispatchError() from e


def compile_mjml_to_html(mjml_content: str) -> str:
    """Compile MJML template to production-ready HTML"""
    try:
        result = mjml_to_html(mjml_content)
        # mjml_to_html returns a dict with 'html' and 'errors' keys
        if isinstance(result, dict):
            if result.get("errors"):
                logger.warning(f"MJML compilation warnings: {result['errors']}")
            return result.get("html", "")
        return str(result)
    except Exception as e:
        logger.error(f"MJML compilation error: {e}")
        raise EmailDispatchError() from e


async def send_email(
    to: Union[str, list[str]],
    subject: str,
    mjml_content: str,
    cc: Union[str, list[str], None] = None,
    from_address: Optional[str] = None,
) -> dict:
    """
    Send an email using SMTP (if configured) or Resend (fallback)

    Args:
        to: Recipient email(s)
        subject: Email subject line
        mjml_content: MJML template content (will be compiled to HTML)
        cc: Optional carbon-copy recipient(s)
        from_address: Optional custom from address

    Returns:
        Send response dict

    Raises:
        EmailDispatchError: If no transport is configured or delivery fails
    """
    html_content = compile_mjml_to_html(mjml_content)

    recipients = _as_list(to)
    cc_recipients = _as_list(cc)
    sender = from_address or EMAIL_FROM_ADDRESS

    if smtp_configured():
        try:
            logger.info(f"📧 Sending email via SMTP: {SMTP_HOST}")
            return await asyncio.to_thread(
                send_via_smtp,
                to=recipients,
                subject=subject,
                html_content=html_content,
                from_address=sender,
                cc=cc_recipients,
            )
        except EmailDispatchError as e:
            if not RESEND_API_KEY:
                raise
            logger.warning(f"⚠️ SMTP failed, falling back to Resend: {e.__cause__}")

    if not RESEND_API_KEY:
        logger.error("❌ No email service configured - SMTP credentials and RESEND_API_KEY missing")
        raise EmailDispatchError()

    try:
        logger.info(f"📧 Sending email via Resend to: {recipients}")
        email_data = {
            "from": sender,
            "to": recipients,
            "subject": subject,
            "html": html_content,
        }
        if cc_recipients:
            email_data["cc"] = cc_recipients

        response = resend.Emails.send(email_data)
        logger.info(f"✅ Email sent successfully via Resend: {response}")
        return response
    except Exception as e:
        logger.error(f"❌ Email send error to {recipients}: {e}")
        raise EmailDispatchError() from e


# ============================================
# Booking Emails
# ============================================


async def send_new_booking_notification(appointment: Appointment) -> dict:
    """Notify the business inbox of a new booking, copying the customer"""
    if not BUSINESS_EMAIL:
        logger.error("❌ BUSINESS_EMAIL is not configured")
        raise EmailDispatchError()

    return await send_email(
        to=BUSINESS_EMAIL,
        subject=f"New Appointment Booking - {appointment.name}",
        mjml_content=new_booking_notification_template(appointment),
        cc=appointment.email,
    )


async def send_booking_confirmation(appointment: Appointment) -> dict:
    """Send booking received confirmation to the customer"""
    return await send_email(
        to=appointment.email,
        subject="Appointment Booking Confirmation",
        mjml_content=booking_confirmation_template(
            name=appointment.name,
            date=appointment.date,
            time=appointment.time,
        ),
    )
