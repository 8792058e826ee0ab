import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Server
PORT = int(os.getenv("PORT", "3001"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS - comma separated list of storefront origins, "*" allows any
ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()
]

# SMTP account used to send booking emails (Gmail app password by default)
EMAIL_USER = os.getenv("EMAIL_USER")
EMAIL_PASS = os.getenv("EMAIL_PASS")
SMTP_HOST = os.getenv("SMTP_HOST", "smtp.gmail.com")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
# Ignored on port 465, which always uses implicit TLS
SMTP_USE_TLS = os.getenv("SMTP_USE_TLS", "true").lower() == "true"

# Resend Email Configuration (fallback)
RESEND_API_KEY = os.getenv("RESEND_API_KEY")
EMAIL_FROM_ADDRESS = os.getenv("EMAIL_FROM_ADDRESS", EMAIL_USER)

# Inbox that receives new booking notifications
BUSINESS_EMAIL = os.getenv("BUSINESS_EMAIL")
BUSINESS_SIGNATURE = os.getenv("BUSINESS_SIGNATURE", "Your Jewelry Team")
