import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import ALLOWED_ORIGINS, BUSINESS_EMAIL, LOG_LEVEL, PORT, RESEND_API_KEY
from .domain.appointments.exceptions import AppointmentError
from .domain.appointments.repository import AppointmentStore
from .domain.appointments.router import router as appointments_router
from .domain.appointments.schemas import HealthResponse
from .email_service import smtp_configured

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    app.state.appointment_store = AppointmentStore()

    if not smtp_configured() and not RESEND_API_KEY:
        logger.warning(
            "No email transport configured - set EMAIL_USER/EMAIL_PASS or RESEND_API_KEY. "
            "Bookings will be stored but answered with an error."
        )
    if not BUSINESS_EMAIL:
        logger.warning("BUSINESS_EMAIL not set - new booking notifications cannot be delivered")

    yield
    logger.info(
        f"Application shutting down, discarding {len(app.state.appointment_store)} appointment(s)"
    )


app = FastAPI(title="Appointment Booking API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(AppointmentError)
async def appointment_exception_handler(request: Request, exc: AppointmentError):
    """Render domain errors in the {success, message} envelope"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors in the same envelope as missing fields"""
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Invalid request body"},
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise


# CORS Configuration
logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials="*" not in ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Routes
app.include_router(appointments_router)


@app.get("/api/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="OK", message="Server is running")


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Server running on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
