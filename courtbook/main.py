"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from courtbook.api import bookings, coupons, courts, payments, users
from courtbook.core.config import settings
from courtbook.core.database import init_db
from courtbook.core.exceptions import DomainException

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting court reservation backend")
    logger.info(f"Debug mode: {settings.DEBUG}")
    logger.info(f"Booking transition table enforced: {settings.ENFORCE_BOOKING_TRANSITIONS}")

    await init_db()

    yield

    # Shutdown
    logger.info("Shutting down court reservation backend")


# Create FastAPI app
app = FastAPI(
    title="Court Reservations",
    description="Court bookings, coupons, roles and payment reconciliation",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid {field}: {first.get('msg')}" if field else "Invalid request body"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Include routers
app.include_router(courts.router)
app.include_router(bookings.router)
app.include_router(users.router)
app.include_router(coupons.router)
app.include_router(payments.router)


@app.get("/")
async def root():
    return {"message": "Court reservation backend is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
