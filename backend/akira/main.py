"""
Akira Backend - FastAPI Application

Customer accounts for the Akira e-commerce store: registration, login and
password management.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from akira.config import get_settings
from akira.core.exceptions import AkiraError, UnauthorizedError
from akira.core.logging import configure_logging
from akira.database.connections import close_connections, get_database
from akira.database.registry import create_indexes, seed_roles
from akira.routers import auth, health
from akira.schemas.response import ApiResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging
    - Create indexes
    - Seed default roles

    Shutdown:
    - Close the database connection
    """
    configure_logging()
    logger.info("Starting up Akira Backend...")

    settings = get_settings()
    try:
        db = await get_database()
        await create_indexes(db)
        if settings.seed_default_roles:
            await seed_roles(db)
        logger.info("Database indexes created and roles seeded")
    except Exception as e:
        logger.warning(f"Database initialization warning: {e}")

    yield

    logger.info("Shutting down Akira Backend...")
    await close_connections()
    logger.info("Database connections closed")


def _envelope(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(ApiResponse.error(message)),
        headers=headers,
    )


async def akira_error_handler(request: Request, exc: AkiraError) -> JSONResponse:
    """Render service errors as ERROR envelopes."""
    headers = None
    if isinstance(exc, UnauthorizedError):
        headers = {"WWW-Authenticate": "Bearer"}
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return _envelope(exc.status_code, exc.message, headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 400 ERROR envelopes."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return _envelope(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render unexpected failures as 500 ERROR envelopes."""
    logger.exception(f"{request.method} {request.url.path} raised an unhandled error: {exc}")
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# Create FastAPI application
app = FastAPI(
    title="Akira API",
    description="""
## Akira E-commerce Accounts API

### Features
- **Registration**: Create a customer account with the default `ROLE_USER` role
- **Login**: Exchange email and password for a JWT access token
- **Password update**: Rotate a password after confirming the current one

### Authentication
Protected endpoints expect the token in the `Authorization` header:
```
GET /auth/me
Authorization: Bearer your_jwt_token
```

Obtain a token via `POST /auth/login`.

### Responses
Every response uses the same envelope: `{"message", "status", "data"}` where
`status` is `SUCCESS` or `ERROR`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(AkiraError, akira_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Akira API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
