"""Main FastAPI Application

Wires middleware, global exception handlers, the OTP purge task and the
API routers from `presentation`.

Run locally for development with:

    uvicorn workpass.main:app --reload

Keep application logic in `application`, `core`, and `infrastructure`
to preserve a clean architecture.
"""
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from workpass.core.config import settings
from workpass.core.database import init_db, close_db, health_check
from workpass.core.logging_config import configure_logging
from workpass.core.exceptions import (
    DomainException,
    AuthenticationException,
)
from workpass.infrastructure.services.otp_purge_task import OtpPurgeTask
from workpass.presentation.middleware import RequestTimeoutMiddleware
from workpass.presentation.api.v1.dependencies import limiter
from workpass.presentation.api.v1.endpoints import (
    activity_router,
    auth_router,
    credentials_router,
    dashboard_router,
    job_applications_router,
    jobs_router,
    otp_router,
    profile_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    configure_logging()
    logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT})...")

    await init_db()
    logger.info("Database initialized")

    purge_task = OtpPurgeTask()
    if settings.OTP_PURGE_ENABLED:
        purge_task.start()

    yield

    # Shutdown
    logger.info("Shutting down gracefully...")
    await purge_task.stop()
    await close_db()
    logger.info("Database connections closed")


# Initialize FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Construction worker credentials, jobs and verification",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)


# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Rate limiting
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# Outermost: a timed-out request is cancelled all the way down
app.add_middleware(RequestTimeoutMiddleware, timeout_seconds=settings.REQUEST_TIMEOUT_SECONDS)


# Global Exception Handlers
@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException):
    """Report domain errors with the status each error type declares"""
    if exc.status_code >= 500:
        logger.opt(exception=exc).error(f"Storage error on {request.url.path}: {str(exc)}")
    else:
        logger.warning(f"Domain exception: {str(exc)}")

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationException) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_response(), headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and parameters are client errors"""
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())}
    )


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(f"Rate limit exceeded for {request.client.host if request.client else 'unknown'}")
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"detail": "Rate limit exceeded. Please try again later."}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler"""
    logger.opt(exception=exc).error(f"Unhandled exception: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )


# Include API routes
for router, tag in (
    (auth_router, "Authentication"),
    (profile_router, "Profile"),
    (credentials_router, "Credentials"),
    (jobs_router, "Jobs"),
    (job_applications_router, "Job Applications"),
    (dashboard_router, "Dashboard"),
    (activity_router, "Activity"),
    (otp_router, "OTP"),
):
    app.include_router(router, prefix="/api", tags=[tag])


# Uploaded credential documents
Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


@app.get("/health")
async def health():
    """Health check endpoint"""
    database_ok = await health_check()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "ok" if database_ok else "unavailable",
        "version": app.version,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "workpass.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
