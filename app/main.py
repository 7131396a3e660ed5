# app/main.py
"""
FastAPI application entry point.
Includes CORS, request timing, domain error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware
from app.routers import trucks, users, health
from app.database import SessionLocal, create_tables
from app.config import settings
from app.services.exceptions import InvalidSortError, InvalidTruckStatusError, TruckNotFoundError
from app.services.seed_service import seed_default_users
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Fleet Management API",
    description="Truck fleet CRUD with paginated listing, behind HTTP Basic auth.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS ─────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Domain Exception Handlers ────────────────────────────────────────────────
@app.exception_handler(TruckNotFoundError)
async def truck_not_found_handler(request: Request, exc: TruckNotFoundError):
    return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(InvalidTruckStatusError)
@app.exception_handler(InvalidSortError)
async def bad_request_handler(request: Request, exc: Exception):
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return PlainTextResponse(
        f"An unexpected error occurred: {exc}",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(trucks.router, prefix="/api/v1", tags=["🚚 Trucks"])
app.include_router(users.router,  prefix="/api/v1", tags=["👤 Users"])
app.include_router(health.router, prefix="/api/v1", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Fleet Management backend starting up...")
    create_tables()
    logger.info("✅ Database tables ready")

    if settings.SEED_DEFAULT_USERS:
        db = SessionLocal()
        try:
            seed_default_users(db)
        finally:
            db.close()
        logger.info("✅ Default roles and users present")

    logger.info(f"🌐 Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Fleet Management backend shutting down...")
