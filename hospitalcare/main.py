import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from hospitalcare.auth import hash_password
from hospitalcare.config import Settings, get_settings
from hospitalcare.exceptions import HospitalCareError
from hospitalcare.logging_config import configure_logging
from hospitalcare.routers import appointments, beds, dashboard, prescriptions, schedules, users
from hospitalcare.routers import auth as auth_router
from hospitalcare.schemas import UserCreate
from hospitalcare.storage import Storage, build_storage
from hospitalcare.validation import format_errors

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"


async def seed_demo_users(storage: Storage):
    """Create a demo doctor, nurse and patient if they don't exist. Idempotent."""
    demo_users = [
        {"username": "dr.smith", "email": "smith@hospital.test", "full_name": "Dr. Alice Smith",
         "role": "doctor", "specialization": "Cardiology"},
        {"username": "nurse.jones", "email": "jones@hospital.test", "full_name": "Nurse Ben Jones",
         "role": "nurse"},
        {"username": "patient.doe", "email": "doe@hospital.test", "full_name": "John Doe",
         "role": "patient"},
    ]
    for u in demo_users:
        if not await storage.get_user_by_username(u["username"]):
            await storage.create_user(UserCreate(password=hash_password(DEMO_PASSWORD), **u))
            logger.info("Seeded demo user %s", u["username"])


async def no_store_api_responses(request: Request, call_next):
    """API responses carry patient records and session cookies; no browser or proxy may keep them."""
    response = await call_next(request)
    if request.url.path.startswith("/api"):
        response.headers["Cache-Control"] = "no-store"
        response.headers["Pragma"] = "no-cache"
    return response


def _message(status_code: int, message) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HospitalCareError)
    async def hospitalcare_error(request: Request, exc: HospitalCareError):
        return _message(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        return _message(400, format_errors(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return _message(exc.status_code, exc.detail)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _message(500, "Internal server error")


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    storage = storage or build_storage(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: prepare the store, then optional demo accounts
        await storage.startup()
        if settings.seed_demo_users:
            await seed_demo_users(storage)
        logger.info("HospitalCare started with %s storage", storage.name)
        yield
        # Shutdown
        await storage.shutdown()

    app = FastAPI(
        title="HospitalCare",
        description="Hospital operations API: appointments, beds, prescriptions and doctor schedules",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(no_store_api_responses)
    register_exception_handlers(app)

    app.include_router(auth_router.router, prefix="/api", tags=["Auth"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(appointments.router, prefix="/api/appointments", tags=["Appointments"])
    app.include_router(beds.router, prefix="/api/beds", tags=["Beds"])
    app.include_router(prescriptions.router, prefix="/api/prescriptions", tags=["Prescriptions"])
    app.include_router(schedules.router, prefix="/api/schedules", tags=["Schedules"])
    app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])

    @app.get("/api/health")
    async def health_check():
        return {"status": "healthy", "service": "hospitalcare"}

    return app


app = create_app()
