import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from session_catalog import __version__
from session_catalog.config import Settings, get_settings
from session_catalog.database import build_engine, init_db
from session_catalog.errors import SessionServiceError, StoreError, ValidationError
from session_catalog.middleware import ApiKeyMiddleware
from session_catalog.repository import SessionStore
from session_catalog.routes import sessions

logger = logging.getLogger(__name__)

APP_NAME = "Session Catalog API"


def _format_request_errors(exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        errors.append(f"{location}: {err.get('msg')}")
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def payload_validation_handler(request: Request, exc: ValidationError):
        logger.info("Validation failed for %s %s: %s", request.method, request.url.path, exc.errors)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail, "errors": exc.errors})

    @app.exception_handler(SessionServiceError)
    async def service_error_handler(request: Request, exc: SessionServiceError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = _format_request_errors(exc)
        logger.info("Malformed request %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(status_code=400, content={"detail": "Malformed request", "errors": errors})

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        error = StoreError("Internal server error")
        logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API: gate, routes and error handlers wired in a fixed order"""
    settings = settings or get_settings()
    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s %s", APP_NAME, __version__)
        init_db(engine)
        for route in app.routes:
            methods = getattr(route, "methods", None)
            path = getattr(route, "path", None)
            if path:
                logger.debug("Route %-20s %s", ", ".join(sorted(methods)) if methods else "N/A", path)
        yield
        engine.dispose()
        logger.info("%s shutdown complete", APP_NAME)

    app = FastAPI(title=APP_NAME, version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine

    # Middleware added last runs outermost, so the gate is registered after CORS
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.middleware("http")(ApiKeyMiddleware(settings.api_key))

    app.include_router(sessions.router, tags=["sessions"])

    @app.get("/health")
    def health_check(store: SessionStore = Depends(sessions.get_store)):
        """Liveness plus a store round trip"""
        return {
            "app_name": APP_NAME,
            "version": __version__,
            "status": "healthy",
            "session_count": store.count_all(),
        }

    register_exception_handlers(app)
    return app
