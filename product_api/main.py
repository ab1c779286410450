"""
Product Catalog API - Backend

Assembles the FastAPI application: logging, CORS, exception handlers,
routers, the session store and database initialisation. Run with::

    uvicorn product_api.main:app --reload

or ``python -m product_api``.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables before settings are read
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from product_api.api import products, session, users
from product_api.core.config import settings
from product_api.core.database import check_database, get_engine, init_db
from product_api.core.exceptions import register_exception_handlers
from product_api.core.logging_config import setup_logging
from product_api.services.session_store import SessionStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables before the first request
    init_db()
    logger.info(f"{settings.API_TITLE} {settings.API_VERSION} started")
    yield
    swept = app.state.session_store.sweep_expired()
    logger.info(f"Shutting down ({swept} expired session(s) dropped)")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application

    Returns:
        A configured FastAPI instance with its own SessionStore
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
        debug=settings.API_DEBUG,
        lifespan=lifespan,
    )

    app.state.session_store = SessionStore(
        timeout_seconds=settings.SESSION_TIMEOUT_SECONDS,
        sweep_interval_seconds=settings.SESSION_SWEEP_INTERVAL_SECONDS,
    )

    # Session cookies need credentials, so origins must be explicit
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(products.router, prefix="/api/products", tags=["Products"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(session.router, prefix="/api/session", tags=["Session"])

    @app.get("/")
    def root():
        """Endpoint raíz - Verificación de estado de la API"""
        return {
            "message": settings.API_TITLE,
            "status": "online",
            "version": settings.API_VERSION,
        }

    @app.get("/health")
    def health(bind: Engine = Depends(get_engine)):
        """Health check endpoint para monitoreo - tests database connectivity"""
        database = check_database(bind)
        return {
            "status": "healthy" if database["status"] == "connected" else "degraded",
            "service": "product-api",
            "version": settings.API_VERSION,
            "database": database,
        }

    return app


app = create_app()
