"""
Conexión a base de datos relacional (SQLAlchemy)

Este módulo centraliza el acceso a la base de datos:
- Engine y session factory de SQLAlchemy
- Dependency de FastAPI para obtener una sesión por request
- Creación del esquema al arrancar la aplicación
- Health check de conectividad

Any SQLAlchemy URL works. SQLite is the default; for PostgreSQL install the
``postgres`` extra (psycopg2) and set DATABASE_URL accordingly.
"""
import logging
import time
from typing import Any, Dict, Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import settings

logger = logging.getLogger(__name__)


# ============================================================================
# SQLAlchemy Configuration (for ORM models)
# ============================================================================

def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL

    SQLite connections are shared across FastAPI's threadpool, so
    check_same_thread is disabled. Server databases get pool_pre_ping.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,  # Verificar conexión antes de usar
        pool_size=10,
        max_overflow=20,
    )


# SQLAlchemy Engine
engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

# Session Factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base para modelos
Base = declarative_base()

# Ids are signed 64-bit integers on every supported engine
MAX_ENTITY_ID = 2**63 - 1


def get_engine() -> Engine:
    """FastAPI dependency returning the application engine (used by /health)"""
    return engine


def get_db() -> Iterator[Session]:
    """
    FastAPI dependency para obtener sesión de SQLAlchemy

    Usage:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = None) -> None:
    """
    Create all tables registered on Base

    Models must be imported before this runs so their tables are part of
    Base.metadata.
    """
    from product_api import models  # noqa: F401

    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info(f"Database schema ready ({target.url.get_backend_name()})")


def check_database(bind: Engine = None) -> Dict[str, Any]:
    """
    Run a trivial query and report connectivity

    Returns:
        Dict with status ("connected" / "disconnected"), latency_ms and error
    """
    target = bind or engine
    start = time.time()

    try:
        with target.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {
            "status": "connected",
            "latency_ms": round((time.time() - start) * 1000, 2),
            "error": None,
        }
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        return {
            "status": "disconnected",
            "latency_ms": None,
            "error": str(e),
        }
