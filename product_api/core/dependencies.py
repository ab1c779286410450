"""
FastAPI dependencies wiring routers to services

Usage:
    @router.get("/")
    def list_products(service: ProductService = Depends(get_product_service)):
        ...

Tests override ``get_db`` or the service dependencies directly through
``app.dependency_overrides``.
"""
from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from product_api.core.config import settings
from product_api.core.database import get_db
from product_api.core.session import HttpSession, get_session_store
from product_api.repositories.app_user_repository import SqlAlchemyAppUserRepository
from product_api.repositories.product_repository import SqlAlchemyProductRepository
from product_api.services.app_user_service import AppUserService
from product_api.services.product_service import ProductService
from product_api.services.session_store import SessionStore


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(SqlAlchemyProductRepository(db))


def get_user_service(db: Session = Depends(get_db)) -> AppUserService:
    return AppUserService(SqlAlchemyAppUserRepository(db))


def get_http_session(
    request: Request,
    response: Response,
    store: SessionStore = Depends(get_session_store),
) -> HttpSession:
    return HttpSession(
        store,
        response,
        cookie_name=settings.SESSION_COOKIE_NAME,
        requested_id=request.cookies.get(settings.SESSION_COOKIE_NAME),
    )
