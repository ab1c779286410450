"""
Users API Endpoints
CRUD for application users, same shape as the products endpoints
"""
import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Path, Query, Response, status

from product_api.core.database import MAX_ENTITY_ID
from product_api.core.dependencies import get_user_service
from product_api.core.exceptions import EntityNotFoundError, EntityValidationError
from product_api.domain.app_user import AppUser, normalize_email
from product_api.domain.validation import parse_app_user
from product_api.services.app_user_service import AppUserService

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_user(service: AppUserService, user_id: int) -> AppUser:
    user = service.get_user_by_id(user_id)
    if user is None:
        raise EntityNotFoundError("AppUser", user_id)
    return user


@router.get("", response_model=List[AppUser])
def get_users(service: AppUserService = Depends(get_user_service)):
    """Get all users"""
    return service.get_all_users()


@router.get("/by-email", response_model=AppUser)
def get_user_by_email(
    email: str = Query(..., description="Exact email address"),
    service: AppUserService = Depends(get_user_service),
):
    """Look up a user by email; the domain part is matched case-insensitively"""
    user = service.find_user_by_email(normalize_email(email))
    if user is None:
        raise EntityNotFoundError("AppUser", email)
    return user


@router.get("/{user_id}", response_model=AppUser)
def get_user(
    user_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    service: AppUserService = Depends(get_user_service),
):
    return _require_user(service, user_id)


@router.post("", response_model=AppUser, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: Any = Body(None),
    service: AppUserService = Depends(get_user_service),
):
    data = parse_app_user(payload)
    user = service.save_user(data.to_user())
    logger.info(f"AppUser {user.id} created")
    return user


@router.put("/{user_id}", response_model=AppUser)
def replace_user(
    user_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    payload: Any = Body(None),
    service: AppUserService = Depends(get_user_service),
):
    data = parse_app_user(payload)
    _require_user(service, user_id)

    user = service.save_user(data.to_user(user_id))
    logger.info(f"AppUser {user_id} replaced")
    return user


@router.patch("/{user_id}", response_model=AppUser)
def update_user(
    user_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    payload: Any = Body(None),
    service: AppUserService = Depends(get_user_service),
):
    """Merge the supplied fields into the stored user and re-validate"""
    existing = _require_user(service, user_id)
    if not isinstance(payload, dict):
        raise EntityValidationError({"body": "Request body must be a JSON object"})

    merged = existing.model_dump(exclude={"id"})
    merged.update({key: value for key, value in payload.items() if key != "id"})
    data = parse_app_user(merged)

    user = service.save_user(data.to_user(user_id))
    logger.info(f"AppUser {user_id} updated")
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    service: AppUserService = Depends(get_user_service),
):
    if not service.delete_user(user_id):
        raise EntityNotFoundError("AppUser", user_id)

    logger.info(f"AppUser {user_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
