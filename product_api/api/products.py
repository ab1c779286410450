"""
Products API Endpoints
Handles product catalog CRUD and the two derived lookups

Responses are the bare entities (or lists of them); validation errors are
a field -> message object with status 400.
"""
import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Path, Query, Response, status

from product_api.core.database import MAX_ENTITY_ID
from product_api.core.dependencies import get_product_service
from product_api.core.exceptions import EntityNotFoundError, EntityValidationError
from product_api.domain.product import Product
from product_api.domain.validation import parse_product
from product_api.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_product(service: ProductService, product_id: int) -> Product:
    product = service.get_product_by_id(product_id)
    if product is None:
        raise EntityNotFoundError("Product", product_id)
    return product


@router.get("", response_model=List[Product])
def get_products(service: ProductService = Depends(get_product_service)):
    """Get all products"""
    return service.get_all_products()


@router.get("/search", response_model=List[Product])
def search_products_by_name(
    name: str = Query(..., description="Substring to look for in the product name"),
    service: ProductService = Depends(get_product_service),
):
    """Get products whose name contains the given text"""
    return service.find_products_by_name(name)


@router.get("/cheaper-than", response_model=List[Product])
def get_products_cheaper_than(
    price: float = Query(..., description="Exclusive upper bound for the price"),
    service: ProductService = Depends(get_product_service),
):
    """Get products with price strictly below the given value"""
    return service.find_products_by_price_less_than(price)


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    service: ProductService = Depends(get_product_service),
):
    """
    Get a single product by ID

    Returns 404 if it doesn't exist
    """
    return _require_product(service, product_id)


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: Any = Body(None),
    service: ProductService = Depends(get_product_service),
):
    """
    Create a product

    Any ``id`` in the body is ignored; the database assigns one.
    """
    data = parse_product(payload)
    product = service.save_product(data.to_product())
    logger.info(f"Product {product.id} created ({product.name})")
    return product


@router.put("/{product_id}", response_model=Product)
def replace_product(
    product_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    payload: Any = Body(None),
    service: ProductService = Depends(get_product_service),
):
    """Replace every field of an existing product"""
    data = parse_product(payload)
    _require_product(service, product_id)

    product = service.save_product(data.to_product(product_id))
    logger.info(f"Product {product_id} replaced")
    return product


@router.patch("/{product_id}", response_model=Product)
def update_product(
    product_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    payload: Any = Body(None),
    service: ProductService = Depends(get_product_service),
):
    """
    Update some fields of an existing product

    The supplied fields are merged into the stored product and the result
    must still pass validation.
    """
    existing = _require_product(service, product_id)
    if not isinstance(payload, dict):
        raise EntityValidationError({"body": "Request body must be a JSON object"})

    merged = existing.model_dump(exclude={"id"})
    merged.update({key: value for key, value in payload.items() if key != "id"})
    data = parse_product(merged)

    product = service.save_product(data.to_product(product_id))
    logger.info(f"Product {product_id} updated: {sorted(set(payload) - {'id'})}")
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int = Path(..., ge=1, le=MAX_ENTITY_ID),
    service: ProductService = Depends(get_product_service),
):
    """
    Delete a product

    Returns 404 if there was nothing to delete
    """
    if not service.delete_product(product_id):
        raise EntityNotFoundError("Product", product_id)

    logger.info(f"Product {product_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
