"""
Products API: Product Route Handlers
====================================

What:  The five CRUD routes under /api/products.
How:   Each handler takes the path id and/or parsed body, delegates to
       ProductService with the request's session, and returns the result.
       Errors are raised as application exceptions and rendered by the
       global handlers registered in app.main.

Route Inventory:
    GET    /api/products         → list_products   (200, array)
    GET    /api/products/{id}    → get_product     (200 | 404 empty)
    POST   /api/products         → create_product  (200 | 400 field errors)
    PUT    /api/products/{id}    → update_product  (200 | 400 | 404 empty)
    DELETE /api/products/{id}    → delete_product  (200, {message})
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.product import (
    MessageResponse,
    ProductCandidate,
    ProductResponse,
)
from app.services.product_service import product_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Products"])

_SERVER_ERROR = {500: {"description": "Database error", "model": MessageResponse}}
_NOT_FOUND = {404: {"description": "No product with this id (empty body)"}}
_INVALID = {400: {"description": "Field name → validation message"}}


@router.get(
    "/products",
    response_model=List[ProductResponse],
    responses=_SERVER_ERROR,
    summary="List all products",
)
async def list_products(
    db: AsyncSession = Depends(get_db_session),
) -> List[ProductResponse]:
    return await product_service.list_products(db)


@router.get(
    "/products/{product_id}",
    response_model=ProductResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get a single product by ID",
)
async def get_product(
    product_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ProductResponse:
    return await product_service.get_product(db, product_id)


@router.post(
    "/products",
    response_model=ProductResponse,
    responses={**_INVALID, **_SERVER_ERROR},
    summary="Create a product",
    description=(
        "Validates name, brand, category, price and description, stores the "
        "product with a server-side created_at, and returns the stored row."
    ),
)
async def create_product(
    candidate: ProductCandidate,
    db: AsyncSession = Depends(get_db_session),
) -> ProductResponse:
    logger.debug("Create product request: name=%r", candidate.name)
    return await product_service.create_product(db, candidate)


@router.put(
    "/products/{product_id}",
    response_model=ProductResponse,
    responses={**_INVALID, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Replace a product's fields",
    description="Overwrites all five business fields; id and created_at are unchanged.",
)
async def update_product(
    product_id: int,
    candidate: ProductCandidate,
    db: AsyncSession = Depends(get_db_session),
) -> ProductResponse:
    return await product_service.update_product(db, product_id, candidate)


@router.delete(
    "/products/{product_id}",
    response_model=MessageResponse,
    responses=_SERVER_ERROR,
    summary="Delete a product",
    description="Deletes by id and confirms, whether or not the product existed.",
)
async def delete_product(
    product_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await product_service.delete_product(db, product_id)
