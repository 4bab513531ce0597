from typing import List
from fastapi import APIRouter, Depends

from app.core.dependencies import get_product_service
from app.services.product import ProductService

from app.models.product import (
    ProductCreate,
    ProductCreated,
    ProductRead,
    ProductUpdate,
)
from app.models.response import ErrorResponse, MessageResponse

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}
FAILURE = {500: {"model": ErrorResponse}}


@router.get(
    "",
    response_model=List[ProductRead],
    responses=FAILURE,
    summary="List Products",
    tags=["Products"]
)
def list_products(
    service: ProductService = Depends(get_product_service)
):
    """
    Returns every product, oldest first.
    """
    return service.list_products()


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    responses={**NOT_FOUND, **FAILURE},
    summary="Get Product",
    tags=["Products"]
)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    return service.get_product(product_id)


@router.post(
    "",
    response_model=ProductCreated,
    responses=FAILURE,
    summary="Create Product",
    tags=["Products"]
)
def create_product(
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """
    Adds a product. `description` and `supplier_id` default to null.
    """
    product_id = service.create_product(payload)
    return ProductCreated(message="Product added", productId=product_id)


@router.put(
    "/{product_id}",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **FAILURE},
    summary="Replace Product",
    tags=["Products"]
)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """
    Overwrites all fields of the product. Optional fields left out of the
    body are cleared.
    """
    service.update_product(product_id, payload)
    return MessageResponse(message="Product updated")


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **FAILURE},
    summary="Delete Product",
    tags=["Products"]
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    service.delete_product(product_id)
    return MessageResponse(message="Product deleted")
