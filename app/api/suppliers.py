from typing import List
from fastapi import APIRouter, Depends

from app.core.dependencies import get_supplier_service
from app.services.supplier import SupplierService

from app.models.supplier import (
    SupplierCreate,
    SupplierCreated,
    SupplierRead,
    SupplierUpdate,
)
from app.models.response import ErrorResponse, MessageResponse


router = APIRouter()


@router.get(
    "",
    response_model=List[SupplierRead],
    responses={500: {"model": ErrorResponse}},
    summary="List Suppliers",
    tags=["Suppliers"]
)
def list_suppliers(
    service: SupplierService = Depends(get_supplier_service)
):
    return service.list_suppliers()


@router.get(
    "/{supplier_id}",
    response_model=SupplierRead,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get Supplier",
    tags=["Suppliers"]
)
def get_supplier(
    supplier_id: int,
    service: SupplierService = Depends(get_supplier_service)
):
    return service.get_supplier(supplier_id)


@router.post(
    "",
    response_model=SupplierCreated,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Register a new Supplier",
    description=(
        "Adds a supplier. Provide `supplier_id` to choose the key yourself; "
        "otherwise the database assigns one. A key that is already taken "
        "is rejected with 400."
    ),
    tags=["Suppliers"]
)
def create_supplier(
    payload: SupplierCreate,
    service: SupplierService = Depends(get_supplier_service)
):
    supplier_id = service.create_supplier(payload)
    return SupplierCreated(message="Supplier added", supplierId=supplier_id)


@router.put(
    "/{supplier_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Replace Supplier",
    tags=["Suppliers"]
)
def update_supplier(
    supplier_id: int,
    payload: SupplierUpdate,
    service: SupplierService = Depends(get_supplier_service)
):
    """
    Overwrites name and contact details. A missing `contact_info` clears it.
    """
    service.update_supplier(supplier_id, payload)
    return MessageResponse(message="Supplier updated")


@router.delete(
    "/{supplier_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Delete Supplier",
    tags=["Suppliers"]
)
def delete_supplier(
    supplier_id: int,
    service: SupplierService = Depends(get_supplier_service)
):
    """
    Removes a supplier from the registry.

    **Constraints:**
    - The database refuses the delete while products still reference the supplier.
    """
    service.delete_supplier(supplier_id)
    return MessageResponse(message="Supplier deleted")
