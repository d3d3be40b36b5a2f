"""Customer endpoints."""

from fastapi import APIRouter, Depends

from invoicebuddy.api.dependencies import get_customers
from invoicebuddy.application.dto import CustomerRequest, ErrorResponse, SuccessResponse
from invoicebuddy.core.entities import Customer
from invoicebuddy.core.services import EntityService

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=list[Customer])
async def list_customers(
    service: EntityService[Customer] = Depends(get_customers),
) -> list[Customer]:
    """List all customers in insertion order."""
    return await service.list_all()


@router.post(
    "",
    response_model=Customer,
    responses={500: {"model": ErrorResponse}},
)
async def create_customer(
    request: CustomerRequest,
    service: EntityService[Customer] = Depends(get_customers),
) -> Customer:
    """Create a customer. The server assigns id and createdAt."""
    return await service.create(request.to_fields())


@router.put(
    "/{customer_id}",
    response_model=Customer,
    responses={404: {"model": ErrorResponse}},
)
async def update_customer(
    customer_id: str,
    request: CustomerRequest,
    service: EntityService[Customer] = Depends(get_customers),
) -> Customer:
    """Merge the sent fields into an existing customer."""
    return await service.update(customer_id, request.to_fields())


@router.delete("/{customer_id}", response_model=SuccessResponse)
async def delete_customer(
    customer_id: str,
    service: EntityService[Customer] = Depends(get_customers),
) -> SuccessResponse:
    """
    Delete a customer.

    Succeeds even if the id is unknown. Invoices that reference the
    customer are left as they are.
    """
    await service.delete(customer_id)
    return SuccessResponse()
