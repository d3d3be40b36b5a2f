"""Product catalog endpoints."""

from fastapi import APIRouter, Depends

from invoicebuddy.api.dependencies import get_products
from invoicebuddy.application.dto import ErrorResponse, ProductRequest, SuccessResponse
from invoicebuddy.core.entities import Product
from invoicebuddy.core.services import EntityService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=list[Product])
async def list_products(
    service: EntityService[Product] = Depends(get_products),
) -> list[Product]:
    return await service.list_all()


@router.post("", response_model=Product, responses={500: {"model": ErrorResponse}})
async def create_product(
    request: ProductRequest,
    service: EntityService[Product] = Depends(get_products),
) -> Product:
    return await service.create(request.to_fields())


@router.put(
    "/{product_id}",
    response_model=Product,
    responses={404: {"model": ErrorResponse}},
)
async def update_product(
    product_id: str,
    request: ProductRequest,
    service: EntityService[Product] = Depends(get_products),
) -> Product:
    """Merge the sent fields into a product. Existing invoices keep their price snapshots."""
    return await service.update(product_id, request.to_fields())


@router.delete("/{product_id}", response_model=SuccessResponse)
async def delete_product(
    product_id: str,
    service: EntityService[Product] = Depends(get_products),
) -> SuccessResponse:
    await service.delete(product_id)
    return SuccessResponse()
