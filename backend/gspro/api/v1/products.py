"""
Inventory endpoints: products, stock adjustments and the inventory summary.
"""

import logging
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query, status

from gspro.api.dependencies import CurrentActiveUser, DatabaseSession, http_error
from gspro.core.errors import ConflictError, DomainError
from gspro.repositories.product import ProductRepository
from gspro.schemas.product import (
    InventorySummaryResponse,
    ProductCreateRequest,
    ProductKind,
    ProductResponse,
    ProductUpdateRequest,
    StockAdjustmentRequest,
    StockStatus,
)
from gspro.services.inventory import adjust_stock, filter_by_status, summarize_inventory

logger = logging.getLogger(__name__)

router = APIRouter(tags=["inventory"])


def get_product_repository(db: DatabaseSession) -> ProductRepository:
    return ProductRepository(db)


ProductRepo = Annotated[ProductRepository, Depends(get_product_repository)]


@router.get(
    "/products",
    response_model=List[ProductResponse],
    summary="List products",
    description="Products ordered by name, with search by name/SKU and kind/status filters.",
)
async def list_products(
    repo: ProductRepo,
    current_user: CurrentActiveUser,
    search: Optional[str] = Query(default=None, max_length=100),
    kind: Optional[ProductKind] = None,
    stock: Optional[StockStatus] = Query(default=None, alias="status"),
) -> List[ProductResponse]:
    products = await repo.list_products(search=search, kind=kind)
    if stock:
        products = filter_by_status(products, stock)
    return [ProductResponse.model_validate(p) for p in products]


@router.get(
    "/inventory/summary",
    response_model=InventorySummaryResponse,
    summary="Inventory summary",
    description="Item count, total quantity, items in alert and stock value at cost.",
)
async def inventory_summary(
    repo: ProductRepo,
    current_user: CurrentActiveUser,
) -> InventorySummaryResponse:
    summary = summarize_inventory(await repo.list_products())
    return InventorySummaryResponse(**summary.__dict__)


@router.post(
    "/products",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
)
async def create_product(
    request: ProductCreateRequest,
    repo: ProductRepo,
    current_user: CurrentActiveUser,
) -> ProductResponse:
    """
    Raises:
        HTTPException 409: If the SKU is already registered
    """
    try:
        product = await repo.create_product(**request.model_dump())
    except DomainError as exc:
        raise http_error(exc)

    logger.info("Product created", extra={"product_id": product.id, "user_id": current_user.id})
    return ProductResponse.model_validate(product)


@router.get("/products/{product_id}", response_model=ProductResponse, summary="Get product by ID")
async def get_product(
    product_id: str,
    repo: ProductRepo,
    current_user: CurrentActiveUser,
) -> ProductResponse:
    try:
        product = await repo.get_or_raise(product_id)
    except DomainError as exc:
        raise http_error(exc)
    return ProductResponse.model_validate(product)


@router.patch("/products/{product_id}", response_model=ProductResponse, summary="Update a product")
async def update_product(
    product_id: str,
    request: ProductUpdateRequest,
    repo: ProductRepo,
    current_user: CurrentActiveUser,
) -> ProductResponse:
    try:
        product = await repo.get_or_raise(product_id)
        product = await repo.update_product(product, request.model_dump(exclude_unset=True))
    except DomainError as exc:
        raise http_error(exc)
    return ProductResponse.model_validate(product)


@router.post(
    "/products/{product_id}/adjust",
    response_model=ProductResponse,
    summary="Adjust stock",
    description="Add a signed quantity to the stock on hand (purchases, losses, counts).",
)
async def adjust_product_stock(
    product_id: str,
    request: StockAdjustmentRequest,
    repo: ProductRepo,
    current_user: CurrentActiveUser,
) -> ProductResponse:
    try:
        product = await repo.get_or_raise(product_id)
        adjust_stock(product, request.delta, request.reason)
        await repo.session.flush()
    except DomainError as exc:
        raise http_error(exc)
    return ProductResponse.model_validate(product)


@router.delete(
    "/products/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
)
async def delete_product(
    product_id: str,
    repo: ProductRepo,
    current_user: CurrentActiveUser,
) -> None:
    """
    Raises:
        HTTPException 404: If the product does not exist
        HTTPException 409: If the product appears in recorded sales
    """
    try:
        product = await repo.get_or_raise(product_id)
        if await repo.has_sales(product_id):
            raise ConflictError(f"Produto com vendas registradas não pode ser excluído: {product.name}")
        await repo.delete(product)
    except DomainError as exc:
        raise http_error(exc)
