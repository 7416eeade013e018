"""
Point-of-sale endpoints: checkout, sales history and cancellation.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query, status

from gspro.api.dependencies import CurrentActiveUser, DatabaseSession, http_error
from gspro.core.errors import DomainError
from gspro.schemas.sale import CheckoutRequest, CheckoutResponse, SaleResponse
from gspro.services.checkout import (
    CheckoutLine,
    CheckoutService,
    receipt_message,
    search_sales,
)

router = APIRouter(tags=["sales"])


def get_checkout_service(db: DatabaseSession) -> CheckoutService:
    return CheckoutService(db)


Checkout = Annotated[CheckoutService, Depends(get_checkout_service)]


@router.post(
    "/sales/checkout",
    response_model=CheckoutResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Finalize a sale",
    description=(
        "Persist the cart as a sale, decrement stock and record the cash entry. "
        "The logged-in user is recorded as the seller."
    ),
)
async def checkout(
    request: CheckoutRequest,
    service: Checkout,
    current_user: CurrentActiveUser,
) -> CheckoutResponse:
    """
    Raises:
        HTTPException 404: Unknown product or client
        HTTPException 409: Not enough stock for some item
        HTTPException 422: Empty cart or missing/invalid payment method
    """
    lines = [CheckoutLine(product_id=item.product_id, quantity=item.quantity) for item in request.items]
    try:
        sale = await service.finalize_sale(
            lines,
            request.payment_method,
            client_id=request.client_id,
            seller_id=current_user.id,
        )
    except DomainError as exc:
        raise http_error(exc)

    return CheckoutResponse(
        sale=SaleResponse.from_sale(sale),
        message=receipt_message(sale.total, sale.payment_method),
    )


@router.get("/sales", response_model=List[SaleResponse], summary="Sales history")
async def list_sales(
    service: Checkout,
    current_user: CurrentActiveUser,
    search: Optional[str] = Query(default=None, max_length=100, description="Sale ID or client name"),
    sale_status: Optional[str] = Query(default=None, alias="status", pattern="^(concluida|cancelada)$"),
    limit: Optional[int] = Query(default=None, ge=1, le=500),
) -> List[SaleResponse]:
    sales = await service.sales.list_sales(status=sale_status)
    sales = search_sales(sales, search)
    if limit is not None:
        sales = sales[:limit]
    return [SaleResponse.from_sale(sale) for sale in sales]


@router.get("/sales/{sale_id}", response_model=SaleResponse, summary="Get sale by ID")
async def get_sale(
    sale_id: str,
    service: Checkout,
    current_user: CurrentActiveUser,
) -> SaleResponse:
    try:
        return SaleResponse.from_sale(await service.sales.get_or_raise(sale_id))
    except DomainError as exc:
        raise http_error(exc)


@router.post("/sales/{sale_id}/cancel", response_model=SaleResponse, summary="Cancel a sale")
async def cancel_sale(
    sale_id: str,
    service: Checkout,
    current_user: CurrentActiveUser,
) -> SaleResponse:
    try:
        sale = await service.cancel_sale(sale_id)
    except DomainError as exc:
        raise http_error(exc)
    return SaleResponse.from_sale(sale)
