"""
Pydantic schemas for checkout and sales history.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from gspro.models.sale import Sale
from gspro.services.cart import PAYMENT_LABELS
from gspro.services.formatting import format_brl, format_datetime_br


PaymentMethod = Literal["dinheiro", "cartao", "pix"]


class CheckoutItemRequest(BaseModel):
    product_id: str = Field(..., description="Product to sell")
    quantity: float = Field(default=1, gt=0, description="Quantity in the product's unit")


class CheckoutRequest(BaseModel):
    """
    Cart submitted by the point-of-sale screen.

    ``payment_method`` is optional at the schema level so the API can
    answer with the same message the sales screen shows.
    """
    items: List[CheckoutItemRequest] = Field(default_factory=list)
    payment_method: Optional[str] = Field(default=None, description="dinheiro, cartao or pix")
    client_id: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [
                    {"product_id": "0b7f...", "quantity": 12.5},
                    {"product_id": "5c1e...", "quantity": 1},
                ],
                "payment_method": "pix",
                "client_id": None,
            }
        }
    )


class SaleItemResponse(BaseModel):
    id: str
    product_id: str
    product_name: Optional[str] = None
    quantity: float
    unit_price: float
    line_total: float


class SaleResponse(BaseModel):
    id: str
    client_id: Optional[str] = None
    client_name: Optional[str] = None
    seller_id: Optional[str] = None
    seller_name: Optional[str] = None
    total: float
    total_display: str
    payment_method: PaymentMethod
    payment_label: str
    status: Literal["concluida", "cancelada"]
    sold_at: datetime
    sold_at_display: str
    items: List[SaleItemResponse] = Field(default_factory=list)

    @classmethod
    def from_sale(cls, sale: Sale) -> "SaleResponse":
        return cls(
            id=sale.id,
            client_id=sale.client_id,
            client_name=sale.client.name if sale.client is not None else None,
            seller_id=sale.seller_id,
            seller_name=sale.seller.name if sale.seller is not None else None,
            total=sale.total,
            total_display=format_brl(sale.total),
            payment_method=sale.payment_method,
            payment_label=PAYMENT_LABELS[sale.payment_method],
            status=sale.status,
            sold_at=sale.sold_at,
            sold_at_display=format_datetime_br(sale.sold_at),
            items=[
                SaleItemResponse(
                    id=item.id,
                    product_id=item.product_id,
                    product_name=item.product.name if item.product is not None else None,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    line_total=item.line_total,
                )
                for item in sale.items
            ],
        )


class CheckoutResponse(BaseModel):
    sale: SaleResponse
    message: str
