"""
Pydantic schemas for products and inventory.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from gspro.schemas.common import PartialUpdate
from gspro.services.inventory import stock_status


ProductKind = Literal["sucata", "peca"]
ProductUnit = Literal["kg", "un"]
StockStatus = Literal["ok", "baixo", "critico"]


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    sku: Optional[str] = Field(default=None, max_length=64, description="Unique stock code")
    kind: ProductKind = Field(default="peca", description="sucata (scrap) or peca (part)")
    category: Optional[str] = Field(default=None, max_length=100)
    unit: ProductUnit = Field(default="un", description="kg or un")
    quantity: float = Field(default=0.0, ge=0, description="Quantity on hand")
    price: float = Field(default=0.0, ge=0, description="Sale price per unit")
    cost: float = Field(default=0.0, ge=0, description="Average purchase price per unit")
    min_stock: float = Field(default=0.0, ge=0, description="Alert threshold")
    location: Optional[str] = Field(default=None, max_length=100)


class ProductCreateRequest(ProductBase):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Sucata de Alumínio",
                "sku": "SUC-AL-001",
                "kind": "sucata",
                "category": "Sucatas",
                "unit": "kg",
                "quantity": 1250,
                "price": 8.5,
                "cost": 6.2,
                "min_stock": 200,
                "location": "Box 04",
            }
        }
    )


class ProductUpdateRequest(PartialUpdate):
    """Partial update; only fields present in the body are changed."""
    non_nullable = ("name", "kind", "unit", "quantity", "price", "cost", "min_stock")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    sku: Optional[str] = Field(default=None, max_length=64)
    kind: Optional[ProductKind] = None
    category: Optional[str] = Field(default=None, max_length=100)
    unit: Optional[ProductUnit] = None
    quantity: Optional[float] = Field(default=None, ge=0)
    price: Optional[float] = Field(default=None, ge=0)
    cost: Optional[float] = Field(default=None, ge=0)
    min_stock: Optional[float] = Field(default=None, ge=0)
    location: Optional[str] = Field(default=None, max_length=100)


class StockAdjustmentRequest(BaseModel):
    delta: float = Field(..., description="Quantity to add (negative to remove)")
    reason: Optional[str] = Field(default=None, max_length=255)


class ProductResponse(ProductBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: str
    updated_at: str

    @computed_field
    @property
    def status(self) -> StockStatus:
        return stock_status(self.quantity, self.min_stock)


class InventorySummaryResponse(BaseModel):
    total_items: int
    total_quantity: float
    alert_count: int
    stock_value: float
