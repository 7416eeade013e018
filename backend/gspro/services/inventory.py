"""
Inventory rules: stock status classification, summaries and adjustments.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from gspro.core.errors import ConflictError
from gspro.models.product import Product

logger = logging.getLogger(__name__)


STOCK_OK = "ok"
STOCK_LOW = "baixo"
STOCK_CRITICAL = "critico"


def stock_status(quantity: float, min_stock: float) -> str:
    """
    Classify a stock level against its alert threshold.

    ``critico`` at or below half the minimum (or when nothing is left),
    ``baixo`` at or below the minimum, ``ok`` otherwise.
    """
    if quantity <= 0:
        return STOCK_CRITICAL
    if min_stock <= 0:
        return STOCK_OK
    if quantity <= min_stock / 2:
        return STOCK_CRITICAL
    if quantity <= min_stock:
        return STOCK_LOW
    return STOCK_OK


@dataclass
class InventorySummary:
    total_items: int
    total_quantity: float
    alert_count: int
    stock_value: float


def summarize_inventory(products: Iterable[Product]) -> InventorySummary:
    """
    Headline numbers for the inventory screen.

    Stock value uses the purchase cost, not the sale price.
    """
    total_items = 0
    total_quantity = 0.0
    alert_count = 0
    stock_value = 0.0

    for product in products:
        total_items += 1
        total_quantity += product.quantity
        stock_value += product.quantity * product.cost
        if stock_status(product.quantity, product.min_stock) != STOCK_OK:
            alert_count += 1

    return InventorySummary(
        total_items=total_items,
        total_quantity=round(total_quantity, 3),
        alert_count=alert_count,
        stock_value=round(stock_value, 2),
    )


def filter_by_status(products: Iterable[Product], status: str) -> list[Product]:
    return [p for p in products if stock_status(p.quantity, p.min_stock) == status]


def adjust_stock(product: Product, delta: float, reason: str | None = None) -> Product:
    """
    Add ``delta`` (negative to remove) to the quantity on hand.

    Raises:
        ConflictError: If the result would be negative
    """
    new_quantity = round(product.quantity + delta, 3)
    if new_quantity < 0:
        raise ConflictError(
            f"Ajuste deixaria {product.name} com estoque negativo ({new_quantity:g})"
        )
    product.quantity = new_quantity
    logger.info(
        "Stock adjusted",
        extra={
            "product_id": product.id,
            "delta": delta,
            "quantity": new_quantity,
            "reason": reason,
        },
    )
    return product
