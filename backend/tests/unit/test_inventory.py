"""
Unit tests for inventory rules.

Tests follow AAA (Arrange, Act, Assert) pattern.
"""

import pytest

from gspro.core.errors import ConflictError
from gspro.models.product import Product
from gspro.services.inventory import (
    STOCK_CRITICAL,
    STOCK_LOW,
    STOCK_OK,
    adjust_stock,
    filter_by_status,
    stock_status,
    summarize_inventory,
)


def make_product(name="Item", quantity=10.0, min_stock=5.0, cost=1.0, **extra):
    return Product(
        id=extra.pop("id", name),
        name=name,
        kind=extra.pop("kind", "peca"),
        unit=extra.pop("unit", "un"),
        quantity=quantity,
        min_stock=min_stock,
        cost=cost,
        price=extra.pop("price", cost * 2),
        **extra,
    )


class TestStockStatus:

    @pytest.mark.parametrize(
        "quantity,min_stock,expected",
        [
            (1250, 200, STOCK_OK),
            (42, 50, STOCK_LOW),
            (50, 50, STOCK_LOW),
            (25, 50, STOCK_CRITICAL),
            (15, 100, STOCK_CRITICAL),
            (0, 0, STOCK_CRITICAL),
            (3, 0, STOCK_OK),
        ],
    )
    def test_thresholds(self, quantity, min_stock, expected):
        assert stock_status(quantity, min_stock) == expected


class TestSummarizeInventory:

    def test_summary_uses_cost_for_stock_value(self):
        """
        Arrange: Two products, one below its minimum
        Act: Summarize
        Assert: Counts, alert count and value at cost
        """
        # Arrange
        products = [
            make_product("Alumínio", quantity=1250, min_stock=200, cost=5.2),
            make_product("Baterias", quantity=42, min_stock=50, cost=95.0),
        ]

        # Act
        summary = summarize_inventory(products)

        # Assert
        assert summary.total_items == 2
        assert summary.total_quantity == 1292
        assert summary.alert_count == 1
        assert summary.stock_value == 10490.0

    def test_empty_inventory(self):
        summary = summarize_inventory([])

        assert summary.total_items == 0
        assert summary.stock_value == 0

    def test_filter_by_status(self):
        products = [
            make_product("a", quantity=100, min_stock=10),
            make_product("b", quantity=8, min_stock=10),
            make_product("c", quantity=1, min_stock=10),
        ]

        assert [p.name for p in filter_by_status(products, STOCK_LOW)] == ["b"]
        assert [p.name for p in filter_by_status(products, STOCK_CRITICAL)] == ["c"]


class TestAdjustStock:

    def test_positive_adjustment(self):
        product = make_product(quantity=10)

        adjust_stock(product, 2.5, "compra")

        assert product.quantity == 12.5

    def test_negative_adjustment_to_zero_is_allowed(self):
        product = make_product(quantity=10)

        adjust_stock(product, -10)

        assert product.quantity == 0

    def test_adjustment_below_zero_raises(self):
        product = make_product(quantity=1)

        with pytest.raises(ConflictError):
            adjust_stock(product, -2)

        assert product.quantity == 1
