"""
Unit tests for the point-of-sale cart.
"""

from types import SimpleNamespace

import pytest

from gspro.services.cart import Cart


def make_product(product_id="p1", name="Sucata de Alumínio", price=7.5):
    return SimpleNamespace(id=product_id, name=name, price=price)


class TestCartAdd:

    def test_add_new_product_creates_line(self):
        cart = Cart()

        line = cart.add(make_product(), 12.5)

        assert len(cart) == 1
        assert line.unit_price == 7.5
        assert line.quantity == 12.5

    def test_add_same_product_increments_quantity(self):
        """Adding a product already in the cart merges into one line."""
        cart = Cart()
        product = make_product()

        cart.add(product)
        cart.add(product)

        assert len(cart) == 1
        assert cart.lines[0].quantity == 2

    def test_add_rejects_non_positive_quantity(self):
        cart = Cart()

        with pytest.raises(ValueError):
            cart.add(make_product(), 0)

    def test_lines_keep_insertion_order(self):
        cart = Cart()
        cart.add(make_product("a", "Motor"))
        cart.add(make_product("b", "Bateria"))

        assert [line.product_id for line in cart.lines] == ["a", "b"]


class TestCartQuantities:

    def test_update_quantity_never_goes_below_one(self):
        cart = Cart()
        cart.add(make_product(), 3)

        cart.update_quantity("p1", -10)

        assert cart.lines[0].quantity == 1

    def test_update_quantity_unknown_product_is_noop(self):
        cart = Cart()
        cart.add(make_product())

        cart.update_quantity("missing", 5)

        assert cart.lines[0].quantity == 1

    def test_remove_drops_line(self):
        cart = Cart()
        cart.add(make_product("a"))
        cart.add(make_product("b"))

        cart.remove("a")

        assert [line.product_id for line in cart.lines] == ["b"]

    def test_clear_resets_lines_and_payment(self):
        cart = Cart(payment_method="pix")
        cart.add(make_product())

        cart.clear()

        assert cart.is_empty
        assert cart.payment_method is None


class TestCartTotal:

    def test_total_sums_line_totals(self):
        cart = Cart()
        cart.add(make_product("a", price=180.0), 2)
        cart.add(make_product("b", price=7.5), 10)

        assert cart.total == 435.0

    def test_total_is_rounded_to_cents(self):
        cart = Cart()
        cart.add(make_product(price=0.1), 3)

        assert cart.total == 0.3

    def test_empty_cart_total_is_zero(self):
        assert Cart().total == 0
