"""
Shopping cart for the point-of-sale screen.

The cart is plain in-memory state; nothing here touches the database.
Checkout turns a cart into a sale (see services.checkout).
"""

from dataclasses import dataclass, field
from typing import Optional, Protocol


PAYMENT_LABELS = {
    "dinheiro": "Dinheiro",
    "cartao": "Cartão",
    "pix": "PIX",
}


class Sellable(Protocol):
    id: str
    name: str
    price: float


@dataclass
class CartLine:
    product_id: str
    name: str
    unit_price: float
    quantity: float = 1

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


@dataclass
class Cart:
    """
    Ordered collection of cart lines, one per product.

    Example:
        >>> cart = Cart()
        >>> cart.add(product)
        >>> cart.add(product)          # same product: quantity becomes 2
        >>> cart.update_quantity(product.id, -5)   # never below 1
        >>> cart.total
    """

    lines: list[CartLine] = field(default_factory=list)
    payment_method: Optional[str] = None

    def _find(self, product_id: str) -> Optional[CartLine]:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def add(self, product: Sellable, quantity: float = 1) -> CartLine:
        """Add a product, or increase its quantity if it is already in the cart."""
        if quantity <= 0:
            raise ValueError("quantity must be positive")

        line = self._find(product.id)
        if line is not None:
            line.quantity += quantity
            return line

        line = CartLine(
            product_id=product.id,
            name=product.name,
            unit_price=product.price,
            quantity=quantity,
        )
        self.lines.append(line)
        return line

    def remove(self, product_id: str) -> None:
        self.lines = [line for line in self.lines if line.product_id != product_id]

    def update_quantity(self, product_id: str, delta: float) -> None:
        """Change a line's quantity by ``delta``, keeping it at least 1."""
        line = self._find(product_id)
        if line is not None:
            line.quantity = max(1, line.quantity + delta)

    def clear(self) -> None:
        self.lines = []
        self.payment_method = None

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total(self) -> float:
        return round(sum(line.line_total for line in self.lines), 2)

    def __len__(self) -> int:
        return len(self.lines)
