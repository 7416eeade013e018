"""
Checkout and sales history.

Finalizing a sale writes the sale row, its line items, the stock
decrements and the matching cash entry in the caller's session; the
request-scoped session commits them together or rolls them all back.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from gspro.core.errors import CheckoutError, ConflictError, InsufficientStockError
from gspro.models.base import utc_now
from gspro.models.sale import Sale, SaleItem, PAYMENT_METHODS
from gspro.models.transaction import Transaction
from gspro.repositories.client import ClientRepository
from gspro.repositories.product import ProductRepository
from gspro.repositories.sale import SaleRepository
from gspro.repositories.transaction import TransactionRepository
from gspro.repositories.user import UserRepository
from gspro.services.cart import Cart, PAYMENT_LABELS
from gspro.services.formatting import format_brl

logger = logging.getLogger(__name__)


EMPTY_CART_MESSAGE = "Adicione pelo menos um item ao carrinho."
MISSING_PAYMENT_MESSAGE = "Selecione uma forma de pagamento."


@dataclass
class CheckoutLine:
    product_id: str
    quantity: float


def validate_cart(cart: Cart, payment_method: Optional[str]) -> str:
    """
    Check a cart can be finalized and return the payment method.

    Raises:
        CheckoutError: On an empty cart or a missing/unknown payment method
    """
    if cart.is_empty:
        raise CheckoutError(EMPTY_CART_MESSAGE)
    if not payment_method:
        raise CheckoutError(MISSING_PAYMENT_MESSAGE)
    if payment_method not in PAYMENT_METHODS:
        raise CheckoutError(
            f"Forma de pagamento inválida: {payment_method}. "
            f"Use uma de: {', '.join(PAYMENT_METHODS)}"
        )
    return payment_method


def receipt_message(total: float, payment_method: str) -> str:
    """Confirmation text shown after a sale is finalized."""
    return (
        "Venda finalizada!\n\n"
        f"Total: {format_brl(total)}\n"
        f"Forma de pagamento: {PAYMENT_LABELS[payment_method]}"
    )


def search_sales(sales: Iterable[Sale], term: Optional[str]) -> list[Sale]:
    """
    Filter sales by ID substring or client name, case-insensitively.
    """
    sales = list(sales)
    if not term or not term.strip():
        return sales

    needle = term.strip().lower()
    matched = []
    for sale in sales:
        if needle in sale.id.lower():
            matched.append(sale)
        elif sale.client is not None and needle in sale.client.name.lower():
            matched.append(sale)
    return matched


class CheckoutService:
    """
    Turns carts into persisted sales and reverses them.

    Attributes:
        session: Request-scoped session shared by every write of a sale
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.products = ProductRepository(session)
        self.clients = ClientRepository(session)
        self.users = UserRepository(session)
        self.sales = SaleRepository(session)
        self.transactions = TransactionRepository(session)

    async def build_cart(self, lines: Iterable[CheckoutLine]) -> Cart:
        """
        Price the requested lines from the product table.

        Repeated products are merged into one cart line. Products sold by
        unit (``un``) take whole quantities; weighed scrap (``kg``) may be
        fractional.

        Raises:
            NotFoundError: If a product does not exist
            CheckoutError: Fractional quantity for a product sold by unit
        """
        lines = list(lines)
        cart = Cart()
        for line in lines:
            product = await self.products.get_or_raise(line.product_id)
            if product.unit == "un" and not float(line.quantity).is_integer():
                raise CheckoutError(
                    f"Quantidade de {product.name} deve ser um número inteiro: {line.quantity:g}"
                )
            cart.add(product, line.quantity)
        return cart

    async def finalize_sale(
        self,
        lines: Iterable[CheckoutLine],
        payment_method: Optional[str],
        client_id: Optional[str] = None,
        seller_id: Optional[str] = None,
    ) -> Sale:
        """
        Persist a sale from cart lines.

        Steps: validate, insert the sale, bulk-insert its items, decrement
        stock, record the ``entrada`` transaction.

        Raises:
            CheckoutError: Empty cart or bad payment method
            NotFoundError: Unknown product, client or seller
            InsufficientStockError: Not enough stock for some line
        """
        cart = await self.build_cart(lines)
        payment_method = validate_cart(cart, payment_method)

        client = await self.clients.get_or_raise(client_id) if client_id else None
        seller = await self.users.get_or_raise(seller_id) if seller_id else None

        products = await self.products.get_many(line.product_id for line in cart.lines)
        for line in cart.lines:
            product = products[line.product_id]
            if product.quantity < line.quantity:
                raise InsufficientStockError(
                    product.id, product.name, product.quantity, line.quantity
                )

        sale = Sale(
            client=client,
            seller=seller,
            total=cart.total,
            payment_method=payment_method,
            status="concluida",
            sold_at=utc_now(),
            items=[],
        )
        await self.sales.add(sale)

        await self.sales.add_items(
            sale,
            (
                SaleItem(
                    sale_id=sale.id,
                    product=products[line.product_id],
                    product_id=line.product_id,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                )
                for line in cart.lines
            ),
        )

        for line in cart.lines:
            product = products[line.product_id]
            product.quantity = round(product.quantity - line.quantity, 3)

        await self.transactions.add(
            Transaction(
                description=f"Venda {sale.id[:8]}",
                amount=sale.total,
                kind="entrada",
                category="Vendas",
                payment_method=PAYMENT_LABELS[payment_method],
                status="pago",
                occurred_on=sale.sold_at.date(),
                sale_id=sale.id,
            )
        )

        logger.info(
            "Sale finalized",
            extra={
                "sale_id": sale.id,
                "total": sale.total,
                "payment_method": payment_method,
                "items": len(cart),
                "client_id": client_id,
                "seller_id": seller_id,
            },
        )
        return sale

    async def cancel_sale(self, sale_id: str) -> Sale:
        """
        Cancel a completed sale, returning its items to stock.

        A compensating ``saida`` transaction keeps the cash ledger balanced.

        Raises:
            NotFoundError: If the sale does not exist
            ConflictError: If the sale is already cancelled
        """
        sale = await self.sales.get_or_raise(sale_id)
        if sale.status == "cancelada":
            raise ConflictError(f"Venda já cancelada: {sale_id}")

        for item in sale.items:
            item.product.quantity = round(item.product.quantity + item.quantity, 3)

        sale.status = "cancelada"

        await self.transactions.add(
            Transaction(
                description=f"Estorno venda {sale.id[:8]}",
                amount=sale.total,
                kind="saida",
                category="Estornos",
                payment_method=PAYMENT_LABELS[sale.payment_method],
                status="pago",
                occurred_on=utc_now().date(),
                sale_id=sale.id,
            )
        )
        await self.session.flush()

        logger.info("Sale cancelled", extra={"sale_id": sale.id, "total": sale.total})
        return sale
