"""
Dashboard series.

Every chart is computed in Python over rows fetched in full; the
functions below are pure so they can be tested without a database.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from gspro.models.product import Product
from gspro.models.sale import Sale
from gspro.models.transaction import Transaction
from gspro.repositories.product import ProductRepository
from gspro.repositories.sale import SaleRepository
from gspro.repositories.transaction import TransactionRepository
from gspro.services.formatting import month_label, quarter_label


OTHER_CATEGORY = "Outros"
NO_SELLER = "Sem vendedor"


@dataclass
class CashFlowPoint:
    name: str
    month: str
    entrada: float
    saida: float


@dataclass
class SeriesPoint:
    name: str
    value: float


def _shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def monthly_cash_flow(
    transactions: Iterable[Transaction],
    today: date,
    months: int = 6,
) -> list[CashFlowPoint]:
    """
    Paid income and expenses per month for the ``months`` months ending
    in ``today``'s month, oldest first. Empty months are reported as zero.
    """
    keys = [_shift_month(today.year, today.month, -offset) for offset in range(months - 1, -1, -1)]
    totals = {key: {"entrada": 0.0, "saida": 0.0} for key in keys}

    for tx in transactions:
        if tx.status != "pago":
            continue
        key = (tx.occurred_on.year, tx.occurred_on.month)
        if key in totals:
            totals[key][tx.kind] += tx.amount

    return [
        CashFlowPoint(
            name=month_label(date(year, month, 1)),
            month=f"{year:04d}-{month:02d}",
            entrada=round(totals[(year, month)]["entrada"], 2),
            saida=round(totals[(year, month)]["saida"], 2),
        )
        for year, month in keys
    ]


def expenses_by_category(
    transactions: Iterable[Transaction],
    top: int = 4,
) -> list[SeriesPoint]:
    """
    Paid expenses grouped by category, largest first.

    Categories beyond the ``top`` largest are folded into ``Outros``.
    """
    totals: dict[str, float] = defaultdict(float)
    for tx in transactions:
        if tx.kind == "saida" and tx.status == "pago":
            totals[tx.category or OTHER_CATEGORY] += tx.amount

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    head = [(name, value) for name, value in ranked if name != OTHER_CATEGORY][:top]
    head_names = {name for name, _ in head}
    rest = sum(value for name, value in ranked if name not in head_names)

    series = [SeriesPoint(name=name, value=round(value, 2)) for name, value in head]
    if rest:
        series.append(SeriesPoint(name=OTHER_CATEGORY, value=round(rest, 2)))
    return series


def quarterly_profit(
    transactions: Iterable[Transaction],
    today: date,
    quarters: int = 4,
) -> list[SeriesPoint]:
    """Net result (paid income minus paid expenses) per calendar quarter."""
    current = (today.year, (today.month - 1) // 3 + 1)
    keys = []
    year, quarter = current
    for _ in range(quarters):
        keys.append((year, quarter))
        quarter -= 1
        if quarter == 0:
            year, quarter = year - 1, 4
    keys.reverse()

    totals = {key: 0.0 for key in keys}
    for tx in transactions:
        if tx.status != "pago":
            continue
        key = (tx.occurred_on.year, (tx.occurred_on.month - 1) // 3 + 1)
        if key in totals:
            totals[key] += tx.signed_amount

    return [
        SeriesPoint(name=quarter_label(year, quarter), value=round(totals[(year, quarter)], 2))
        for year, quarter in keys
    ]


def stock_turnover(products: Iterable[Product], sold_product_ids: set[str]) -> list[SeriesPoint]:
    """
    Share of products with recent sales (``Rápido``) versus none (``Lento``).

    Percentages are whole numbers that add up to 100, or both 0 when there
    are no products.
    """
    products = list(products)
    if not products:
        return [SeriesPoint(name="Rápido", value=0), SeriesPoint(name="Lento", value=0)]

    fast = sum(1 for product in products if product.id in sold_product_ids)
    fast_pct = round(fast * 100 / len(products))
    return [
        SeriesPoint(name="Rápido", value=fast_pct),
        SeriesPoint(name="Lento", value=100 - fast_pct),
    ]


def seller_performance(sales: Iterable[Sale]) -> list[SeriesPoint]:
    """
    Completed sales total per seller, as a percentage of the best seller.

    Sellers are told apart by ID; two sellers sharing a name get separate
    points.
    """
    totals: dict[Optional[str], float] = defaultdict(float)
    names: dict[Optional[str], str] = {}
    for sale in sales:
        if sale.status != "concluida":
            continue
        seller_id = sale.seller.id if sale.seller is not None else None
        names[seller_id] = sale.seller.name if sale.seller is not None else NO_SELLER
        totals[seller_id] += sale.total

    if not totals:
        return []

    best = max(totals.values())
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        SeriesPoint(name=names[seller_id], value=round(value * 100 / best) if best else 0)
        for seller_id, value in ranked
    ]


@dataclass
class Dashboard:
    cash_flow: list[CashFlowPoint]
    expenses: list[SeriesPoint]
    profit: list[SeriesPoint]
    turnover: list[SeriesPoint]
    recent_sales: list[Sale]
    sellers: list[SeriesPoint]


class DashboardService:
    """Fetches the rows each chart needs and runs the aggregations."""

    def __init__(self, session: AsyncSession):
        self.products = ProductRepository(session)
        self.sales = SaleRepository(session)
        self.transactions = TransactionRepository(session)

    async def build(
        self,
        today: Optional[date] = None,
        months: int = 6,
        recent_limit: int = 5,
        fast_moving_days: int = 30,
    ) -> Dashboard:
        today = today or date.today()
        transactions = await self.transactions.list_transactions()
        products = await self.products.list_products()
        sales = await self.sales.list_sales(status="concluida")

        since = datetime.combine(today - timedelta(days=fast_moving_days), datetime.min.time())
        sold_ids = await self.sales.sold_product_ids(since)

        return Dashboard(
            cash_flow=monthly_cash_flow(transactions, today, months),
            expenses=expenses_by_category(transactions),
            profit=quarterly_profit(transactions, today),
            turnover=stock_turnover(products, sold_ids),
            recent_sales=sales[:recent_limit],
            sellers=seller_performance(sales),
        )
