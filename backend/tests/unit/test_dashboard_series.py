"""
Unit tests for the dashboard chart series.

The aggregations are pure functions, so they run on transient model
instances without a database.
"""

from datetime import date

from gspro.models.product import Product
from gspro.models.sale import Sale
from gspro.models.transaction import Transaction
from gspro.models.user import User
from gspro.services.dashboard import (
    expenses_by_category,
    monthly_cash_flow,
    quarterly_profit,
    seller_performance,
    stock_turnover,
)


TODAY = date(2026, 3, 15)


def tx(amount, kind, occurred_on, category=None, status="pago"):
    return Transaction(
        description="x",
        amount=amount,
        kind=kind,
        category=category,
        status=status,
        occurred_on=occurred_on,
    )


def sale(total, seller=None, status="concluida"):
    return Sale(total=total, seller=seller, status=status, payment_method="pix", items=[])


class TestMonthlyCashFlow:

    def test_months_are_oldest_first_with_zero_fill(self):
        transactions = [
            tx(4200.0, "entrada", date(2026, 1, 27)),
            tx(1800.0, "saida", date(2026, 1, 25)),
            tx(500.0, "entrada", date(2026, 3, 2)),
            tx(999.0, "saida", date(2026, 3, 3), status="pendente"),
            tx(50.0, "entrada", date(2025, 1, 1)),
        ]

        series = monthly_cash_flow(transactions, TODAY, months=3)

        assert [p.month for p in series] == ["2026-01", "2026-02", "2026-03"]
        assert [p.name for p in series] == ["Jan", "Fev", "Mar"]
        assert (series[0].entrada, series[0].saida) == (4200.0, 1800.0)
        assert (series[1].entrada, series[1].saida) == (0, 0)
        assert (series[2].entrada, series[2].saida) == (500.0, 0)

    def test_window_crosses_year_boundary(self):
        series = monthly_cash_flow([], date(2026, 1, 10), months=3)

        assert [p.month for p in series] == ["2025-11", "2025-12", "2026-01"]


class TestExpensesByCategory:

    def test_top_categories_and_others(self):
        transactions = [
            tx(1800.0, "saida", TODAY, "Aluguel"),
            tx(3500.0, "saida", TODAY, "Compras"),
            tx(450.0, "saida", TODAY, "Energia"),
            tx(300.0, "saida", TODAY, "Frete"),
            tx(100.0, "saida", TODAY, "Limpeza"),
            tx(80.0, "saida", TODAY, None),
            tx(9999.0, "entrada", TODAY, "Vendas"),
        ]

        series = expenses_by_category(transactions, top=3)

        assert [(p.name, p.value) for p in series] == [
            ("Compras", 3500.0),
            ("Aluguel", 1800.0),
            ("Energia", 450.0),
            ("Outros", 480.0),
        ]

    def test_no_others_bucket_when_everything_fits(self):
        series = expenses_by_category([tx(10.0, "saida", TODAY, "Aluguel")])

        assert [p.name for p in series] == ["Aluguel"]


class TestQuarterlyProfit:

    def test_profit_per_quarter(self):
        transactions = [
            tx(1000.0, "entrada", date(2026, 2, 1)),
            tx(300.0, "saida", date(2026, 3, 1)),
            tx(500.0, "entrada", date(2025, 11, 1)),
            tx(800.0, "saida", date(2025, 8, 1)),
        ]

        series = quarterly_profit(transactions, TODAY, quarters=4)

        assert [p.name for p in series] == ["T2/2025", "T3/2025", "T4/2025", "T1/2026"]
        assert [p.value for p in series] == [0, -800.0, 500.0, 700.0]


class TestStockTurnover:

    def test_percentages_add_up_to_100(self):
        products = [Product(id=str(i), name=str(i)) for i in range(3)]

        series = stock_turnover(products, {"0"})

        assert [(p.name, p.value) for p in series] == [("Rápido", 33), ("Lento", 67)]

    def test_no_products(self):
        series = stock_turnover([], set())

        assert [p.value for p in series] == [0, 0]


class TestSellerPerformance:

    def test_relative_to_best_seller(self):
        ana = User(id="u-ana", name="Ana", email="ana@example.com")
        bruno = User(id="u-bruno", name="Bruno", email="bruno@example.com")
        sales = [
            sale(1000.0, ana),
            sale(500.0, ana),
            sale(750.0, bruno),
            sale(5000.0, bruno, status="cancelada"),
            sale(300.0),
        ]

        series = seller_performance(sales)

        assert [(p.name, p.value) for p in series] == [
            ("Ana", 100),
            ("Bruno", 50),
            ("Sem vendedor", 20),
        ]

    def test_sellers_with_same_name_stay_separate(self):
        first = User(id="u-1", name="Carlos", email="carlos1@example.com")
        second = User(id="u-2", name="Carlos", email="carlos2@example.com")
        sales = [sale(800.0, first), sale(400.0, second)]

        series = seller_performance(sales)

        assert [(p.name, p.value) for p in series] == [
            ("Carlos", 100),
            ("Carlos", 50),
        ]

    def test_no_sales(self):
        assert seller_performance([]) == []
