"""
Integration tests for the dashboard payload.
"""

from datetime import date

import pytest

from gspro.models import Product, Transaction


@pytest.mark.anyio
async def test_empty_dashboard(api):
    resp = await api.get("/api/v1/dashboard")

    assert resp.status_code == 200
    body = resp.json()
    assert len(body["cash_flow"]) == 6
    assert all(point["entrada"] == 0 and point["saida"] == 0 for point in body["cash_flow"])
    assert body["expenses_by_category"] == []
    assert len(body["quarterly_profit"]) == 4
    assert [p["value"] for p in body["stock_turnover"]] == [0, 0]
    assert body["recent_sales"] == []
    assert body["seller_performance"] == []


@pytest.mark.anyio
async def test_dashboard_after_sales(api, db_session):
    """
    Arrange: Two products, an expense this month and one sale
    Act: Fetch the dashboard
    Assert: Every series reflects the data
    """
    # Arrange
    sold = Product(name="Motores Elétricos", kind="peca", unit="un", quantity=10, price=250.0, cost=120.0)
    idle = Product(name="Baterias Automotivas", kind="peca", unit="un", quantity=10, price=180.0, cost=95.0)
    db_session.add_all([
        sold,
        idle,
        Transaction(description="Aluguel", amount=1800.0, kind="saida", category="Aluguel",
                    status="pago", occurred_on=date.today()),
    ])
    await db_session.commit()
    await api.post(
        "/api/v1/sales/checkout",
        json={"items": [{"product_id": sold.id, "quantity": 2}], "payment_method": "pix"},
    )

    # Act
    body = (await api.get("/api/v1/dashboard", params={"months": 3})).json()

    # Assert
    assert len(body["cash_flow"]) == 3
    assert body["cash_flow"][-1]["entrada"] == 500.0
    assert body["cash_flow"][-1]["saida"] == 1800.0
    assert body["expenses_by_category"] == [{"name": "Aluguel", "value": 1800.0}]
    assert body["quarterly_profit"][-1]["value"] == -1300.0
    assert [(p["name"], p["value"]) for p in body["stock_turnover"]] == [("Rápido", 50), ("Lento", 50)]
    assert body["recent_sales"][0]["total_display"] == "R$ 500,00"
    assert body["recent_sales"][0]["seller_name"] == "Administrador"
    assert body["recent_sales"][0]["sold_at_display"].count("/") == 2
    assert body["seller_performance"] == [{"name": "Administrador", "value": 100}]
