"""
Integration tests for checkout, sales history and cancellation.
"""

import re

import pytest

from gspro.models import Client, Product


@pytest.fixture
async def catalog(db_session):
    aluminio = Product(name="Sucata de Alumínio", sku="SUC-AL-001", kind="sucata", unit="kg",
                       quantity=1250, price=7.5, cost=5.2, min_stock=200)
    motor = Product(name="Motores Elétricos", sku="MOT-055", kind="peca", unit="un",
                    quantity=2, price=250.0, cost=120.0, min_stock=5)
    silva = Client(name="Metalúrgica Silva Ltda", document="12.345.678/0001-90")
    db_session.add_all([aluminio, motor, silva])
    await db_session.commit()
    return {"aluminio": aluminio.id, "motor": motor.id, "silva": silva.id}


async def checkout(api, items, payment_method="pix", client_id=None):
    return await api.post(
        "/api/v1/sales/checkout",
        json={"items": items, "payment_method": payment_method, "client_id": client_id},
    )


@pytest.mark.anyio
async def test_checkout_creates_sale(api, catalog):
    """
    Arrange: Catalog with two products and a client
    Act: Check out a cart
    Assert: Receipt, sale fields, seller and decremented stock
    """
    # Act
    resp = await checkout(
        api,
        [{"product_id": catalog["aluminio"], "quantity": 120}, {"product_id": catalog["motor"]}],
        "cartao",
        catalog["silva"],
    )

    # Assert
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Venda finalizada!\n\nTotal: R$ 1.150,00\nForma de pagamento: Cartão"
    sale = body["sale"]
    assert sale["total"] == 1150.0
    assert sale["payment_label"] == "Cartão"
    assert sale["client_name"] == "Metalúrgica Silva Ltda"
    assert sale["seller_name"] == "Administrador"
    assert len(sale["items"]) == 2
    assert re.fullmatch(r"\d{2}/\d{2}/\d{4} \d{2}:\d{2}", sale["sold_at_display"])
    day, month, year = sale["sold_at"][:10].split("-")[::-1]
    assert sale["sold_at_display"].startswith(f"{day}/{month}/{year}")

    motor = await api.get(f"/api/v1/products/{catalog['motor']}")
    assert motor.json()["quantity"] == 1


@pytest.mark.anyio
async def test_checkout_validation_messages(api, catalog):
    empty = await checkout(api, [])
    no_payment = await checkout(api, [{"product_id": catalog["motor"]}], payment_method=None)

    assert empty.status_code == 422
    assert empty.json()["detail"] == "Adicione pelo menos um item ao carrinho."
    assert no_payment.status_code == 422
    assert no_payment.json()["detail"] == "Selecione uma forma de pagamento."


@pytest.mark.anyio
async def test_checkout_insufficient_stock(api, catalog):
    resp = await checkout(api, [{"product_id": catalog["motor"], "quantity": 3}])

    assert resp.status_code == 409
    detail = resp.json()["detail"]
    assert detail["product_id"] == catalog["motor"]
    assert detail["available"] == 2
    assert detail["requested"] == 3

    history = await api.get("/api/v1/sales")
    assert history.json() == []


@pytest.mark.anyio
async def test_checkout_quantity_by_unit(api, catalog):
    fractional = await checkout(api, [{"product_id": catalog["motor"], "quantity": 0.3}])
    weighed = await checkout(api, [{"product_id": catalog["aluminio"], "quantity": 0.3}])

    assert fractional.status_code == 422
    assert "número inteiro" in fractional.json()["detail"]
    assert weighed.status_code == 201
    assert weighed.json()["sale"]["items"][0]["quantity"] == 0.3

    motor = await api.get(f"/api/v1/products/{catalog['motor']}")
    assert motor.json()["quantity"] == 2


@pytest.mark.anyio
async def test_checkout_unknown_product(api, catalog):
    resp = await checkout(api, [{"product_id": "missing"}])

    assert resp.status_code == 404


@pytest.mark.anyio
async def test_history_search_and_detail(api, catalog):
    first = (await checkout(api, [{"product_id": catalog["aluminio"], "quantity": 10}],
                            client_id=catalog["silva"])).json()["sale"]
    await checkout(api, [{"product_id": catalog["aluminio"], "quantity": 5}])

    everything = await api.get("/api/v1/sales")
    by_client = await api.get("/api/v1/sales", params={"search": "silva"})
    by_id = await api.get("/api/v1/sales", params={"search": first["id"][:8]})
    detail = await api.get(f"/api/v1/sales/{first['id']}")

    assert len(everything.json()) == 2
    assert [s["id"] for s in by_client.json()] == [first["id"]]
    assert [s["id"] for s in by_id.json()] == [first["id"]]
    assert detail.json()["items"][0]["product_name"] == "Sucata de Alumínio"


@pytest.mark.anyio
async def test_cancel_sale(api, catalog):
    sale = (await checkout(api, [{"product_id": catalog["motor"], "quantity": 2}])).json()["sale"]

    cancelled = await api.post(f"/api/v1/sales/{sale['id']}/cancel")
    again = await api.post(f"/api/v1/sales/{sale['id']}/cancel")
    motor = await api.get(f"/api/v1/products/{catalog['motor']}")
    completed = await api.get("/api/v1/sales", params={"status": "concluida"})

    assert cancelled.status_code == 200
    assert cancelled.json()["status"] == "cancelada"
    assert again.status_code == 409
    assert motor.json()["quantity"] == 2
    assert completed.json() == []
