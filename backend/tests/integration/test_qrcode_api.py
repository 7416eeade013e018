"""
Integration tests for QR label endpoints.
"""

import base64

import pytest

from gspro.models import Product


@pytest.mark.anyio
async def test_generate_qrcode_json(api):
    resp = await api.post("/api/v1/qrcode", json={"kind": "venda", "value": "abc123"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["payload"] == "GSPRO:venda:abc123"
    assert body["media_type"] == "image/png"
    assert base64.b64decode(body["image_base64"]).startswith(b"\x89PNG")


@pytest.mark.anyio
async def test_generate_qrcode_image_download(api):
    resp = await api.post("/api/v1/qrcode/image", json={"value": "SUC-AL-001", "format": "svg"})

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("image/svg+xml")
    assert "qrcode-produto.svg" in resp.headers["content-disposition"]
    assert b"<svg" in resp.content


@pytest.mark.anyio
async def test_blank_value_is_rejected(api):
    resp = await api.post("/api/v1/qrcode", json={"kind": "produto", "value": "   "})

    assert resp.status_code == 422


@pytest.mark.anyio
async def test_product_label(api, db_session):
    product = Product(name="Sucata de Alumínio", sku="SUC-AL-001", kind="sucata", unit="kg",
                      quantity=1, price=7.5, cost=5.2)
    db_session.add(product)
    await db_session.commit()

    resp = await api.get(f"/api/v1/products/{product.id}/label")
    missing = await api.get("/api/v1/products/missing/label")

    assert resp.status_code == 200
    assert resp.json()["payload"] == f"GSPRO:produto:{product.id}"
    assert resp.json()["title"] == "Sucata de Alumínio"
    assert resp.json()["subtitle"] == "SUC-AL-001"
    assert missing.status_code == 404
