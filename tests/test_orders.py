"""
Tests for the product catalogue and order endpoints.
"""
from api import models  # type: ignore
from api.db import session_scope  # type: ignore

from fakes import register


def _seed_products():
    with session_scope() as db:
        db.add_all(
            [
                models.Product(name="Headphones", price=79.99, image="/h.jpg", description="Wireless"),
                models.Product(name="Keyboard", price=99.5),
            ]
        )


def test_list_and_get_products(client):
    assert client.get("/api/products").json() == {"success": True, "products": []}
    _seed_products()

    resp = client.get("/api/products")
    assert resp.status_code == 200
    products = resp.json()["products"]
    assert [p["name"] for p in products] == ["Headphones", "Keyboard"]

    resp = client.get(f"/api/products/{products[0]['id']}")
    assert resp.status_code == 200
    assert resp.json()["product"]["price"] == 79.99

    resp = client.get("/api/products/9999")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


def test_orders_require_auth(client):
    assert client.get("/api/orders").status_code == 401
    resp = client.post("/api/orders", json={"items": [{"name": "X", "price": 1}], "total": 1})
    assert resp.status_code == 401
    resp = client.get("/api/orders", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401


def test_place_and_list_orders(client):
    alice = {"Authorization": f"Bearer {register(client)}"}
    bob = {"Authorization": f"Bearer {register(client, email='bob@b.com', name='Bob')}"}

    resp = client.post(
        "/api/orders",
        json={"items": [{"product_id": 1, "name": "Headphones", "price": 79.99, "quantity": 2}], "total": 159.98},
        headers=alice,
    )
    assert resp.status_code == 200
    order = resp.json()["order"]
    assert order["total"] == 159.98
    assert order["items"][0]["quantity"] == 2

    resp = client.post(
        "/api/orders",
        json={"items": [{"name": "Keyboard", "price": 99.5}], "total": 99.5},
        headers=alice,
    )
    assert resp.status_code == 200
    second_id = resp.json()["order"]["id"]

    orders = client.get("/api/orders", headers=alice).json()["orders"]
    assert len(orders) == 2
    assert orders[0]["id"] == second_id

    assert client.get("/api/orders", headers=bob).json()["orders"] == []


def test_order_validation(client):
    headers = {"Authorization": f"Bearer {register(client)}"}
    assert client.post("/api/orders", json={"items": [], "total": 0}, headers=headers).status_code == 422
    resp = client.post(
        "/api/orders",
        json={"items": [{"name": "X", "price": 1, "quantity": 0}], "total": 1},
        headers=headers,
    )
    assert resp.status_code == 422
    resp = client.post(
        "/api/orders",
        json={"items": [{"name": "X", "price": 1}], "total": -5},
        headers=headers,
    )
    assert resp.status_code == 422
