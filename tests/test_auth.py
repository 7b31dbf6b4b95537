"""
Tests for registration, login, whoami and logout.
"""
from fakes import register


def test_register_and_login(client):
    resp = client.post(
        "/api/register",
        json={"name": "Alice", "email": "Alice@Example.com", "password": "oldpassword1"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["token"]
    assert body["user"] == {"name": "Alice", "email": "alice@example.com"}

    # Duplicate email, regardless of case
    resp = client.post(
        "/api/register",
        json={"name": "Alice", "email": "alice@example.com", "password": "oldpassword1"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "User already exists"}

    resp = client.post("/api/login", json={"email": "alice@example.com", "password": "oldpassword1"})
    assert resp.status_code == 200
    assert resp.json()["message"] == "Login successful!"

    resp = client.post("/api/login", json={"email": "alice@example.com", "password": "wrongpassword"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid email or password"}

    resp = client.post("/api/login", json={"email": "bob@example.com", "password": "oldpassword1"})
    assert resp.status_code == 401


def test_register_validation(client):
    resp = client.post("/api/register", json={"name": "A", "email": "bad", "password": "oldpassword1"})
    assert resp.status_code == 422
    resp = client.post("/api/register", json={"name": "A", "email": "a@b.com", "password": "short"})
    assert resp.status_code == 422
    resp = client.post("/api/register", json={"name": "   ", "email": "a@b.com", "password": "oldpassword1"})
    assert resp.status_code == 422


def test_me_and_logout(client):
    token = register(client)
    headers = {"Authorization": f"Bearer {token}"}

    resp = client.get("/api/me", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["email"] == "a@b.com"

    assert client.get("/api/me").status_code == 401
    assert client.get("/api/me", headers={"Authorization": "Bearer not-a-jwt"}).status_code == 401

    assert client.post("/api/logout", headers=headers).status_code == 204
    resp = client.get("/api/me", headers=headers)
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid token"}
