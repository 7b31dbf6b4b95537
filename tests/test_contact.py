"""
Tests for the contact form and the email diagnostics endpoint.
"""
from api.config import settings  # type: ignore

from fakes import RecordingSender


def test_contact_forwards_to_admin(client, sender, monkeypatch):
    monkeypatch.setattr(settings, "admin_email", "owner@shop.com")
    resp = client.post(
        "/api/contact",
        json={"name": "Visitor", "email": "visitor@x.com", "message": "Hello\n<b>there</b>"},
    )
    assert resp.status_code == 200
    assert resp.json()["success"] is True

    message = sender.sent[0]
    assert message.to == ["owner@shop.com"]
    assert message.reply_to == "visitor@x.com"
    assert message.subject == "New Message from Visitor"
    assert "&lt;b&gt;there&lt;/b&gt;" in message.html
    assert "<br>" in message.html


def test_contact_succeeds_when_delivery_fails(make_client, monkeypatch):
    monkeypatch.setattr(settings, "admin_email", "owner@shop.com")
    failing = RecordingSender(fail=True)
    client = make_client(senders=[failing])
    resp = client.post("/api/contact", json={"name": "V", "email": "v@x.com", "message": "hi"})
    assert resp.status_code == 200
    assert failing.calls == 1


def test_contact_without_recipient(client, sender):
    resp = client.post("/api/contact", json={"name": "V", "email": "v@x.com", "message": "hi"})
    assert resp.status_code == 200
    assert sender.sent == []


def test_contact_validation(client):
    resp = client.post("/api/contact", json={"name": "V", "email": "v@x.com", "message": ""})
    assert resp.status_code == 422


def test_email_diagnostics_endpoint(make_client):
    client = make_client()
    resp = client.post("/api/test-email", json={"email": "dev@x.com"})
    assert resp.status_code == 200
    assert resp.json()["provider"] == "fake"

    client = make_client(senders=[RecordingSender(fail=True)])
    resp = client.post("/api/test-email", json={"email": "dev@x.com"})
    assert resp.status_code == 502
    assert resp.json() == {"error": "Failed to send test email"}

    client = make_client(senders=[RecordingSender(configured=False)])
    resp = client.post("/api/test-email", json={"email": "dev@x.com"})
    assert resp.status_code == 503
