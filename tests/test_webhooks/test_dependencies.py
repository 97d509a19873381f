import json

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from chargily_pay import WebhookEvent, WebhookVerifier, compute_signature
from mocks import CHECKOUT, MOCK_SECRET_KEY


BODY = json.dumps({
    "id": "evt_1",
    "entity": "event",
    "type": "checkout.failed",
    "data": dict(CHECKOUT, status="failed"),
}).encode()


@pytest.fixture
def webhook_app() -> TestClient:
    app = FastAPI()
    verifier = WebhookVerifier(secret_key=MOCK_SECRET_KEY)

    @app.post("/webhooks/chargily")
    async def receive(event: WebhookEvent = Depends(verifier)):
        return {"type": event.type, "checkout": event.data.id}

    return TestClient(app)


def test_valid_signature_accepted(webhook_app):
    response = webhook_app.post(
        "/webhooks/chargily",
        content=BODY,
        headers={"signature": compute_signature(BODY, MOCK_SECRET_KEY)},
    )
    assert response.status_code == 200
    assert response.json() == {"type": "checkout.failed", "checkout": CHECKOUT["id"]}


def test_missing_header_returns_400(webhook_app):
    response = webhook_app.post("/webhooks/chargily", content=BODY)
    assert response.status_code == 400


def test_bad_signature_returns_403(webhook_app):
    response = webhook_app.post(
        "/webhooks/chargily",
        content=BODY,
        headers={"signature": compute_signature(BODY, "wrong")},
    )
    assert response.status_code == 403


def test_signed_garbage_returns_400(webhook_app):
    body = b"definitely not json"
    response = webhook_app.post(
        "/webhooks/chargily",
        content=body,
        headers={"signature": compute_signature(body, MOCK_SECRET_KEY)},
    )
    assert response.status_code == 400


def test_custom_header_name():
    app = FastAPI()
    verifier = WebhookVerifier(secret_key=MOCK_SECRET_KEY, header_name="x-chargily-signature")

    @app.post("/hook")
    async def receive(event: WebhookEvent = Depends(verifier)):
        return {"id": event.id}

    response = TestClient(app).post(
        "/hook",
        content=BODY,
        headers={"X-Chargily-Signature": compute_signature(BODY, MOCK_SECRET_KEY)},
    )
    assert response.status_code == 200
    assert response.json() == {"id": "evt_1"}
