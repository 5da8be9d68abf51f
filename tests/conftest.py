import hashlib
import hmac
import json
import os
import time

# Settings() is instantiated at import time, so the environment has to be ready before the app is imported
os.environ["STRIPE_SECRET_KEY"] = "sk_test_dummy"
os.environ["STRIPE_WEBHOOK_SECRET"] = "whsec_test_secret"
os.environ["FRONTEND_URL"] = "https://shop.example.com"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from app.configs.app_settings import settings, get_settings
from app.main import app


@pytest.fixture
def client():
    # the last-resort 500 handler is under test too, so let it render instead of re-raising
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def override_settings():
    """Swap individual settings for one test: override_settings(STRIPE_WEBHOOK_SECRET=None)"""

    def _override(**changes):
        patched = settings.model_copy(update=changes)
        app.dependency_overrides[get_settings] = lambda: patched
        return patched

    yield _override
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
def sign_payload():
    """Build a stripe-signature header the way Stripe signs webhook deliveries"""

    def _sign(payload: bytes, secret: str = settings.STRIPE_WEBHOOK_SECRET, timestamp: int = None) -> str:
        timestamp = timestamp or int(time.time())
        signed_payload = f"{timestamp}.{payload.decode('utf-8')}"
        signature = hmac.new(secret.encode("utf-8"), signed_payload.encode("utf-8"), hashlib.sha256).hexdigest()
        return f"t={timestamp},v1={signature}"

    return _sign


@pytest.fixture
def make_event():
    def _make_event(event_type: str, data_object: dict) -> bytes:
        event = {
            "id": "evt_test_123",
            "object": "event",
            "type": event_type,
            "data": {"object": data_object},
        }
        return json.dumps(event).encode("utf-8")

    return _make_event


