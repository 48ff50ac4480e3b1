"""Pytest fixtures for the order total service."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from order_total_service.app.config import Settings
from order_total_service.app.main import create_app

RATE_URL = "http://rates.test/find_rate"


@pytest.fixture
def settings():
    return Settings(rate_service_url=RATE_URL, rate_timeout=2.0)


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))


@pytest.fixture
def sample_order():
    """A valid order body as a client would send it."""
    return {
        "order_id": 1,
        "product_id": 2,
        "quantity": 3,
        "subtotal": 20.0,
        "shipping_address": "1 Main St",
        "shipping_zip": "02134",
    }


def rate_response(status_code=200, text="0.05"):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


@pytest.fixture
def mock_rate_post():
    """Patch the outbound rate call; answers 200 / "0.05" unless reconfigured."""
    with patch("order_total_service.app.rates.requests.post") as post:
        post.return_value = rate_response()
        yield post
