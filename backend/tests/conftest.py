import json
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from nft_relay.api import app, get_bitscrunch_client
from nft_relay.config import Settings
from nft_relay.integrations.bitscrunch_client import BitsCrunchClient


def make_response(status_code, body=None, text=None):
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    elif text is not None:
        response._content = text.encode("utf-8")
        response.headers["Content-Type"] = "text/plain"
    else:
        response._content = b""
    return response


@pytest.fixture
def settings():
    return Settings(
        bitscrunch_api_key="test-key",
        bitscrunch_api_base_url="https://api.bitscrunch.test/v1/",
    )


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def bitscrunch(settings, session):
    return BitsCrunchClient(settings, session=session)


@pytest.fixture
def fake_client():
    return MagicMock(spec=BitsCrunchClient)


@pytest.fixture
def api_client(fake_client):
    app.dependency_overrides[get_bitscrunch_client] = lambda: fake_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
