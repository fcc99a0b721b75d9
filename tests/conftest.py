"""Pytest fixtures: a fake aiohttp session factory and a ShopifyClient wired to it."""

import json
import logging

import pytest

from app.shopify.client import ShopifyClient

HOST = "https://shop.example.com"
TOKEN = "shpat_test"


class FakeResponse:
    def __init__(self, payload=None, status=200, text=None):
        self.status = status
        self._payload = payload
        self._text = text

    async def text(self):
        if self._text is not None:
            return self._text
        return json.dumps(self._payload)

    async def json(self, content_type="application/json"):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    def __init__(self, transport):
        self.transport = transport

    def get(self, url, headers=None, params=None):
        self.transport.calls.append({"url": url, "headers": headers, "params": params})
        outcome = self.transport.responses.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def __aenter__(self):
        self.transport.sessions_opened += 1
        return self

    async def __aexit__(self, *exc):
        self.transport.sessions_closed += 1
        return False


class FakeTransport:
    """Queue of canned responses (or exceptions) consumed one per GET."""

    def __init__(self):
        self.responses = []
        self.calls = []
        self.sessions_opened = 0
        self.sessions_closed = 0

    def reply(self, payload=None, status=200, text=None):
        self.responses.append(FakeResponse(payload, status=status, text=text))
        return self

    def fail(self, exc):
        self.responses.append(exc)
        return self

    def session(self):
        return FakeSession(self)


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def sink():
    return logging.getLogger("tests.shopify")


@pytest.fixture
def shopify_client(transport, sink):
    return ShopifyClient(
        access_token=TOKEN,
        hostname=HOST,
        logger=sink,
        session_factory=transport.session,
    )


@pytest.fixture
def raw_product():
    return {
        "id": 1,
        "title": "T",
        "body_html": "<p>d</p>",
        "handle": "t",
        "tags": "a,b",
        "vendor": "ACME",
        "variants": [{"admin_graphql_api_id": "gid1", "price": "9.99", "inventory_quantity": 5}],
        "images": [{"src": "http://x/img.png"}],
    }
