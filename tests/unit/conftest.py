"""
Fixtures for offline harness tests.

FakeTransport replaces requests.Session.send so ApiClient runs its real
request building, header mutation and decoding against canned responses.
"""

import json

import pytest
import requests

from nemlager_api.client import ApiClient
from nemlager_api.config import ApiConfig

BASE_URL = "https://api.example.test"


def make_response(status, body=b"", reason=""):
    """Build a requests.Response with the given status and body (dict/list bodies are JSON-encoded)."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    if isinstance(body, (dict, list)):
        body = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    elif isinstance(body, str):
        body = body.encode("utf-8")
    response._content = body
    response.encoding = "utf-8"
    return response


class FakeTransport:
    """Routes prepared requests by (method, path with query) to canned responses."""

    def __init__(self):
        self.routes = {}
        self.sent = []
        self.timeouts = []

    def add(self, method, path_url, response):
        """Register a Response, an exception instance to raise, or a callable(prepared)."""
        self.routes[(method, path_url)] = response

    def __call__(self, prepared, **kwargs):
        self.sent.append(prepared)
        self.timeouts.append(kwargs.get("timeout"))
        handler = self.routes.get((prepared.method, prepared.path_url))
        if handler is None:
            return make_response(404, {"msg": "not found"}, reason="Not Found")
        if isinstance(handler, Exception):
            raise handler
        if callable(handler):
            return handler(prepared)
        return handler

    @property
    def last(self):
        return self.sent[-1]


@pytest.fixture
def transport(monkeypatch):
    fake = FakeTransport()
    monkeypatch.setattr(requests.Session, "send", fake)
    return fake


@pytest.fixture
def config():
    return ApiConfig(base_url=BASE_URL, email="a@b.co", password="x", cron_secret="s3cr3t", timeout=5.0)


@pytest.fixture
def client(config, transport):
    with ApiClient(config) as api:
        yield api
