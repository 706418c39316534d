import json

import httpx
import pytest

from intercom_articles_mcp import client


class FakeIntercom:
    """Records outgoing requests and answers each with the configured response."""

    def __init__(self):
        self.requests = []
        self._status_code = 200
        self._kwargs = {"json": {}}
        self.error = None

    def respond(self, status_code=200, json_data=None, text=None):
        self._status_code = status_code
        if text is not None:
            self._kwargs = {"text": text}
        elif json_data is not None:
            self._kwargs = {"json": json_data}
        else:
            self._kwargs = {}

    def fail_with(self, error):
        self.error = error

    def handler(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self._status_code, **self._kwargs)

    @property
    def last_request(self):
        return self.requests[-1]

    @property
    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture
def intercom(monkeypatch):
    """Route every Intercom API call to an in-memory fake."""
    fake = FakeIntercom()
    transport = httpx.MockTransport(fake.handler)
    real_async_client = httpx.AsyncClient

    def make_client(*args, **kwargs):
        kwargs["transport"] = transport
        return real_async_client(*args, **kwargs)

    monkeypatch.setattr(client.httpx, "AsyncClient", make_client)
    monkeypatch.setattr(client, "ACCESS_TOKEN", "test-token")
    return fake
