import json

import httpx
import pytest

from leftronic import LeftronicClient, LeftronicConfig

ENV_KEYS = (
    "LEFTRONIC_ACCESS_KEY",
    "LEFTRONIC_MAX_CONCURRENCY",
    "LEFTRONIC_TIMEOUT",
    "LEFTRONIC_VALIDATE_PAYLOADS",
)


class RecordingHandler:
    """MockTransport handler that records requests and replays one canned outcome."""

    def __init__(self, status=200, body="OK", exc=None):
        self.status = status
        self.body = body
        self.exc = exc
        self.requests = []

    def __call__(self, request):
        request.read()
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(f"simulated {self.exc.__name__}", request=request)
        return httpx.Response(self.status, text=self.body)

    def documents(self):
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def config():
    return LeftronicConfig(access_key="abc", max_concurrency=2)


@pytest.fixture
def client(config, handler):
    with LeftronicClient(config, transport=httpx.MockTransport(handler)) as c:
        yield c


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores the original state even for keys
    # that python-dotenv writes later
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    return monkeypatch
