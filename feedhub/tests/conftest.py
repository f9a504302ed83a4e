# feedhub/tests/conftest.py
import json

import pytest

from feedhub.config import Settings
from feedhub.tests.helpers import FakeWeb


@pytest.fixture()
def web(monkeypatch):
    from feedhub.feeds import http
    fake = FakeWeb()
    monkeypatch.setattr(http, "fetch_text", fake, raising=True)
    return fake


@pytest.fixture()
def sources_file(tmp_path):
    def _write(news=(), products=(), videos=()):
        path = tmp_path / "sources.json"
        path.write_text(json.dumps({
            "news": list(news),
            "products": list(products),
            "videos": list(videos),
        }), encoding="utf-8")
        return path
    return _write


@pytest.fixture()
def make_client(sources_file):
    from fastapi.testclient import TestClient
    from feedhub.api.main import create_app

    clients = []

    def _make(**sources):
        settings = Settings(sources_path=sources_file(**sources))
        client = TestClient(create_app(settings))
        client.__enter__()  # dispara o lifespan (carrega o registro)
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.__exit__(None, None, None)
