import json

import pytest
import requests

from object_compare import loader as loader_module
from object_compare.config import LoaderConfig
from object_compare.errors import DocumentLoadError
from object_compare.loader import DocumentLoader, JsonObject, is_url


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_is_url():
    assert is_url("https://example.com/a.json")
    assert is_url("http://example.com")
    assert not is_url("data/a.json")
    assert not is_url("C:/data/a.json")


def test_load_local_file_exposes_keys_as_attributes(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text(json.dumps({"id": 1, "items": [{"sku": "a"}]}), encoding="utf-8")
    document = DocumentLoader().load(str(path))
    assert isinstance(document, JsonObject)
    assert document.id == 1
    assert document.items[0].sku == "a"


def test_missing_file_raises(tmp_path):
    with pytest.raises(DocumentLoadError):
        DocumentLoader().load(str(tmp_path / "missing.json"))


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DocumentLoadError):
        DocumentLoader().load(str(path))


def test_url_sources_use_requests(monkeypatch):
    calls = []

    def fake_get(url, timeout, headers):
        calls.append((url, timeout, headers))
        return FakeResponse('{"ok": true}')

    monkeypatch.setattr(loader_module.requests, "get", fake_get)
    document = DocumentLoader(LoaderConfig(timeout=3.0, user_agent="tests/1.0")).load("https://api.test/doc")
    assert document.ok is True
    assert calls == [
        ("https://api.test/doc", 3.0, {"User-Agent": "tests/1.0", "Accept": "application/json"})
    ]


def test_http_errors_become_load_errors(monkeypatch):
    monkeypatch.setattr(loader_module.requests, "get", lambda url, timeout, headers: FakeResponse("", 503))
    with pytest.raises(DocumentLoadError):
        DocumentLoader().load("https://api.test/doc")


def test_session_is_preferred_over_module_get(monkeypatch):
    class Session:
        def get(self, url, timeout, headers):
            return FakeResponse("[1, 2]")

    monkeypatch.setattr(loader_module.requests, "get", lambda *a, **k: pytest.fail("module get used"))
    assert DocumentLoader(session=Session()).load("https://api.test/list") == [1, 2]
