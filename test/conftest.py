import json
from typing import Any, Dict, List, Optional

import pytest

from app.config import reset_dotenv_state
from tool_box.tools_impl.web_search.providers import bigmodel_rest


class FakeResponse:
    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self._body = body

    async def text(self) -> str:
        return self._body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


class FakeHTTP:
    """Stands in for aiohttp.ClientSession and records every POST."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.session_kwargs: List[Dict[str, Any]] = []
        self.status = 200
        self.body = json.dumps({"id": "resp-1", "created": 1700000000, "search_result": []})
        self.error: Optional[BaseException] = None

    def respond(self, status: int = 200, payload: Any = None, *, raw: Optional[str] = None) -> None:
        self.status = status
        self.body = raw if raw is not None else json.dumps(payload)

    def fail_with(self, error: BaseException) -> None:
        self.error = error

    def session_factory(self, **kwargs: Any) -> "_FakeSession":
        self.session_kwargs.append(kwargs)
        return _FakeSession(self)


class _FakeSession:
    def __init__(self, http: FakeHTTP) -> None:
        self._http = http

    async def __aenter__(self) -> "_FakeSession":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None

    def post(self, url: str, *, headers: Dict[str, str], json: Dict[str, Any]) -> FakeResponse:
        self._http.calls.append({"url": url, "headers": dict(headers), "json": dict(json)})
        if self._http.error is not None:
            raise self._http.error
        return FakeResponse(self._http.status, self._http.body)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ("BIGMODEL_API_KEY", "BIGMODEL_WEB_SEARCH_URL", "WEB_SEARCH_BIGMODEL_TIMEOUT"):
        # set first so teardown also removes values loaded from a .env file
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    reset_dotenv_state()
    yield
    reset_dotenv_state()


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("BIGMODEL_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def fake_http(monkeypatch):
    http = FakeHTTP()
    monkeypatch.setattr(bigmodel_rest.aiohttp, "ClientSession", http.session_factory)
    return http


@pytest.fixture
def sample_results():
    return [
        {
            "title": "Python 3.13 released",
            "content": "The new release brings a JIT.",
            "link": "https://python.org/news",
            "media": "python.org",
            "icon": "https://python.org/favicon.ico",
            "refer": "ref_1",
            "publish_date": "2024-10-07",
        },
        {
            "title": "asyncio tips",
            "content": "Use TaskGroup.",
            "link": "https://example.com/asyncio",
        },
    ]


