from __future__ import annotations

import pytest
import requests

from aoc_scaffold.api import InputError, InputLoader, StaticInputProvider
from aoc_scaffold.api import inputs as inputs_module


class _FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


def test_loader_sends_session_cookie(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def fake_get(url, **kwargs):
        calls.append((url, kwargs))
        return _FakeResponse(b"1\n2\n3\n")

    monkeypatch.setattr(inputs_module.requests, "get", fake_get)

    text = InputLoader(session="abc123").load_input(2022, 25)

    assert text == "1\n2\n3\n"
    assert len(calls) == 1
    url, kwargs = calls[0]
    assert url == "https://adventofcode.com/2022/day/25/input"
    assert kwargs["headers"]["Cookie"] == "session=abc123"
    assert kwargs["headers"]["User-Agent"].startswith("aoc-scaffold/")
    assert kwargs["timeout"] == 30.0


def test_loader_wraps_transport_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_get(*_args, **_kwargs):
        raise requests.ConnectionError("boom")

    monkeypatch.setattr(inputs_module.requests, "get", fake_get)

    with pytest.raises(InputError) as excinfo:
        InputLoader(session="abc").load_input(2022, 1)

    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_loader_rejected_session_is_an_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        inputs_module.requests,
        "get",
        lambda *_args, **_kwargs: _FakeResponse(b"Puzzle inputs differ by user.  Please log in.", 400),
    )

    with pytest.raises(InputError, match="2022/1"):
        InputLoader(session="expired").load_input(2022, 1)


def test_loader_rejects_non_text_body(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(inputs_module.requests, "get", lambda *_args, **_kwargs: _FakeResponse(b"\xff\xfe\xfa"))

    with pytest.raises(InputError):
        InputLoader(session="abc").load_input(2022, 1)


def test_loader_base_url_override() -> None:
    loader = InputLoader(session="abc", base_url="http://localhost:8000/")
    assert loader.url_for(2015, 3) == "http://localhost:8000/2015/day/3/input"


def test_static_provider_is_deterministic() -> None:
    provider = StaticInputProvider()
    assert provider.load_input(2022, 25) == "Test input for 2022/25\n"
    assert provider.load_input(2022, 25) == provider.load_input(2022, 25)
