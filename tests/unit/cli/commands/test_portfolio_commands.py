"""Tests for the portfolio CLI commands."""

from typing import Any

import httpx
import pytest

from careercrypt.cli import console
from careercrypt.cli.commands import portfolios


class _FakeServer:
    """Stands in for httpx.request, recording calls."""

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        error: Exception | None = None,
        text: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.payload = payload
        self.text = text
        self.error = error
        self.calls: list[tuple[str, str, dict[str, str]]] = []

    def __call__(self, method: str, url: str, headers: dict[str, str]) -> httpx.Response:
        self.calls.append((method, url, headers))
        if self.error is not None:
            raise self.error
        request = httpx.Request(method, url)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text, request=request)
        return httpx.Response(self.status_code, json=self.payload, request=request)


@pytest.fixture(autouse=True)
def _fresh_console(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(console, "_default", None)
    monkeypatch.setenv("CAREERCRYPT_SERVER", "http://registry.test")


def _install(monkeypatch: pytest.MonkeyPatch, server: _FakeServer) -> _FakeServer:
    monkeypatch.setattr(portfolios.httpx, "request", server)
    return server


class TestApprove:
    def test_sends_wallet_header(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        server = _install(monkeypatch, _FakeServer(payload={"id": "p1", "status": "verified"}))

        portfolios.approve("p1", wallet="0xAA")

        assert server.calls == [
            ("POST", "http://registry.test/portfolios/p1/approve", {"X-Wallet-Address": "0xAA"})
        ]
        assert "p1 is now verified" in capsys.readouterr().out

    def test_error_detail_printed(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        payload = {"detail": {"code": "access_denied", "message": "Wallet 0xBB may not review"}}
        _install(monkeypatch, _FakeServer(status_code=403, payload=payload))

        with pytest.raises(SystemExit) as exc_info:
            portfolios.approve("p1", wallet="0xBB")

        assert exc_info.value.code == 1
        assert "Wallet 0xBB may not review" in capsys.readouterr().err


class TestList:
    def test_prints_table(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        item = {
            "id": "p1",
            "title": "Rust developer",
            "skills": ["Rust"],
            "experienceLevel": "Expert",
            "owner": "0xAA",
            "status": "pending",
        }
        server = _install(monkeypatch, _FakeServer(payload={"items": [item], "total": 1}))

        portfolios.list_portfolios()

        assert server.calls[0][:2] == ("GET", "http://registry.test/portfolios")
        assert "Rust developer" in capsys.readouterr().out

    def test_server_down(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        _install(monkeypatch, _FakeServer(error=httpx.ConnectError("refused")))

        with pytest.raises(SystemExit):
            portfolios.list_portfolios()

        assert "Could not connect" in capsys.readouterr().err

    def test_non_json_error_page(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        _install(monkeypatch, _FakeServer(status_code=502, text="<html>Bad Gateway</html>"))

        with pytest.raises(SystemExit) as exc_info:
            portfolios.list_portfolios()

        assert exc_info.value.code == 1
        assert "502: <html>Bad Gateway</html>" in capsys.readouterr().err
