"""Tests for HttpLedger using httpx.MockTransport."""

from collections.abc import Callable

import httpx
import pytest

from careercrypt.domain.shared.error import LedgerUnavailableError
from careercrypt.infrastructure.ledger.http import HttpLedger


def _make_ledger(handler: Callable[[httpx.Request], httpx.Response]) -> HttpLedger:
    client = httpx.AsyncClient(
        base_url="http://ledger.test", transport=httpx.MockTransport(handler)
    )
    return HttpLedger(client=client)


def _refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


class TestGet:
    @pytest.mark.asyncio
    async def test_returns_body(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b'["a"]')

        ledger = _make_ledger(handler)

        assert await ledger.get("portfolio_keys") == b'["a"]'
        assert seen[0].method == "GET"
        assert seen[0].url.path == "/data/portfolio_keys"

    @pytest.mark.asyncio
    async def test_key_is_escaped_into_one_path_segment(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(404)

        ledger = _make_ledger(handler)

        await ledger.get("portfolio_x/../../health?y#z")

        assert seen[0].url.raw_path == b"/data/portfolio_x%2F..%2F..%2Fhealth%3Fy%23z"

    @pytest.mark.asyncio
    async def test_unknown_key_is_none(self):
        ledger = _make_ledger(lambda request: httpx.Response(404))

        assert await ledger.get("portfolio_missing") is None

    @pytest.mark.asyncio
    async def test_empty_value_is_not_none(self):
        ledger = _make_ledger(lambda request: httpx.Response(200, content=b""))

        assert await ledger.get("portfolio_keys") == b""

    @pytest.mark.asyncio
    async def test_server_error_is_unavailable(self):
        ledger = _make_ledger(lambda request: httpx.Response(500))

        with pytest.raises(LedgerUnavailableError):
            await ledger.get("portfolio_keys")

    @pytest.mark.asyncio
    async def test_transport_error_is_unavailable(self):
        ledger = _make_ledger(_refuse)

        with pytest.raises(LedgerUnavailableError):
            await ledger.get("portfolio_keys")


class TestSet:
    @pytest.mark.asyncio
    async def test_puts_raw_bytes(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(204)

        ledger = _make_ledger(handler)

        await ledger.set("portfolio_abc", b'{"status":"pending"}')

        assert seen[0].method == "PUT"
        assert seen[0].url.path == "/data/portfolio_abc"
        assert seen[0].content == b'{"status":"pending"}'
        assert seen[0].headers["content-type"] == "application/octet-stream"

    @pytest.mark.asyncio
    async def test_put_key_is_escaped(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(204)

        ledger = _make_ledger(handler)

        await ledger.set("portfolio_a?b", b"{}")

        assert seen[0].url.raw_path == b"/data/portfolio_a%3Fb"

    @pytest.mark.asyncio
    async def test_rejected_write_is_unavailable(self):
        ledger = _make_ledger(lambda request: httpx.Response(503))

        with pytest.raises(LedgerUnavailableError):
            await ledger.set("portfolio_abc", b"{}")

    @pytest.mark.asyncio
    async def test_transport_error_is_unavailable(self):
        ledger = _make_ledger(_refuse)

        with pytest.raises(LedgerUnavailableError):
            await ledger.set("portfolio_abc", b"{}")


class TestIsAvailable:
    @pytest.mark.asyncio
    async def test_healthy(self):
        ledger = _make_ledger(lambda request: httpx.Response(200))

        assert await ledger.is_available() is True

    @pytest.mark.asyncio
    async def test_unhealthy_status(self):
        ledger = _make_ledger(lambda request: httpx.Response(503))

        assert await ledger.is_available() is False

    @pytest.mark.asyncio
    async def test_unreachable(self):
        ledger = _make_ledger(_refuse)

        assert await ledger.is_available() is False
