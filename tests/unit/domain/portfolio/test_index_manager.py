"""Tests for IndexManager."""

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest

from careercrypt.domain.portfolio.model.value import PortfolioId
from careercrypt.domain.portfolio.port.ledger import LedgerPort
from careercrypt.domain.portfolio.service.codec import OpaquePayloadCodec
from careercrypt.domain.portfolio.service.index import IndexManager
from careercrypt.domain.shared.error import LedgerUnavailableError
from careercrypt.infrastructure.ledger.memory import InMemoryLedger


class WriteFailingLedger(InMemoryLedger):
    async def set(self, key: str, value: bytes) -> None:
        raise LedgerUnavailableError(f"write to {key} rejected")


class TestList:
    @pytest.mark.asyncio
    async def test_absent_index_is_empty(self, index: IndexManager):
        assert await index.list() == []

    @pytest.mark.asyncio
    async def test_empty_blob_is_empty(self, ledger: InMemoryLedger, index: IndexManager):
        await ledger.set("portfolio_keys", b"")

        assert await index.list() == []

    @pytest.mark.asyncio
    async def test_corrupt_index_is_empty_and_logged(
        self, ledger: InMemoryLedger, index: IndexManager, caplog
    ):
        await ledger.set("portfolio_keys", b"{not json")

        with caplog.at_level(logging.WARNING):
            assert await index.list() == []

        assert "unreadable index" in caplog.text

    @pytest.mark.asyncio
    async def test_duplicates_from_other_writers_are_dropped(
        self, ledger: InMemoryLedger, index: IndexManager
    ):
        await ledger.set("portfolio_keys", b'["a","b","a","c","b"]')

        assert await index.list() == [PortfolioId("a"), PortfolioId("b"), PortfolioId("c")]

    @pytest.mark.asyncio
    async def test_read_failure_propagates(self, codec: OpaquePayloadCodec):
        ledger = AsyncMock(spec=LedgerPort)
        ledger.get.side_effect = LedgerUnavailableError("ledger offline")
        index = IndexManager(ledger=ledger, codec=codec)

        with pytest.raises(LedgerUnavailableError):
            await index.list()

    @pytest.mark.asyncio
    async def test_custom_key(self, ledger: InMemoryLedger, codec: OpaquePayloadCodec):
        index = IndexManager(ledger=ledger, codec=codec, key="staging_keys")

        await index.append(PortfolioId("a"))

        assert ledger.keys() == ["staging_keys"]


class TestAppend:
    @pytest.mark.asyncio
    async def test_creates_index(self, ledger: InMemoryLedger, index: IndexManager):
        await index.append(PortfolioId("a"))

        assert await ledger.get("portfolio_keys") == b'["a"]'

    @pytest.mark.asyncio
    async def test_preserves_insertion_order(self, index: IndexManager):
        for value in ("c", "a", "b"):
            await index.append(PortfolioId(value))

        assert await index.list() == [PortfolioId("c"), PortfolioId("a"), PortfolioId("b")]

    @pytest.mark.asyncio
    async def test_is_idempotent(self, index: IndexManager):
        await index.append(PortfolioId("a"))
        await index.append(PortfolioId("a"))

        assert await index.list() == [PortfolioId("a")]

    @pytest.mark.asyncio
    async def test_overwrites_corrupt_index(self, ledger: InMemoryLedger, index: IndexManager):
        await ledger.set("portfolio_keys", b"\x00\x01")

        await index.append(PortfolioId("a"))

        assert await index.list() == [PortfolioId("a")]

    @pytest.mark.asyncio
    async def test_write_failure_propagates(self, codec: OpaquePayloadCodec):
        index = IndexManager(ledger=WriteFailingLedger(), codec=codec)

        with pytest.raises(LedgerUnavailableError):
            await index.append(PortfolioId("a"))

    @pytest.mark.asyncio
    async def test_concurrent_appends_lose_one_id(self, index: IndexManager):
        """Both appends read the empty index before either writes."""
        await asyncio.gather(index.append(PortfolioId("id1")), index.append(PortfolioId("id2")))

        ids = await index.list()
        assert len(ids) == 1
        assert ids[0] in (PortfolioId("id1"), PortfolioId("id2"))

    @pytest.mark.asyncio
    async def test_sequential_appends_keep_both(self, index: IndexManager):
        await index.append(PortfolioId("id1"))
        await index.append(PortfolioId("id2"))

        assert await index.list() == [PortfolioId("id1"), PortfolioId("id2")]
