import asyncio
import logging

from careercrypt.domain.portfolio.port.ledger import LedgerPort

logger = logging.getLogger(__name__)


class InMemoryLedger(LedgerPort):
    """Process-local ledger for development and tests.

    Each call yields to the event loop before touching the store, so
    concurrent read-modify-write cycles interleave the way they do against a
    remote ledger.
    """

    def __init__(self, data: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(data or {})
        self.available = True

    async def get(self, key: str) -> bytes | None:
        await asyncio.sleep(0)
        return self._data.get(key)

    async def set(self, key: str, value: bytes) -> None:
        await asyncio.sleep(0)
        self._data[key] = bytes(value)
        logger.debug("ledger set %s (%d bytes)", key, len(value))

    async def is_available(self) -> bool:
        return self.available

    def keys(self) -> list[str]:
        return sorted(self._data)
