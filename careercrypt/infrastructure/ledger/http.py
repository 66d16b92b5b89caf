"""HTTP adapter for LedgerPort."""

import logging
from urllib.parse import quote

import httpx
import logfire

from careercrypt.domain.portfolio.port.ledger import LedgerPort
from careercrypt.domain.shared.error import LedgerUnavailableError

logger = logging.getLogger(__name__)


def _data_path(key: str) -> str:
    # Keys are opaque; URL metacharacters in them are escaped
    return f"/data/{quote(key, safe='')}"


class HttpLedger(LedgerPort):
    """Talks to a ledger gateway exposing ``/data/{key}`` and ``/health``.

    ``GET`` answers 404 for keys that were never written. Every transport
    error or unexpected status becomes ``LedgerUnavailableError``.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get(self, key: str) -> bytes | None:
        try:
            response = await self._client.get(_data_path(key))
            if response.status_code == 404:
                return None
            response.raise_for_status()
        except httpx.HTTPError as e:
            logfire.warn("Ledger read failed", key=key, error=str(e))
            raise LedgerUnavailableError(f"Ledger read failed for {key}: {e}") from e
        return response.content

    async def set(self, key: str, value: bytes) -> None:
        try:
            response = await self._client.put(
                _data_path(key),
                content=value,
                headers={"Content-Type": "application/octet-stream"},
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logfire.warn("Ledger write failed", key=key, error=str(e))
            raise LedgerUnavailableError(f"Ledger write failed for {key}: {e}") from e

    async def is_available(self) -> bool:
        try:
            response = await self._client.get("/health")
        except httpx.HTTPError as e:
            logger.warning("Ledger health probe failed: %s", e)
            return False
        return response.status_code == 200
