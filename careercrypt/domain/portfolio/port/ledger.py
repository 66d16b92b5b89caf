from abc import abstractmethod
from typing import Protocol

from careercrypt.domain.shared.port import Port


class LedgerPort(Port, Protocol):
    """Read/write access to the external key-value ledger.

    The ledger offers unconditional single-key reads and writes only: no
    transactions, no compare-and-swap, no append. Every method is a network
    round trip; adapters raise ``LedgerUnavailableError`` on any failure.
    """

    @abstractmethod
    async def get(self, key: str) -> bytes | None:
        """Return the value at ``key``.

        ``None`` means the key was never written; ``b""`` means it was
        written with an empty value.
        """
        ...

    @abstractmethod
    async def set(self, key: str, value: bytes) -> None:
        """Overwrite ``key`` with ``value`` (last writer wins)."""
        ...

    @abstractmethod
    async def is_available(self) -> bool:
        """Probe whether the ledger currently accepts calls."""
        ...
