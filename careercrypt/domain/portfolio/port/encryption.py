from abc import abstractmethod
from typing import Protocol

from careercrypt.domain.shared.port import Port


class EncryptionAdapter(Port, Protocol):
    """Turns plaintext into the opaque payload stored with a portfolio.

    The registry never looks inside the payload.
    """

    @abstractmethod
    def obfuscate(self, plaintext: bytes) -> str: ...

    @abstractmethod
    def deobfuscate(self, payload: str) -> bytes:
        """Reverse ``obfuscate``. Raises ``DecodeError`` for foreign payloads."""
        ...
