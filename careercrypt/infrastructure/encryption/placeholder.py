import base64
import binascii

from careercrypt.domain.portfolio.port.encryption import EncryptionAdapter
from careercrypt.domain.shared.error import DecodeError


class PlaceholderEncryption(EncryptionAdapter):
    """Stand-in for FHE: a tagged base64 encoding. Provides no secrecy."""

    def __init__(self, prefix: str = "FHE-") -> None:
        self._prefix = prefix

    def obfuscate(self, plaintext: bytes) -> str:
        return self._prefix + base64.b64encode(plaintext).decode("ascii")

    def deobfuscate(self, payload: str) -> bytes:
        if not payload.startswith(self._prefix):
            raise DecodeError(f"Payload is not tagged with {self._prefix!r}")
        try:
            return base64.b64decode(payload[len(self._prefix) :], validate=True)
        except binascii.Error as e:
            raise DecodeError(f"Payload is not valid base64: {e}") from e
