"""Serialization between domain values and the opaque blobs stored on the ledger."""

import json
from typing import Any

import pydantic
from pydantic import TypeAdapter

from careercrypt.domain.portfolio.model.aggregate import Portfolio
from careercrypt.domain.portfolio.model.value import PortfolioDraft, PortfolioId
from careercrypt.domain.portfolio.port.encryption import EncryptionAdapter
from careercrypt.domain.shared.error import DecodeError

_INDEX_ADAPTER = TypeAdapter(list[PortfolioId])


def canonical_json(value: Any) -> bytes:
    """UTF-8 JSON with sorted keys and no insignificant whitespace."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8"
    )


class OpaquePayloadCodec:
    """Encodes the key index and portfolios, and seals drafts into payloads.

    Decoding raises ``DecodeError`` for anything that is not a well-formed
    blob. Callers in the storage layer translate that into "absent".
    """

    def __init__(self, encryption: EncryptionAdapter) -> None:
        self._encryption = encryption

    def encode_index(self, ids: list[PortfolioId]) -> bytes:
        return canonical_json(_INDEX_ADAPTER.dump_python(ids, mode="json"))

    def decode_index(self, blob: bytes) -> list[PortfolioId]:
        data = _load(blob)
        try:
            return _INDEX_ADAPTER.validate_python(data)
        except pydantic.ValidationError as e:
            raise DecodeError(f"Malformed portfolio index: {e.error_count()} error(s)") from e

    def encode_portfolio(self, portfolio: Portfolio) -> bytes:
        return canonical_json(portfolio.model_dump(mode="json", by_alias=True, exclude={"id"}))

    def decode_portfolio(self, portfolio_id: PortfolioId, blob: bytes) -> Portfolio:
        data = _load(blob)
        if not isinstance(data, dict):
            raise DecodeError(f"Portfolio {portfolio_id} is not a JSON object")
        try:
            return Portfolio.model_validate({**data, "id": portfolio_id})
        except pydantic.ValidationError as e:
            raise DecodeError(
                f"Malformed portfolio {portfolio_id}: {e.error_count()} error(s)"
            ) from e

    def seal(self, draft: PortfolioDraft) -> str:
        """Produce the opaque payload for a draft."""
        return self._encryption.obfuscate(canonical_json(draft.model_dump(mode="json", by_alias=True)))

    def unseal(self, payload: str) -> PortfolioDraft:
        plaintext = self._encryption.deobfuscate(payload)
        try:
            return PortfolioDraft.model_validate(_load(plaintext))
        except pydantic.ValidationError as e:
            raise DecodeError("Payload does not contain a portfolio draft") from e


def _load(blob: bytes) -> Any:
    if not blob:
        raise DecodeError("Empty blob")
    try:
        return json.loads(blob.decode("utf-8"))
    except (ValueError, RecursionError) as e:
        # RecursionError: nesting deeper than the JSON decoder can follow
        raise DecodeError(f"Blob is not UTF-8 JSON: {e}") from e
