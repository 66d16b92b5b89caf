import logging

from careercrypt.domain.portfolio.model.value import PortfolioId
from careercrypt.domain.portfolio.port.ledger import LedgerPort
from careercrypt.domain.portfolio.service.codec import OpaquePayloadCodec
from careercrypt.domain.shared.error import DecodeError
from careercrypt.domain.shared.service import Service

logger = logging.getLogger(__name__)

DEFAULT_INDEX_KEY = "portfolio_keys"


class IndexManager(Service):
    """Owns the single ledger key listing every portfolio id.

    Updates are read-modify-write cycles over an unconditional ``set``. Two
    clients appending at the same time can each read the same index and the
    later write drops the other's id (last writer wins).
    """

    ledger: LedgerPort
    codec: OpaquePayloadCodec
    key: str = DEFAULT_INDEX_KEY

    async def list(self) -> list[PortfolioId]:
        """Return the indexed ids in insertion order.

        A missing, empty or corrupt index reads as empty. Ledger failures
        propagate.
        """
        blob = await self.ledger.get(self.key)
        if not blob:
            return []
        try:
            ids = self.codec.decode_index(blob)
        except DecodeError as e:
            logger.warning("Ignoring unreadable index at %s: %s", self.key, e.message)
            return []

        unique: list[PortfolioId] = []
        for portfolio_id in ids:
            if portfolio_id not in unique:
                unique.append(portfolio_id)
        return unique

    async def append(self, portfolio_id: PortfolioId) -> None:
        ids = await self.list()
        if portfolio_id not in ids:
            ids.append(portfolio_id)
        await self.ledger.set(self.key, self.codec.encode_index(ids))
        logger.debug("Index %s now holds %d id(s)", self.key, len(ids))
