import logging

from careercrypt.domain.portfolio.model.aggregate import Portfolio
from careercrypt.domain.portfolio.model.value import PortfolioId, PortfolioStatus
from careercrypt.domain.portfolio.port.ledger import LedgerPort
from careercrypt.domain.portfolio.service.codec import OpaquePayloadCodec
from careercrypt.domain.shared.error import DecodeError, NotFoundError
from careercrypt.domain.shared.service import Service

logger = logging.getLogger(__name__)

DEFAULT_RECORD_PREFIX = "portfolio_"


class RecordStore(Service):
    """One ledger key per portfolio, holding its encoded state."""

    ledger: LedgerPort
    codec: OpaquePayloadCodec
    prefix: str = DEFAULT_RECORD_PREFIX

    def key_for(self, portfolio_id: PortfolioId) -> str:
        return f"{self.prefix}{portfolio_id.root}"

    async def create(self, portfolio: Portfolio) -> None:
        await self.ledger.set(self.key_for(portfolio.id), self.codec.encode_portfolio(portfolio))

    async def get(self, portfolio_id: PortfolioId) -> Portfolio:
        blob = await self.ledger.get(self.key_for(portfolio_id))
        if not blob:
            raise NotFoundError(f"Portfolio not found: {portfolio_id}", code="portfolio_missing")
        try:
            return self.codec.decode_portfolio(portfolio_id, blob)
        except DecodeError as e:
            logger.warning("Unreadable portfolio %s: %s", portfolio_id, e.message)
            raise NotFoundError(
                f"Portfolio not found: {portfolio_id}", code="portfolio_corrupt"
            ) from e

    async def set_status(self, portfolio_id: PortfolioId, status: PortfolioStatus) -> Portfolio:
        """Rewrite only the status of a stored portfolio.

        Not guarded against concurrent writers: the last ``set`` wins.
        """
        portfolio = await self.get(portfolio_id)
        portfolio.status = status
        await self.ledger.set(self.key_for(portfolio_id), self.codec.encode_portfolio(portfolio))
        return portfolio
