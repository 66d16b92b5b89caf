import logging
import time
from collections import Counter

from careercrypt.domain.portfolio.model.aggregate import Portfolio
from careercrypt.domain.portfolio.model.value import (
    PortfolioDraft,
    PortfolioId,
    PortfolioStatus,
    RegistryStats,
)
from careercrypt.domain.portfolio.port.ledger import LedgerPort
from careercrypt.domain.portfolio.service.codec import OpaquePayloadCodec
from careercrypt.domain.portfolio.service.index import IndexManager
from careercrypt.domain.portfolio.service.store import RecordStore
from careercrypt.domain.shared.error import (
    LedgerUnavailableError,
    NotFoundError,
    OrphanedRecordError,
)
from careercrypt.domain.shared.service import Service

logger = logging.getLogger(__name__)


class RegistrySync(Service):
    """Publishes and loads portfolios across the index and per-record keys.

    Publishing is two unconditional writes: the record, then the index. There
    is no rollback and no retry, so a failure between the two leaves an
    orphan that only ``reconcile`` can bring back.
    """

    ledger: LedgerPort
    codec: OpaquePayloadCodec
    index: IndexManager
    store: RecordStore

    async def publish(self, draft: PortfolioDraft) -> Portfolio:
        portfolio = Portfolio(
            id=PortfolioId.generate(),
            title=draft.title,
            description=draft.description,
            skills=list(draft.skills),
            experience_level=draft.experience_level,
            payload=self.codec.seal(draft),
            created_at=int(time.time()),
            owner=draft.owner,
            status=PortfolioStatus.PENDING,
        )
        await self.store.create(portfolio)

        try:
            await self.index.append(portfolio.id)
        except LedgerUnavailableError as e:
            logger.error("Portfolio %s written but not indexed: %s", portfolio.id, e.message)
            raise OrphanedRecordError(
                f"Portfolio {portfolio.id} was stored but could not be indexed",
                portfolio_id=portfolio.id.root,
            ) from e

        logger.info("Published portfolio %s for %s", portfolio.id, portfolio.owner)
        return portfolio

    async def get(self, portfolio_id: PortfolioId) -> Portfolio:
        return await self.store.get(portfolio_id)

    async def load_all(self) -> list[Portfolio]:
        """Every readable indexed portfolio, newest first.

        Index entries whose record is missing or corrupt are skipped.
        """
        if not await self.ledger.is_available():
            raise LedgerUnavailableError("Ledger reports it is not available")

        portfolios: list[Portfolio] = []
        for portfolio_id in await self.index.list():
            try:
                portfolios.append(await self.store.get(portfolio_id))
            except NotFoundError as e:
                logger.warning("Skipping indexed portfolio %s (%s)", portfolio_id, e.code)

        portfolios.sort(key=lambda p: p.created_at, reverse=True)
        return portfolios

    async def reconcile(self, candidates: list[PortfolioId]) -> list[PortfolioId]:
        """Add existing but unindexed portfolios back to the index.

        Returns the ids that were adopted.
        """
        indexed = await self.index.list()
        adopted: list[PortfolioId] = []
        for portfolio_id in candidates:
            if portfolio_id in indexed or portfolio_id in adopted:
                continue
            try:
                await self.store.get(portfolio_id)
            except NotFoundError:
                logger.info("Reconcile: no readable record for %s", portfolio_id)
                continue
            await self.index.append(portfolio_id)
            adopted.append(portfolio_id)

        if adopted:
            logger.info("Reconciled %d orphaned portfolio(s)", len(adopted))
        return adopted

    async def stats(self) -> RegistryStats:
        portfolios = await self.load_all()
        counts = Counter(p.status for p in portfolios)
        return RegistryStats(
            total=len(portfolios),
            pending=counts[PortfolioStatus.PENDING],
            verified=counts[PortfolioStatus.VERIFIED],
            rejected=counts[PortfolioStatus.REJECTED],
        )
