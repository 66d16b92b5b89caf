import logging

from careercrypt.domain.portfolio.model.aggregate import Portfolio
from careercrypt.domain.portfolio.model.policy import OwnerReviewPolicy, ReviewPolicy
from careercrypt.domain.portfolio.model.value import PortfolioId, PortfolioStatus, WalletAddress
from careercrypt.domain.portfolio.service.store import RecordStore
from careercrypt.domain.shared.error import AuthorizationError
from careercrypt.domain.shared.service import Service

logger = logging.getLogger(__name__)


class ReviewWorkflow(Service):
    """Moves pending portfolios to verified or rejected."""

    store: RecordStore
    policy: ReviewPolicy = OwnerReviewPolicy()

    async def approve(self, portfolio_id: PortfolioId, actor: WalletAddress) -> Portfolio:
        return await self._transition(portfolio_id, actor, PortfolioStatus.VERIFIED)

    async def reject(self, portfolio_id: PortfolioId, actor: WalletAddress) -> Portfolio:
        return await self._transition(portfolio_id, actor, PortfolioStatus.REJECTED)

    async def _transition(
        self,
        portfolio_id: PortfolioId,
        actor: WalletAddress,
        target: PortfolioStatus,
    ) -> Portfolio:
        portfolio = await self.store.get(portfolio_id)
        # Raises InvalidTransitionError before any write
        portfolio.transition_to(target)

        if not self.policy.evaluate(actor, portfolio):
            raise AuthorizationError(
                f"Wallet {actor} may not review portfolio {portfolio_id}",
                code="access_denied",
            )

        updated = await self.store.set_status(portfolio_id, target)
        logger.info("Portfolio %s marked %s by %s", portfolio_id, target, actor)
        return updated
