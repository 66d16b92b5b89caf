import logfire

from careercrypt.domain.portfolio.model.value import PortfolioId, PortfolioStatus, WalletAddress
from careercrypt.domain.portfolio.service.review import ReviewWorkflow
from careercrypt.domain.shared.authorization.gate import wallet_required
from careercrypt.domain.shared.command import Command, CommandHandler, Result


class ApprovePortfolio(Command):
    id: PortfolioId
    actor: WalletAddress | None = None


class RejectPortfolio(Command):
    id: PortfolioId
    actor: WalletAddress | None = None


class PortfolioReviewed(Result):
    id: PortfolioId
    status: PortfolioStatus


class ApprovePortfolioHandler(CommandHandler[ApprovePortfolio, PortfolioReviewed]):
    __auth__ = wallet_required()
    workflow: ReviewWorkflow

    async def run(self, cmd: ApprovePortfolio) -> PortfolioReviewed:
        with logfire.span("ApprovePortfolio"):
            portfolio = await self.workflow.approve(cmd.id, cmd.actor)
            return PortfolioReviewed(id=portfolio.id, status=portfolio.status)


class RejectPortfolioHandler(CommandHandler[RejectPortfolio, PortfolioReviewed]):
    __auth__ = wallet_required()
    workflow: ReviewWorkflow

    async def run(self, cmd: RejectPortfolio) -> PortfolioReviewed:
        with logfire.span("RejectPortfolio"):
            portfolio = await self.workflow.reject(cmd.id, cmd.actor)
            return PortfolioReviewed(id=portfolio.id, status=portfolio.status)
