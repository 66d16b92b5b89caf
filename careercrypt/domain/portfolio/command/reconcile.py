from careercrypt.domain.portfolio.model.value import PortfolioId
from careercrypt.domain.portfolio.service.registry import RegistrySync
from careercrypt.domain.shared.authorization.gate import public
from careercrypt.domain.shared.command import Command, CommandHandler, Result


class ReconcileIndex(Command):
    """Candidate ids believed to exist on the ledger, e.g. from publish errors."""

    candidates: list[PortfolioId]


class IndexReconciled(Result):
    adopted: list[PortfolioId]


class ReconcileIndexHandler(CommandHandler[ReconcileIndex, IndexReconciled]):
    __auth__ = public()
    registry: RegistrySync

    async def run(self, cmd: ReconcileIndex) -> IndexReconciled:
        adopted = await self.registry.reconcile(cmd.candidates)
        return IndexReconciled(adopted=adopted)
