from careercrypt.domain.portfolio.service.registry import RegistrySync
from careercrypt.domain.shared.authorization.gate import public
from careercrypt.domain.shared.query import Query, QueryHandler, Result


class GetRegistryStats(Query):
    pass


class RegistryStatsResult(Result):
    total: int
    pending: int
    verified: int
    rejected: int


class GetRegistryStatsHandler(QueryHandler[GetRegistryStats, RegistryStatsResult]):
    __auth__ = public()
    registry: RegistrySync

    async def run(self, query: GetRegistryStats) -> RegistryStatsResult:
        stats = await self.registry.stats()
        return RegistryStatsResult(**stats.model_dump())
