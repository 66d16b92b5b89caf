from careercrypt.domain.portfolio.model.value import PortfolioId
from careercrypt.domain.portfolio.query.list_portfolios import PortfolioDetail
from careercrypt.domain.portfolio.service.registry import RegistrySync
from careercrypt.domain.shared.authorization.gate import public
from careercrypt.domain.shared.query import Query, QueryHandler, Result


class GetPortfolio(Query):
    id: PortfolioId


class PortfolioFound(Result):
    portfolio: PortfolioDetail


class GetPortfolioHandler(QueryHandler[GetPortfolio, PortfolioFound]):
    __auth__ = public()
    registry: RegistrySync

    async def run(self, query: GetPortfolio) -> PortfolioFound:
        portfolio = await self.registry.get(query.id)
        return PortfolioFound(portfolio=PortfolioDetail.from_portfolio(portfolio))
