from pydantic import BaseModel, ConfigDict, Field

from careercrypt.domain.portfolio.model.aggregate import Portfolio
from careercrypt.domain.portfolio.model.value import (
    ExperienceLevel,
    PortfolioId,
    PortfolioStatus,
    WalletAddress,
)
from careercrypt.domain.portfolio.service.registry import RegistrySync
from careercrypt.domain.shared.authorization.gate import public
from careercrypt.domain.shared.query import Query, QueryHandler, Result


class PortfolioDetail(BaseModel):
    """A portfolio as returned to API clients, using the original field names."""

    model_config = ConfigDict(populate_by_name=True)

    id: PortfolioId
    title: str
    description: str
    skills: list[str]
    experience_level: ExperienceLevel = Field(alias="experienceLevel")
    payload: str = Field(alias="encryptedData")
    created_at: int = Field(alias="timestamp")
    owner: WalletAddress
    status: PortfolioStatus

    @classmethod
    def from_portfolio(cls, portfolio: Portfolio) -> "PortfolioDetail":
        return cls(
            id=portfolio.id,
            title=portfolio.title,
            description=portfolio.description,
            skills=portfolio.skills,
            experience_level=portfolio.experience_level,
            payload=portfolio.payload,
            created_at=portfolio.created_at,
            owner=portfolio.owner,
            status=portfolio.status,
        )


class ListPortfolios(Query):
    pass


class PortfolioList(Result):
    items: list[PortfolioDetail]
    total: int


class ListPortfoliosHandler(QueryHandler[ListPortfolios, PortfolioList]):
    __auth__ = public()
    registry: RegistrySync

    async def run(self, query: ListPortfolios) -> PortfolioList:
        portfolios = await self.registry.load_all()
        return PortfolioList(
            items=[PortfolioDetail.from_portfolio(p) for p in portfolios],
            total=len(portfolios),
        )
