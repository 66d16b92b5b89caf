import logfire
from pydantic import Field

from careercrypt.domain.portfolio.model.value import (
    ExperienceLevel,
    PortfolioDraft,
    PortfolioId,
    WalletAddress,
)
from careercrypt.domain.portfolio.service.registry import RegistrySync
from careercrypt.domain.shared.authorization.gate import wallet_required
from careercrypt.domain.shared.command import Command, CommandHandler, Result


class PublishPortfolio(Command):
    title: str = Field(min_length=1)
    description: str = ""
    skills: list[str] | str = []
    experience_level: ExperienceLevel = Field(
        default=ExperienceLevel.INTERMEDIATE, alias="experienceLevel"
    )
    actor: WalletAddress | None = None

    model_config = {"populate_by_name": True}


class PortfolioPublished(Result):
    id: PortfolioId
    created_at: int


class PublishPortfolioHandler(CommandHandler[PublishPortfolio, PortfolioPublished]):
    __auth__ = wallet_required()
    registry: RegistrySync

    async def run(self, cmd: PublishPortfolio) -> PortfolioPublished:
        with logfire.span("PublishPortfolio"):
            draft = PortfolioDraft(
                title=cmd.title,
                description=cmd.description,
                skills=cmd.skills,
                experience_level=cmd.experience_level,
                owner=cmd.actor,
            )
            portfolio = await self.registry.publish(draft)
            return PortfolioPublished(id=portfolio.id, created_at=portfolio.created_at)
