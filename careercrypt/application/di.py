from dishka import AsyncContainer, from_context, make_async_container

from careercrypt.config import Config
from careercrypt.domain.portfolio.util.di import PortfolioProvider
from careercrypt.infrastructure.ledger.di import LedgerProvider
from careercrypt.util.di.base import Provider
from careercrypt.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None) -> AsyncContainer:
    config = config or Config()

    return make_async_container(
        ConfigProvider(),
        LedgerProvider(),
        PortfolioProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
