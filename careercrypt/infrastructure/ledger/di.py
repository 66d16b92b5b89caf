"""DI provider for the ledger and encryption adapters."""

from collections.abc import AsyncIterable

import httpx
from dishka import provide

from careercrypt.config import Config
from careercrypt.domain.portfolio.port.encryption import EncryptionAdapter
from careercrypt.domain.portfolio.port.ledger import LedgerPort
from careercrypt.infrastructure.encryption.placeholder import PlaceholderEncryption
from careercrypt.infrastructure.ledger.http import HttpLedger
from careercrypt.infrastructure.ledger.memory import InMemoryLedger
from careercrypt.util.di.base import Provider
from careercrypt.util.di.scope import Scope


class LedgerProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_ledger(self, config: Config) -> AsyncIterable[LedgerPort]:
        if config.ledger.backend == "memory":
            yield InMemoryLedger()
            return

        async with httpx.AsyncClient(
            base_url=config.ledger.url,
            timeout=httpx.Timeout(config.ledger.timeout),
        ) as client:
            yield HttpLedger(client=client)

    @provide(scope=Scope.APP)
    def get_encryption(self, config: Config) -> EncryptionAdapter:
        return PlaceholderEncryption(prefix=config.encryption.prefix)
