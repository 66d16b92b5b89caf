"""Fixtures wiring the registry services over an in-memory ledger."""

from collections.abc import Callable

import pytest

from careercrypt.domain.portfolio.model.value import (
    ExperienceLevel,
    PortfolioDraft,
    WalletAddress,
)
from careercrypt.domain.portfolio.service.codec import OpaquePayloadCodec
from careercrypt.domain.portfolio.service.index import IndexManager
from careercrypt.domain.portfolio.service.registry import RegistrySync
from careercrypt.domain.portfolio.service.review import ReviewWorkflow
from careercrypt.domain.portfolio.service.store import RecordStore
from careercrypt.infrastructure.encryption.placeholder import PlaceholderEncryption
from careercrypt.infrastructure.ledger.memory import InMemoryLedger


@pytest.fixture
def ledger() -> InMemoryLedger:
    return InMemoryLedger()


@pytest.fixture
def codec() -> OpaquePayloadCodec:
    return OpaquePayloadCodec(PlaceholderEncryption())


@pytest.fixture
def index(ledger: InMemoryLedger, codec: OpaquePayloadCodec) -> IndexManager:
    return IndexManager(ledger=ledger, codec=codec)


@pytest.fixture
def store(ledger: InMemoryLedger, codec: OpaquePayloadCodec) -> RecordStore:
    return RecordStore(ledger=ledger, codec=codec)


@pytest.fixture
def registry(
    ledger: InMemoryLedger,
    codec: OpaquePayloadCodec,
    index: IndexManager,
    store: RecordStore,
) -> RegistrySync:
    return RegistrySync(ledger=ledger, codec=codec, index=index, store=store)


@pytest.fixture
def workflow(store: RecordStore) -> ReviewWorkflow:
    return ReviewWorkflow(store=store)


@pytest.fixture
def make_draft() -> Callable[..., PortfolioDraft]:
    def _make(**overrides) -> PortfolioDraft:
        defaults = dict(
            title="Backend engineer",
            description="Seven years of distributed systems",
            skills=["Go", "Postgres"],
            experience_level=ExperienceLevel.ADVANCED,
            owner=WalletAddress("0xAA"),
        )
        defaults.update(overrides)
        return PortfolioDraft(**defaults)

    return _make
