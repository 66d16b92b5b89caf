from dishka import provide

from careercrypt.config import Config
from careercrypt.domain.portfolio.command.publish import PublishPortfolioHandler
from careercrypt.domain.portfolio.command.reconcile import ReconcileIndexHandler
from careercrypt.domain.portfolio.command.review import (
    ApprovePortfolioHandler,
    RejectPortfolioHandler,
)
from careercrypt.domain.portfolio.model.policy import OwnerReviewPolicy, ReviewPolicy
from careercrypt.domain.portfolio.port.encryption import EncryptionAdapter
from careercrypt.domain.portfolio.port.ledger import LedgerPort
from careercrypt.domain.portfolio.query.get_portfolio import GetPortfolioHandler
from careercrypt.domain.portfolio.query.list_portfolios import ListPortfoliosHandler
from careercrypt.domain.portfolio.query.stats import GetRegistryStatsHandler
from careercrypt.domain.portfolio.service.codec import OpaquePayloadCodec
from careercrypt.domain.portfolio.service.index import IndexManager
from careercrypt.domain.portfolio.service.registry import RegistrySync
from careercrypt.domain.portfolio.service.review import ReviewWorkflow
from careercrypt.domain.portfolio.service.store import RecordStore
from careercrypt.util.di.base import Provider
from careercrypt.util.di.scope import Scope


class PortfolioProvider(Provider):
    @provide(scope=Scope.APP)
    def get_codec(self, encryption: EncryptionAdapter) -> OpaquePayloadCodec:
        return OpaquePayloadCodec(encryption)

    @provide(scope=Scope.APP)
    def get_review_policy(self) -> ReviewPolicy:
        return OwnerReviewPolicy()

    @provide(scope=Scope.UOW)
    def get_index_manager(
        self, ledger: LedgerPort, codec: OpaquePayloadCodec, config: Config
    ) -> IndexManager:
        return IndexManager(ledger=ledger, codec=codec, key=config.ledger.index_key)

    @provide(scope=Scope.UOW)
    def get_record_store(
        self, ledger: LedgerPort, codec: OpaquePayloadCodec, config: Config
    ) -> RecordStore:
        return RecordStore(ledger=ledger, codec=codec, prefix=config.ledger.record_prefix)

    @provide(scope=Scope.UOW)
    def get_registry(
        self,
        ledger: LedgerPort,
        codec: OpaquePayloadCodec,
        index: IndexManager,
        store: RecordStore,
    ) -> RegistrySync:
        return RegistrySync(ledger=ledger, codec=codec, index=index, store=store)

    @provide(scope=Scope.UOW)
    def get_review_workflow(self, store: RecordStore, policy: ReviewPolicy) -> ReviewWorkflow:
        return ReviewWorkflow(store=store, policy=policy)

    # Command Handlers
    publish_handler = provide(PublishPortfolioHandler, scope=Scope.UOW)
    approve_handler = provide(ApprovePortfolioHandler, scope=Scope.UOW)
    reject_handler = provide(RejectPortfolioHandler, scope=Scope.UOW)
    reconcile_handler = provide(ReconcileIndexHandler, scope=Scope.UOW)

    # Query Handlers
    list_handler = provide(ListPortfoliosHandler, scope=Scope.UOW)
    get_handler = provide(GetPortfolioHandler, scope=Scope.UOW)
    stats_handler = provide(GetRegistryStatsHandler, scope=Scope.UOW)
