"""Portfolio REST routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from careercrypt.domain.portfolio.command.publish import (
    PortfolioPublished,
    PublishPortfolio,
    PublishPortfolioHandler,
)
from careercrypt.domain.portfolio.command.reconcile import (
    IndexReconciled,
    ReconcileIndex,
    ReconcileIndexHandler,
)
from careercrypt.domain.portfolio.command.review import (
    ApprovePortfolio,
    ApprovePortfolioHandler,
    PortfolioReviewed,
    RejectPortfolio,
    RejectPortfolioHandler,
)
from careercrypt.domain.portfolio.model.value import PortfolioId, WalletAddress
from careercrypt.domain.portfolio.query.get_portfolio import (
    GetPortfolio,
    GetPortfolioHandler,
    PortfolioFound,
)
from careercrypt.domain.portfolio.query.list_portfolios import (
    ListPortfolios,
    ListPortfoliosHandler,
    PortfolioList,
)
from careercrypt.domain.portfolio.query.stats import (
    GetRegistryStats,
    GetRegistryStatsHandler,
    RegistryStatsResult,
)

router = APIRouter(prefix="/portfolios", tags=["Portfolios"], route_class=DishkaRoute)

WalletHeader = Annotated[str | None, Header(alias="X-Wallet-Address")]


def _actor(wallet: str | None) -> WalletAddress | None:
    return WalletAddress(wallet) if wallet else None


@router.post("", response_model=PortfolioPublished, status_code=201)
async def publish_portfolio(
    body: PublishPortfolio,
    handler: FromDishka[PublishPortfolioHandler],
    wallet: WalletHeader = None,
) -> PortfolioPublished:
    cmd = body.model_copy(update={"actor": _actor(wallet)})
    return await handler.run(cmd)


@router.get("", response_model=PortfolioList)
async def list_portfolios(handler: FromDishka[ListPortfoliosHandler]) -> PortfolioList:
    return await handler.run(ListPortfolios())


@router.get("/stats", response_model=RegistryStatsResult)
async def registry_stats(handler: FromDishka[GetRegistryStatsHandler]) -> RegistryStatsResult:
    return await handler.run(GetRegistryStats())


@router.post("/reconcile", response_model=IndexReconciled)
async def reconcile_index(
    body: ReconcileIndex,
    handler: FromDishka[ReconcileIndexHandler],
) -> IndexReconciled:
    return await handler.run(body)


@router.get("/{portfolio_id}", response_model=PortfolioFound)
async def get_portfolio(
    portfolio_id: str,
    handler: FromDishka[GetPortfolioHandler],
) -> PortfolioFound:
    return await handler.run(GetPortfolio(id=PortfolioId(portfolio_id)))


@router.post("/{portfolio_id}/approve", response_model=PortfolioReviewed)
async def approve_portfolio(
    portfolio_id: str,
    handler: FromDishka[ApprovePortfolioHandler],
    wallet: WalletHeader = None,
) -> PortfolioReviewed:
    return await handler.run(ApprovePortfolio(id=PortfolioId(portfolio_id), actor=_actor(wallet)))


@router.post("/{portfolio_id}/reject", response_model=PortfolioReviewed)
async def reject_portfolio(
    portfolio_id: str,
    handler: FromDishka[RejectPortfolioHandler],
    wallet: WalletHeader = None,
) -> PortfolioReviewed:
    return await handler.run(RejectPortfolio(id=PortfolioId(portfolio_id), actor=_actor(wallet)))
