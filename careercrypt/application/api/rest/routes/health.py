from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from careercrypt.domain.portfolio.port.ledger import LedgerPort

router = APIRouter(tags=["Health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    ledger: bool


@router.get("/health", response_model=HealthResponse)
async def health(ledger: FromDishka[LedgerPort]) -> HealthResponse:
    available = await ledger.is_available()
    return HealthResponse(status="ok" if available else "degraded", ledger=available)
