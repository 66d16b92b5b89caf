"""Portfolio aggregate - one career portfolio entry on the ledger."""

from pydantic import ConfigDict, Field

from careercrypt.domain.portfolio.model.value import (
    ExperienceLevel,
    PortfolioId,
    PortfolioStatus,
    WalletAddress,
)
from careercrypt.domain.shared.error import InvalidTransitionError
from careercrypt.domain.shared.model.aggregate import Aggregate

# Allowed review transitions; verified and rejected are terminal.
TRANSITIONS: dict[PortfolioStatus, frozenset[PortfolioStatus]] = {
    PortfolioStatus.PENDING: frozenset({PortfolioStatus.VERIFIED, PortfolioStatus.REJECTED}),
    PortfolioStatus.VERIFIED: frozenset(),
    PortfolioStatus.REJECTED: frozenset(),
}


class Portfolio(Aggregate):
    """A published portfolio.

    Field aliases are the key names used in the stored ledger blob. Unknown
    keys found in a stored blob are kept so that a status update writes them
    back untouched.
    """

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True, extra="allow")

    id: PortfolioId
    title: str
    description: str
    skills: list[str]
    experience_level: ExperienceLevel = Field(alias="experienceLevel")
    payload: str = Field(alias="data")
    created_at: int = Field(alias="timestamp")
    owner: WalletAddress
    status: PortfolioStatus = PortfolioStatus.PENDING

    def can_transition_to(self, target: PortfolioStatus) -> bool:
        return target in TRANSITIONS[self.status]

    def transition_to(self, target: PortfolioStatus) -> None:
        if not self.can_transition_to(target):
            raise InvalidTransitionError(
                f"Cannot move portfolio {self.id} from {self.status} to {target}",
                code="invalid_transition",
            )
        self.status = target
