"""Portfolio value objects."""

import secrets
import string
import time
from enum import StrEnum

from pydantic import ConfigDict, Field, field_validator

from careercrypt.domain.shared.model.value import RootValueObject, ValueObject

_BASE36 = string.digits + string.ascii_lowercase


class PortfolioId(RootValueObject[str]):
    """Opaque, globally unique portfolio identifier.

    Generated ids look like ``1718000000000-k3j9x0a``: epoch milliseconds
    followed by seven random base36 characters. Ids written by other clients
    are accepted as-is.
    """

    root: str = Field(min_length=1)

    @classmethod
    def generate(cls) -> "PortfolioId":
        suffix = "".join(secrets.choice(_BASE36) for _ in range(7))
        return cls(f"{int(time.time() * 1000)}-{suffix}")


class WalletAddress(RootValueObject[str]):
    """An account address as reported by the wallet. Stored verbatim."""

    root: str = Field(min_length=1)

    def matches(self, other: "WalletAddress") -> bool:
        """Addresses compare case-insensitively (checksummed vs lowercase hex)."""
        return self.root.lower() == other.root.lower()


class ExperienceLevel(StrEnum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class PortfolioStatus(StrEnum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class PortfolioDraft(ValueObject):
    """What a wallet holder submits before a portfolio is published."""

    title: str
    description: str = ""
    skills: list[str] = []
    experience_level: ExperienceLevel = Field(
        default=ExperienceLevel.INTERMEDIATE, alias="experienceLevel"
    )
    owner: WalletAddress

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("skills", mode="before")
    @classmethod
    def split_skills(cls, value: object) -> object:
        # The submission form sends a comma separated string
        if isinstance(value, str):
            return [s.strip() for s in value.split(",") if s.strip()]
        return value


class RegistryStats(ValueObject):
    total: int
    pending: int
    verified: int
    rejected: int
