"""Review authorization policies."""

from abc import ABC, abstractmethod

from careercrypt.domain.portfolio.model.aggregate import Portfolio
from careercrypt.domain.portfolio.model.value import WalletAddress


class ReviewPolicy(ABC):
    """Decides whether a wallet may approve or reject a portfolio."""

    @abstractmethod
    def evaluate(self, actor: WalletAddress, portfolio: Portfolio) -> bool:
        """Return True if ``actor`` may review ``portfolio``."""
        ...


class OwnerReviewPolicy(ReviewPolicy):
    """Only the portfolio's owner may review it.

    This lets a creator approve their own submission. It mirrors how the
    registry has always behaved; an independent-reviewer policy would be a
    separate ReviewPolicy.
    """

    def evaluate(self, actor: WalletAddress, portfolio: Portfolio) -> bool:
        return actor.matches(portfolio.owner)
