from careercrypt.domain.portfolio.util.di.provider import PortfolioProvider

__all__ = ["PortfolioProvider"]
