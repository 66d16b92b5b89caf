from dishka import Provider as DishkaProvider

from careercrypt.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for CareerCrypt DI providers. Defaults to the UOW scope."""

    scope = Scope.UOW
