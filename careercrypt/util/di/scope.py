"""Custom Dishka scopes for CareerCrypt."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """CareerCrypt dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (ledger client, codec, adapters)
    - UOW: Unit of Work (one HTTP request)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
