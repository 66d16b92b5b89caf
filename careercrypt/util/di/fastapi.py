"""Per-request dishka containers for the FastAPI app.

dishka's bundled starlette middleware opens ``dishka.Scope.REQUEST``. The
registry's services and handlers live in ``Scope.UOW``, so requests enter that
scope instead.
"""

from dishka import AsyncContainer
from fastapi import FastAPI
from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Send
from starlette.types import Scope as ASGIScope

from careercrypt.util.di.scope import Scope


class UnitOfWorkMiddleware:
    """Opens a ``Scope.UOW`` child container around every HTTP request.

    The child is exposed as ``request.state.dishka_container``, where
    ``DishkaRoute`` resolves ``FromDishka`` parameters. Lifespan events pass
    straight through.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: ASGIScope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive=receive, send=send)
        root: AsyncContainer = request.app.state.dishka_container
        async with root({Request: request}, scope=Scope.UOW) as uow_container:
            request.state.dishka_container = uow_container
            await self.app(scope, receive, send)


def setup_dishka(container: AsyncContainer, app: FastAPI) -> None:
    """Attach the root container and the per-request middleware to ``app``."""
    app.state.dishka_container = container
    app.add_middleware(UnitOfWorkMiddleware)
