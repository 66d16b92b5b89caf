"""Command and CommandHandler base classes with authorization gate."""

from abc import ABCMeta, abstractmethod
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from functools import wraps
from typing import Any, ClassVar, Generic, TypeVar, dataclass_transform

from pydantic import BaseModel

from careercrypt.domain.shared.authorization.gate import Gate, Public, WalletRequired
from careercrypt.domain.shared.error import AuthorizationError, ConfigurationError


class Command(BaseModel):
    __public__: ClassVar[bool] = False


class Result(BaseModel): ...


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Result)

# Unbound async handler method: (self, cmd) -> Coroutine -> Result
_HandlerMethod = Callable[..., Coroutine[Any, Any, Any]]


def evaluate_gate(handler: Any, cmd: Any) -> None:
    """Raise AuthorizationError if ``cmd`` does not satisfy the handler's gate."""
    auth_gate = getattr(type(handler), "__auth__", None)
    if not isinstance(auth_gate, Gate):
        raise ConfigurationError(f"Handler {type(handler).__name__} has no __auth__ declaration")

    if isinstance(auth_gate, Public):
        return

    if isinstance(auth_gate, WalletRequired):
        if getattr(cmd, "actor", None) is None:
            raise AuthorizationError("Wallet connection required", code="missing_wallet")
        return

    raise ConfigurationError(
        f"Handler {type(handler).__name__} has unhandled __auth__ type: {type(auth_gate).__name__}"
    )


def _wrap_run_with_auth(original_run: _HandlerMethod) -> _HandlerMethod:
    """Wrap the run() method with __auth__ gate evaluation."""

    @wraps(original_run)
    async def auth_wrapped_run(self: Any, cmd: Any) -> Any:
        if not getattr(type(cmd), "__public__", False):
            evaluate_gate(self, cmd)
        return await original_run(self, cmd)

    return auth_wrapped_run


@dataclass_transform()
class _CommandHandlerMeta(ABCMeta):
    """Metaclass that combines ABC with auto-dataclass and __auth__ gate for subclasses."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)

            original_run = cls.__dict__.get("run")
            if original_run is not None:
                cls.run = _wrap_run_with_auth(original_run)

        return cls


class CommandHandler(Generic[C, R], metaclass=_CommandHandlerMeta):
    """Base class for command handlers. Subclasses are automatically dataclasses.

    Declare __auth__ to enforce the gate:
        class MyHandler(CommandHandler[MyCmd, MyResult]):
            __auth__ = wallet_required()
    """

    @abstractmethod
    async def run(self, cmd: C) -> R: ...
