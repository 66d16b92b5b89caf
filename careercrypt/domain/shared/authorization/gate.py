"""Handler-level authorization gates: public() and wallet_required()."""

from dataclasses import dataclass


class Gate:
    """Base for handler-level authorization gates.

    Every CommandHandler/QueryHandler must declare ``__auth__: ClassVar[Gate]``.
    """


@dataclass(frozen=True)
class Public(Gate):
    """No acting wallet required."""


@dataclass(frozen=True)
class WalletRequired(Gate):
    """The command must name the wallet acting on the registry."""


_PUBLIC = Public()
_WALLET_REQUIRED = WalletRequired()


def public() -> Public:
    """Mark a handler as publicly accessible."""
    return _PUBLIC


def wallet_required() -> WalletRequired:
    """Mark a handler as requiring a connected wallet on its command."""
    return _WALLET_REQUIRED
