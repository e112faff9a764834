"""MIXIN

Reusable contracts: behaviour plus privileged per-instance state, defined once
and applied to unrelated host classes without a shared ancestor.

A contract is authored as a class deriving from `Mixin.Super` and wrapped in a
`Mixin`. The wrapper projects the contract's surface onto hosts, runs the
contract's initializer against existing instances, and exposes an inverted
dispatch table (`Mixin.api`) for carriers that never received the surface.
"""

from .core import ContractBase, ContractMeta, Mixin
from .errors import (
    InvalidArgumentError,
    InvalidOperationError,
    MixinError,
    PrivateStateError,
)
from .private import PrivateField

__all__ = [
    "__version__",
    "ContractBase",
    "ContractMeta",
    "InvalidArgumentError",
    "InvalidOperationError",
    "Mixin",
    "MixinError",
    "PrivateField",
    "PrivateStateError",
]
__version__ = "0.1.0"
