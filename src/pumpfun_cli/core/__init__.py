"""Core layer — command resolution, validation and dispatch.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Ledger work happens only through the :class:`LedgerBackend` protocol.
"""

from pumpfun_cli.core.dispatcher import Dispatcher, Stage
from pumpfun_cli.core.models import (
    AuthorityParams,
    Cluster,
    ClusterContext,
    CommandName,
    CommandRequest,
    NoParams,
    SwapParams,
    SwapStyle,
    TokenParams,
)
from pumpfun_cli.core.protocols import AddressDecoder, LedgerBackend
from pumpfun_cli.core.resolver import endpoint_url, resolve_cluster
from pumpfun_cli.core.validator import validate

__all__: list[str] = [
    "AddressDecoder",
    "AuthorityParams",
    "Cluster",
    "ClusterContext",
    "CommandName",
    "CommandRequest",
    "Dispatcher",
    "LedgerBackend",
    "NoParams",
    "Stage",
    "SwapParams",
    "SwapStyle",
    "TokenParams",
    "endpoint_url",
    "resolve_cluster",
    "validate",
]
