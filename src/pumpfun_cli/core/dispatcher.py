"""Command dispatch — one validated request, one backend operation.

The :class:`Dispatcher` receives a ledger backend at construction time
(dependency inversion) and forwards a
:class:`~pumpfun_cli.core.models.CommandRequest` to exactly one of its
operation coroutines.

Guarantees
----------
* ``set_cluster_config`` is awaited once, before the operation.
* Exactly one operation is awaited; no retries, no fan-out, no timeout.
* Backend exceptions propagate unchanged.

Parsing, cluster resolution and validation happen in the CLI layer
before a dispatcher exists, so its lifecycle starts at
:attr:`Stage.VALIDATED`.
"""

from __future__ import annotations

from enum import Enum

from pumpfun_cli.core.models import (
    AuthorityParams,
    CommandName,
    CommandRequest,
    NoParams,
    SwapParams,
    TokenParams,
)
from pumpfun_cli.core.protocols import LedgerBackend


class Stage(str, Enum):
    """Lifecycle of a dispatched request."""

    VALIDATED = "validated"
    DISPATCHED = "dispatched"
    COMPLETED = "completed"
    FAILED = "failed"


class Dispatcher:
    """Route a validated request to the matching backend operation.

    Parameters
    ----------
    backend:
        Any object satisfying the :class:`LedgerBackend` protocol.
    """

    def __init__(self, backend: LedgerBackend) -> None:
        self._backend: LedgerBackend = backend
        self.stage: Stage = Stage.VALIDATED

    async def dispatch(self, request: CommandRequest) -> int | None:
        """Configure the cluster, then run the request's operation.

        Returns the operation's result: the quoted amount for
        ``simulate``, ``None`` for every other command.
        """
        self.stage = Stage.DISPATCHED
        try:
            await self._backend.set_cluster_config(request.context)
            result = await self._invoke(request)
        except BaseException:
            self.stage = Stage.FAILED
            raise
        self.stage = Stage.COMPLETED
        return result

    async def _invoke(self, request: CommandRequest) -> int | None:
        backend = self._backend
        context = request.context

        match (request.name, request.params):
            case (CommandName.CONFIG, NoParams()):
                await backend.config_project(context)
            case (CommandName.LAUNCH, NoParams()):
                await backend.launch_token(context)
            case (CommandName.ADD_WL, NoParams()):
                await backend.add_wl(context)
            case (CommandName.REMOVE_WL, NoParams()):
                await backend.remove_wl(context)
            case (CommandName.ACCEPT_AUTHORITY, NoParams()):
                await backend.accept_authority(context)
            case (CommandName.SWAP, SwapParams(token_address, amount, style)):
                await backend.swap(context, token_address, amount, style)
            case (CommandName.SIMULATE, SwapParams(token_address, amount, style)):
                return await backend.simulate_swap(context, token_address, amount, style)
            case (CommandName.WITHDRAW, TokenParams(token_address)):
                await backend.withdraw(context, token_address)
            case (CommandName.MIGRATE, TokenParams(token_address)):
                await backend.migrate(context, token_address)
            case (CommandName.TRANSFER_FEE, TokenParams(token_address)):
                await backend.transfer_fee(context, token_address)
            case (CommandName.NOMINATE_AUTHORITY, AuthorityParams(new_authority)):
                await backend.nominate_authority(context, new_authority)
            case (name, params):
                raise TypeError(f"{name.value} cannot be dispatched with {type(params).__name__}")
        return None
