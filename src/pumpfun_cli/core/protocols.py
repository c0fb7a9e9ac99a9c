"""Protocols (interfaces) consumed by the core layer.

These define the contracts a ledger backend must satisfy.  Core code
depends ONLY on these protocols — never on a concrete backend — so the
on-chain transaction construction stays outside this package.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from pumpfun_cli.core.models import ClusterContext, SwapStyle

if TYPE_CHECKING:
    from solders.pubkey import Pubkey


AddressDecoder = Callable[[str], "Pubkey"]
"""Callable turning a raw address string into a public key.

Must raise :class:`~pumpfun_cli.exceptions.InvalidAddressError` on
malformed input.
"""


class LedgerBackend(Protocol):
    """Contract for the operation collaborators.

    Every method is a coroutine performing one unit of ledger work.  The
    resolved :class:`ClusterContext` is passed explicitly to each call.
    Failures may be raised as any exception; the dispatcher does not
    wrap or classify them.  Backends are encouraged to raise
    :class:`~pumpfun_cli.exceptions.ClusterConfigError` and
    :class:`~pumpfun_cli.exceptions.OperationError` so the CLI can
    render a hint.
    """

    async def set_cluster_config(self, context: ClusterContext) -> None:
        """Establish the cluster connection and signing identity.

        Called exactly once per invocation, before any operation.

        Raises
        ------
        ClusterConfigError
            When the RPC endpoint or keypair cannot be used.
        """
        ...  # pragma: no cover

    async def config_project(self, context: ClusterContext) -> None:
        """Write the program's global configuration."""
        ...  # pragma: no cover

    async def launch_token(self, context: ClusterContext) -> None:
        """Create a token and its bonding curve."""
        ...  # pragma: no cover

    async def add_wl(self, context: ClusterContext) -> None:
        """Add a creator to the launch whitelist."""
        ...  # pragma: no cover

    async def remove_wl(self, context: ClusterContext) -> None:
        """Remove the creator from the launch whitelist."""
        ...  # pragma: no cover

    async def swap(
        self,
        context: ClusterContext,
        token_address: Pubkey,
        amount: int,
        style: SwapStyle,
    ) -> None:
        """Buy (style 0) or sell (style 1) *amount* against the curve."""
        ...  # pragma: no cover

    async def withdraw(self, context: ClusterContext, token_address: Pubkey) -> None:
        """Withdraw SOL and tokens from a completed curve."""
        ...  # pragma: no cover

    async def migrate(self, context: ClusterContext, token_address: Pubkey) -> None:
        """Move a completed curve's liquidity to an AMM pool."""
        ...  # pragma: no cover

    async def simulate_swap(
        self,
        context: ClusterContext,
        token_address: Pubkey,
        amount: int,
        style: SwapStyle,
    ) -> int:
        """Quote a swap without sending it; return the amount received."""
        ...  # pragma: no cover

    async def transfer_fee(self, context: ClusterContext, token_address: Pubkey) -> None:
        """Send the curve's collected fee to the team wallet before migration."""
        ...  # pragma: no cover

    async def nominate_authority(self, context: ClusterContext, new_authority: Pubkey) -> None:
        """Propose *new_authority* as the program admin (step one of two)."""
        ...  # pragma: no cover

    async def accept_authority(self, context: ClusterContext) -> None:
        """Accept a pending admin nomination with the signing keypair."""
        ...  # pragma: no cover
