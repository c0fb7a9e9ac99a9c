"""Domain models for pumpfun-cli.

All models are **frozen** dataclasses or enums — immutable value
objects created once per invocation and discarded when the command
finishes.  The only external type referenced is
:class:`solders.pubkey.Pubkey`, and only for annotations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from solders.pubkey import Pubkey


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Cluster(str, Enum):
    """Solana clusters the program is deployed to."""

    MAINNET_BETA = "mainnet-beta"
    TESTNET = "testnet"
    DEVNET = "devnet"

    @classmethod
    def lookup(cls, name: str) -> Cluster | None:
        """Return the member whose value is *name*, or ``None``."""
        try:
            return cls(name)
        except ValueError:
            return None


class CommandName(str, Enum):
    """Commands exposed on the command line."""

    CONFIG = "config"
    LAUNCH = "launch"
    ADD_WL = "addWl"
    REMOVE_WL = "removeWl"
    SWAP = "swap"
    WITHDRAW = "withdraw"
    MIGRATE = "migrate"
    SIMULATE = "simulate"
    TRANSFER_FEE = "transferFee"
    NOMINATE_AUTHORITY = "nominateAuthority"
    ACCEPT_AUTHORITY = "acceptAuthority"


class SwapStyle(IntEnum):
    """Swap direction as encoded on-chain."""

    BUY = 0
    SELL = 1


# ---------------------------------------------------------------------------
# Resolved connection context
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ClusterContext:
    """Cluster, RPC endpoint and signing identity for one invocation."""

    cluster_name: str
    """Cluster name exactly as resolved (may be an unrecognized name)."""

    rpc_url: str
    """RPC URL or the ``DevNetRPC`` sentinel."""

    keypair_path: str
    """Path to the signing keypair file, or the default placeholder."""

    @property
    def cluster(self) -> Cluster | None:
        """The matching :class:`Cluster`, or ``None`` when unrecognized."""
        return Cluster.lookup(self.cluster_name)


# ---------------------------------------------------------------------------
# Operation parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NoParams:
    """Parameters of commands that take no extra flags."""


@dataclass(frozen=True, slots=True)
class TokenParams:
    """Parameters of ``withdraw``, ``migrate`` and ``transferFee``."""

    token_address: Pubkey


@dataclass(frozen=True, slots=True)
class SwapParams:
    """Parameters of ``swap`` and ``simulate``.

    *amount* is expressed in base units (lamports when buying, raw token
    units when selling) and always fits an unsigned 64-bit integer.
    """

    token_address: Pubkey
    amount: int
    style: SwapStyle


@dataclass(frozen=True, slots=True)
class AuthorityParams:
    """Parameters of ``nominateAuthority``."""

    new_authority: Pubkey


OperationParams = Union[NoParams, TokenParams, SwapParams, AuthorityParams]


@dataclass(frozen=True, slots=True)
class CommandRequest:
    """A fully validated command ready for dispatch."""

    name: CommandName
    context: ClusterContext
    params: OperationParams
