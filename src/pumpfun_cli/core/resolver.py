"""Cluster configuration resolution.

Merges the cluster name, RPC URL and keypair path chosen on the command
line (or in the environment) into one immutable
:class:`~pumpfun_cli.core.models.ClusterContext`.

Guarantees
----------
* Pure — no I/O, no ``print()``, never raises.
* Deterministic: equal inputs always give equal contexts.
* Unknown cluster names pass through verbatim; callers may inspect
  :attr:`ClusterContext.cluster` to detect them.
"""

from __future__ import annotations

from collections.abc import Mapping

from pumpfun_cli.core.models import Cluster, ClusterContext

DEFAULT_CLUSTER: str = Cluster.DEVNET.value
DEFAULT_RPC_URL: str = "DevNetRPC"
"""Sentinel meaning "use the public endpoint of the selected cluster"."""
DEFAULT_KEYPAIR_PATH: str = "keypairt address"
"""Placeholder; a real run must point ``--keypair`` at a keypair file."""

ENV_CLUSTER: str = "PUMPFUN_CLUSTER"
ENV_RPC_URL: str = "PUMPFUN_RPC_URL"
ENV_KEYPAIR: str = "PUMPFUN_KEYPAIR"

PUBLIC_ENDPOINTS: dict[Cluster, str] = {
    Cluster.MAINNET_BETA: "https://api.mainnet-beta.solana.com",
    Cluster.TESTNET: "https://api.testnet.solana.com",
    Cluster.DEVNET: "https://api.devnet.solana.com",
}


def _first_set(*values: str | None) -> str | None:
    for value in values:
        if value is not None and value.strip():
            return value
    return None


def resolve_cluster(
    env_name: str | None,
    keypair_path: str | None,
    rpc_url: str | None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ClusterContext:
    """Build the :class:`ClusterContext` for this invocation.

    Each field is taken from the first non-empty source in order:
    explicit argument, environment variable (only when *environ* is
    given), documented default.
    """
    env = environ if environ is not None else {}
    return ClusterContext(
        cluster_name=_first_set(env_name, env.get(ENV_CLUSTER)) or DEFAULT_CLUSTER,
        rpc_url=_first_set(rpc_url, env.get(ENV_RPC_URL)) or DEFAULT_RPC_URL,
        keypair_path=_first_set(keypair_path, env.get(ENV_KEYPAIR)) or DEFAULT_KEYPAIR_PATH,
    )


def endpoint_url(context: ClusterContext) -> str:
    """Return the concrete RPC URL a backend should connect to.

    The ``DevNetRPC`` sentinel maps to the public endpoint of the
    context's cluster (devnet for unrecognized clusters); any other
    value is returned unchanged.
    """
    if context.rpc_url != DEFAULT_RPC_URL:
        return context.rpc_url
    cluster = context.cluster or Cluster.DEVNET
    return PUBLIC_ENDPOINTS[cluster]
