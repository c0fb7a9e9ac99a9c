"""Declarative argument schema and ``argparse`` parser construction.

Every command accepts the shared cluster flags; the token, swap and
authority commands add their own.  Command-specific flags have no default
so that their absence reaches the validator as ``None``.

Shared flags also default to ``None`` at the ``argparse`` level: the
documented defaults are applied by
:func:`~pumpfun_cli.core.resolver.resolve_cluster` after the
environment-variable layer.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from pumpfun_cli.core.models import CommandName
from pumpfun_cli.core.resolver import (
    DEFAULT_CLUSTER,
    DEFAULT_KEYPAIR_PATH,
    DEFAULT_RPC_URL,
    ENV_CLUSTER,
    ENV_KEYPAIR,
    ENV_RPC_URL,
)
from pumpfun_cli.infra.backend import ENV_BACKEND
from pumpfun_cli.version import __version__


@dataclass(frozen=True, slots=True)
class FlagSpec:
    """One command-line flag."""

    short: str
    long: str
    help: str
    metavar: str = "<string>"
    default: str | None = None
    """Documented default, or ``None`` when the flag is required."""
    env_var: str | None = None

    @property
    def dest(self) -> str:
        return self.long.lstrip("-")

    def help_text(self) -> str:
        extras: list[str] = []
        if self.env_var is not None:
            extras.append(f"env: {self.env_var}")
        if self.default is not None:
            extras.append(f"default: {self.default!r}")
        if not extras:
            return self.help
        return f"{self.help} ({'; '.join(extras)})"


SHARED_FLAGS: tuple[FlagSpec, ...] = (
    # mainnet-beta, testnet, devnet
    FlagSpec("-e", "--env", "Solana cluster env name", default=DEFAULT_CLUSTER, env_var=ENV_CLUSTER),
    FlagSpec("-r", "--rpc", "Solana cluster RPC name", default=DEFAULT_RPC_URL, env_var=ENV_RPC_URL),
    FlagSpec("-k", "--keypair", "Solana wallet Keypair Path", default=DEFAULT_KEYPAIR_PATH, env_var=ENV_KEYPAIR),
)

TOKEN_FLAG = FlagSpec("-t", "--token", "token address")
SWAP_FLAGS: tuple[FlagSpec, ...] = (
    TOKEN_FLAG,
    FlagSpec("-a", "--amount", "swap amount", metavar="<number>"),
    FlagSpec("-s", "--style", "0: buy token, 1: sell token"),
)

COMMAND_FLAGS: dict[CommandName, tuple[FlagSpec, ...]] = {
    CommandName.CONFIG: (),
    CommandName.LAUNCH: (),
    CommandName.ADD_WL: (),
    CommandName.REMOVE_WL: (),
    CommandName.SWAP: SWAP_FLAGS,
    CommandName.WITHDRAW: (TOKEN_FLAG,),
    CommandName.MIGRATE: (TOKEN_FLAG,),
    CommandName.SIMULATE: SWAP_FLAGS,
    CommandName.TRANSFER_FEE: (TOKEN_FLAG,),
    CommandName.NOMINATE_AUTHORITY: (FlagSpec("-n", "--admin", "new authority address"),),
    CommandName.ACCEPT_AUTHORITY: (),
}

COMMAND_HELP: dict[CommandName, str] = {
    CommandName.CONFIG: "Write the program's global configuration.",
    CommandName.LAUNCH: "Launch a new token on a bonding curve.",
    CommandName.ADD_WL: "Add a creator to the launch whitelist.",
    CommandName.REMOVE_WL: "Remove the creator from the launch whitelist.",
    CommandName.SWAP: "Buy or sell a token against its bonding curve.",
    CommandName.WITHDRAW: "Withdraw funds from a completed bonding curve.",
    CommandName.MIGRATE: "Migrate a completed curve's liquidity.",
    CommandName.SIMULATE: "Quote a swap without sending it.",
    CommandName.TRANSFER_FEE: "Send a completed curve's fee to the team wallet.",
    CommandName.NOMINATE_AUTHORITY: "Nominate a new program admin.",
    CommandName.ACCEPT_AUTHORITY: "Accept a pending admin nomination.",
}


def _add_flag(parser: argparse.ArgumentParser, spec: FlagSpec) -> None:
    parser.add_argument(
        spec.short,
        spec.long,
        dest=spec.dest,
        metavar=spec.metavar,
        default=None,
        help=spec.help_text(),
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser with one sub-parser per command."""
    parser = argparse.ArgumentParser(
        prog="pumpfun-cli",
        description="Operate a bonding-curve token program on a Solana cluster.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--backend",
        default=None,
        metavar="<name>",
        help=(
            "Ledger backend entry-point name or 'module:factory' reference "
            f"(env: {ENV_BACKEND})."
        ),
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    for name, flags in COMMAND_FLAGS.items():
        sub = subparsers.add_parser(
            name.value,
            help=COMMAND_HELP[name],
            description=COMMAND_HELP[name],
        )
        for spec in SHARED_FLAGS + flags:
            _add_flag(sub, spec)
    return parser
