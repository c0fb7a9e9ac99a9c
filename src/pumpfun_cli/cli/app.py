"""CLI application entry point and command routing for pumpfun-cli.

This module is the **sole error boundary** for the entire application.
:func:`main` runs one command through the pipeline::

    argv → schema → resolve_cluster → validate → Dispatcher → backend

and :func:`cli` wraps it, rendering every failure as a short message
on stderr and translating it into a process exit code.

Architecture notes
------------------
* No ledger logic lives here — all work is delegated to the backend.
* ``print()`` is forbidden outside the CLI layer; the console proxy is
  used exclusively.
* Validation failures are reported by :func:`main` itself and never
  reach the backend loader.
"""

from __future__ import annotations

import asyncio
import os
import sys
from collections.abc import Mapping

from pumpfun_cli.cli import exit_codes
from pumpfun_cli.cli.console import console, escape
from pumpfun_cli.cli.schema import build_parser
from pumpfun_cli.core.dispatcher import Dispatcher
from pumpfun_cli.core.models import ClusterContext, CommandName
from pumpfun_cli.core.resolver import resolve_cluster
from pumpfun_cli.core.validator import validate
from pumpfun_cli.exceptions import PumpfunCliError, ValidationError
from pumpfun_cli.infra.address import decode_address
from pumpfun_cli.infra.backend import ENV_BACKEND, load_backend


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _echo_context(context: ClusterContext) -> None:
    """Echo the resolved cluster configuration before any work starts."""
    console.print(f"[bold]Solana Cluster:[/bold] {escape(context.cluster_name)}")
    console.print(f"[bold]Keypair Path:[/bold] {escape(context.keypair_path)}")
    console.print(f"[bold]RPC URL:[/bold] {escape(context.rpc_url)}")
    if context.cluster is None:
        console.print(
            f"[yellow]Warning:[/yellow] '{escape(context.cluster_name)}' is not a known "
            "cluster (mainnet-beta, testnet, devnet); passing it through."
        )


def _render_error(exc: PumpfunCliError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run the pumpfun-cli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    environ:
        Environment consulted for ``PUMPFUN_*`` overrides.  Defaults to
        :data:`os.environ`.

    Returns
    -------
    int
        OS process exit code.

    Backend and cluster-configuration failures propagate to :func:`cli`.
    """
    env = os.environ if environ is None else environ
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    name = CommandName(args.command)
    context = resolve_cluster(args.env, args.keypair, args.rpc, environ=env)
    _echo_context(context)

    try:
        request = validate(name, context, vars(args), decode=decode_address)
    except ValidationError as exc:
        _render_error(exc)
        return exit_codes.VALIDATION_ERROR

    backend = load_backend(args.backend or env.get(ENV_BACKEND) or None)
    result = asyncio.run(Dispatcher(backend).dispatch(request))
    if result is not None:
        console.print(f"[bold]Estimated output:[/bold] {result}")

    console.print(f"\n[bold green]{name.value} complete.[/bold green]")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Backend exceptions are shown verbatim; the process never exits with
    a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ValidationError as exc:
        _render_error(exc)
        sys.exit(exit_codes.VALIDATION_ERROR)
    except PumpfunCliError as exc:
        _render_error(exc)
        sys.exit(exit_codes.OPERATION_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Operation failed.[/bold red]\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.OPERATION_ERROR)
