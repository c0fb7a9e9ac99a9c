"""Allow ``python -m pumpfun_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m pumpfun_cli`` behaves identically to the
``pumpfun-cli`` console script.
"""

from __future__ import annotations

from pumpfun_cli.cli.app import cli

if __name__ == "__main__":
    cli()
