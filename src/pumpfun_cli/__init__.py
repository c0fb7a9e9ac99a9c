"""pumpfun-cli — command-line front end for a bonding-curve token program.

Resolves cluster configuration and command parameters, then hands the
validated request to an installed ledger backend.
"""

from pumpfun_cli.version import __version__

__all__: list[str] = ["__version__"]
