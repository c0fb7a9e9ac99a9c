"""Infrastructure layer — external system integration.

This layer wraps address decoding (``solders``) and backend discovery
(``importlib.metadata`` entry points).  Raw third-party exceptions are
caught here and re-raised as
:class:`~pumpfun_cli.exceptions.PumpfunCliError` subclasses.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from pumpfun_cli.infra.address import decode_address
from pumpfun_cli.infra.backend import BACKEND_GROUP, installed_backends, load_backend

__all__: list[str] = [
    "BACKEND_GROUP",
    "decode_address",
    "installed_backends",
    "load_backend",
]
