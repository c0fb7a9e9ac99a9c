"""Custom exception hierarchy for pumpfun-cli.

Every error the CLI raises on its own inherits from
:class:`PumpfunCliError`.  Exceptions raised *inside* a ledger backend
are not wrapped: they propagate verbatim to the CLI error boundary.

Hierarchy
---------
PumpfunCliError
├── ValidationError
│   ├── MissingParameterError
│   ├── InvalidParameterError
│   └── InvalidAddressError
├── ClusterConfigError
├── OperationError
└── EnvironmentError
    └── BackendNotFoundError
"""

from __future__ import annotations


class PumpfunCliError(Exception):
    """Base exception for all pumpfun-cli errors.

    Carries an optional *hint* rendered below the message by the CLI
    error boundary.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Local validation ------------------------------------------------------

class ValidationError(PumpfunCliError):
    """Raised when command parameters are rejected before dispatch."""


class MissingParameterError(ValidationError):
    """Raised when a required command flag was not supplied."""


class InvalidParameterError(ValidationError):
    """Raised when a supplied flag value has the wrong shape or range."""


class InvalidAddressError(ValidationError):
    """Raised when a token address does not decode to a public key."""


# --- Backend-side failures -------------------------------------------------

class ClusterConfigError(PumpfunCliError):
    """Raised by backends when the cluster/keypair context is unusable."""


class OperationError(PumpfunCliError):
    """Raised by backends when a ledger operation fails."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(PumpfunCliError):
    """Raised when a required runtime dependency is not available."""


class BackendNotFoundError(EnvironmentError):
    """Raised when no usable ledger backend is installed."""
