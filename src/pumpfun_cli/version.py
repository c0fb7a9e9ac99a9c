"""Single source of truth for the pumpfun-cli package version."""

__version__: str = "0.1.0"
