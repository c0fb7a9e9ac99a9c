"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — the backend operation completed."""

VALIDATION_ERROR: int = 1
"""A required flag was missing or malformed.  Nothing was dispatched."""

OPERATION_ERROR: int = 2
"""Cluster configuration or the ledger operation failed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
