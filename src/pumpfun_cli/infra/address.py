"""solders-backed decoding of token addresses.

This module is the **only** place in the codebase that imports
``solders`` at runtime.  Decoding failures are re-raised as
:class:`~pumpfun_cli.exceptions.InvalidAddressError` — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pumpfun_cli.exceptions import EnvironmentError, InvalidAddressError

if TYPE_CHECKING:
    from solders.pubkey import Pubkey


def decode_address(raw: str) -> Pubkey:
    """Decode a base58 account address into a :class:`Pubkey`.

    Raises
    ------
    InvalidAddressError
        When *raw* is not a valid 32-byte base58 address.
    EnvironmentError
        When ``solders`` is not installed.
    """
    try:
        from solders.pubkey import Pubkey
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "solders is not installed. Install with: pip install solders",
        ) from exc

    text = raw.strip()
    try:
        return Pubkey.from_string(text)
    except Exception as exc:
        raise InvalidAddressError(
            f"invalid account address: {text!r}",
            hint="Account addresses are base58-encoded 32-byte public keys.",
        ) from exc
