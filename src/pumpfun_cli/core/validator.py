"""Per-command parameter validation.

Turns the raw option values of one command into a
:class:`~pumpfun_cli.core.models.CommandRequest`, or raises a
:class:`~pumpfun_cli.exceptions.ValidationError` subclass.

Rules
-----
* Presence checks run first, in the fixed order declared in
  :data:`REQUIRED_OPTIONS`; the first missing option decides the error.
* Shape checks (address decoding, numeric parsing) run afterwards in
  the same order.
* The first failure raises.  Nothing is dispatched for a command that
  fails validation.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pumpfun_cli.core.models import (
    AuthorityParams,
    ClusterContext,
    CommandName,
    CommandRequest,
    NoParams,
    OperationParams,
    SwapParams,
    SwapStyle,
    TokenParams,
)
from pumpfun_cli.core.protocols import AddressDecoder
from pumpfun_cli.exceptions import InvalidParameterError, MissingParameterError

U64_MAX: int = 2**64 - 1

MISSING_TOKEN: str = "missing token address"
MISSING_AMOUNT: str = "missing swap amount"
MISSING_STYLE: str = "missing swap style"
MISSING_AUTHORITY: str = "missing new authority address"

_TOKEN_CHECK: tuple[str, str, str] = ("token", MISSING_TOKEN, "-t/--token")
_SWAP_CHECKS: tuple[tuple[str, str, str], ...] = (
    _TOKEN_CHECK,
    ("amount", MISSING_AMOUNT, "-a/--amount"),
    ("style", MISSING_STYLE, "-s/--style"),
)

REQUIRED_OPTIONS: dict[CommandName, tuple[tuple[str, str, str], ...]] = {
    CommandName.CONFIG: (),
    CommandName.LAUNCH: (),
    CommandName.ADD_WL: (),
    CommandName.REMOVE_WL: (),
    CommandName.SWAP: _SWAP_CHECKS,
    CommandName.WITHDRAW: (_TOKEN_CHECK,),
    CommandName.MIGRATE: (_TOKEN_CHECK,),
    CommandName.SIMULATE: _SWAP_CHECKS,
    CommandName.TRANSFER_FEE: (_TOKEN_CHECK,),
    CommandName.NOMINATE_AUTHORITY: (("admin", MISSING_AUTHORITY, "-n/--admin"),),
    CommandName.ACCEPT_AUTHORITY: (),
}
"""Ordered ``(option, message, flag)`` presence checks per command."""


def validate(
    name: CommandName,
    context: ClusterContext,
    options: Mapping[str, Any],
    *,
    decode: AddressDecoder,
) -> CommandRequest:
    """Validate *options* for command *name* and build the request.

    Raises
    ------
    MissingParameterError
        If a required option is absent.
    InvalidAddressError
        If an account address does not decode (raised by *decode*).
    InvalidParameterError
        If the swap amount or style is malformed.
    """
    check_required(name, options)
    return CommandRequest(
        name=name,
        context=context,
        params=_build_params(name, options, decode),
    )


def check_required(name: CommandName, options: Mapping[str, Any]) -> None:
    """Raise :class:`MissingParameterError` for the first absent option."""
    for option, message, flag in REQUIRED_OPTIONS[name]:
        if options.get(option) is None:
            raise MissingParameterError(message, hint=f"Pass it with {flag}.")


# ---------------------------------------------------------------------------
# Shape checks (pure)
# ---------------------------------------------------------------------------

def parse_amount(raw: str) -> int:
    """Parse a swap amount in base units; must fit an unsigned 64-bit int.

    Only plain ASCII digits are accepted: no sign, no ``_`` separators.
    """
    text = str(raw).strip()
    if not (text.isascii() and text.isdigit()):
        raise InvalidParameterError(
            f"invalid swap amount: {raw!r}",
            hint="The amount is a whole number of base units, e.g. 2000000000.",
        )
    amount = int(text, 10)
    if amount <= 0:
        raise InvalidParameterError(f"swap amount must be positive, got {amount}")
    if amount > U64_MAX:
        raise InvalidParameterError(f"swap amount {amount} exceeds the u64 range")
    return amount


def parse_style(raw: str) -> SwapStyle:
    """Parse a swap style; only ``0`` (buy) and ``1`` (sell) are accepted."""
    text = str(raw).strip()
    if text not in ("0", "1"):
        raise InvalidParameterError(
            f"invalid swap style: {raw!r}",
            hint="Use 0 to buy the token or 1 to sell it.",
        )
    return SwapStyle(int(text))


def _build_params(
    name: CommandName,
    options: Mapping[str, Any],
    decode: AddressDecoder,
) -> OperationParams:
    if name in (CommandName.SWAP, CommandName.SIMULATE):
        token = decode(options["token"])
        return SwapParams(
            token_address=token,
            amount=parse_amount(options["amount"]),
            style=parse_style(options["style"]),
        )
    if name in (CommandName.WITHDRAW, CommandName.MIGRATE, CommandName.TRANSFER_FEE):
        return TokenParams(token_address=decode(options["token"]))
    if name is CommandName.NOMINATE_AUTHORITY:
        return AuthorityParams(new_authority=decode(options["admin"]))
    return NoParams()
