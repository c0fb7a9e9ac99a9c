"""Ledger backend discovery.

Backends are ordinary Python packages that advertise a factory in the
``pumpfun_cli.backends`` entry-point group::

    [project.entry-points."pumpfun_cli.backends"]
    anchor = "pumpfun_anchor.backend:AnchorBackend"

The factory is called with no arguments and must return an object
satisfying :class:`~pumpfun_cli.core.protocols.LedgerBackend`.

Rules
-----
* No user-facing output.
* Import failures are re-raised as
  :class:`~pumpfun_cli.exceptions.EnvironmentError` subclasses.
"""

from __future__ import annotations

from importlib.metadata import EntryPoint, entry_points

from pumpfun_cli.core.protocols import LedgerBackend
from pumpfun_cli.exceptions import BackendNotFoundError

BACKEND_GROUP: str = "pumpfun_cli.backends"
ENV_BACKEND: str = "PUMPFUN_BACKEND"

_INSTALL_HINT: str = (
    f"Install a package exposing a '{BACKEND_GROUP}' entry point, "
    f"or point {ENV_BACKEND} at a 'module:factory' reference."
)


def installed_backends() -> dict[str, EntryPoint]:
    """Return the installed backend entry points keyed by name."""
    return {ep.name: ep for ep in entry_points(group=BACKEND_GROUP)}


def _select(name: str | None) -> EntryPoint:
    if name and ":" in name:
        return EntryPoint(name=name, value=name, group=BACKEND_GROUP)

    available = installed_backends()
    if name:
        if name not in available:
            known = ", ".join(sorted(available)) or "none"
            raise BackendNotFoundError(
                f"ledger backend '{name}' is not installed (available: {known})",
                hint=_INSTALL_HINT,
            )
        return available[name]

    if not available:
        raise BackendNotFoundError("no ledger backend is installed", hint=_INSTALL_HINT)
    if len(available) > 1:
        raise BackendNotFoundError(
            "several ledger backends are installed: " + ", ".join(sorted(available)),
            hint=f"Choose one with --backend or {ENV_BACKEND}.",
        )
    return next(iter(available.values()))


def load_backend(name: str | None = None) -> LedgerBackend:
    """Locate, import and instantiate a ledger backend.

    Parameters
    ----------
    name:
        Entry-point name, a ``module:factory`` reference, or ``None`` to
        use the single installed backend.

    Raises
    ------
    BackendNotFoundError
        When no matching backend exists or it cannot be imported.
    """
    entry_point = _select(name)
    try:
        factory = entry_point.load()
    except (ImportError, AttributeError) as exc:
        raise BackendNotFoundError(
            f"cannot import ledger backend '{entry_point.value}': {exc}",
            hint=_INSTALL_HINT,
        ) from exc
    return factory()
