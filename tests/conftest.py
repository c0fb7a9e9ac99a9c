"""Shared pytest fixtures and configuration for the pumpfun-cli test suite.

Guidelines
----------
* No network access in any test.
* Ledger backends are replaced by :class:`RecordingBackend`.
* ``PUMPFUN_*`` environment variables are cleared for every test.
"""

from __future__ import annotations

from typing import Any

import pytest

TOKEN = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
"""A well-formed base58 account address."""


class RecordingBackend:
    """In-memory ledger backend that records every awaited call."""

    def __init__(self, fail_on: str | None = None, error: BaseException | None = None) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._fail_on = fail_on
        self._error = error or RuntimeError(f"{fail_on} failed")
        self.quote = 1_000

    async def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if name == self._fail_on:
            raise self._error

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    async def set_cluster_config(self, context: Any) -> None:
        await self._record("set_cluster_config", context)

    async def config_project(self, context: Any) -> None:
        await self._record("config_project", context)

    async def launch_token(self, context: Any) -> None:
        await self._record("launch_token", context)

    async def add_wl(self, context: Any) -> None:
        await self._record("add_wl", context)

    async def swap(self, context: Any, token_address: Any, amount: Any, style: Any) -> None:
        await self._record("swap", context, token_address, amount, style)

    async def withdraw(self, context: Any, token_address: Any) -> None:
        await self._record("withdraw", context, token_address)

    async def migrate(self, context: Any, token_address: Any) -> None:
        await self._record("migrate", context, token_address)

    async def remove_wl(self, context: Any) -> None:
        await self._record("remove_wl", context)

    async def simulate_swap(self, context: Any, token_address: Any, amount: Any, style: Any) -> int:
        await self._record("simulate_swap", context, token_address, amount, style)
        return self.quote

    async def transfer_fee(self, context: Any, token_address: Any) -> None:
        await self._record("transfer_fee", context, token_address)

    async def nominate_authority(self, context: Any, new_authority: Any) -> None:
        await self._record("nominate_authority", context, new_authority)

    async def accept_authority(self, context: Any) -> None:
        await self._record("accept_authority", context)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PUMPFUN_CLUSTER", "PUMPFUN_RPC_URL", "PUMPFUN_KEYPAIR", "PUMPFUN_BACKEND"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def backend(monkeypatch: pytest.MonkeyPatch) -> RecordingBackend:
    """Install a :class:`RecordingBackend` as the CLI's ledger backend."""
    from pumpfun_cli.cli import app as app_module

    recorder = RecordingBackend()
    monkeypatch.setattr(app_module, "load_backend", lambda name=None: recorder)
    return recorder
