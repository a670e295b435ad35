"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Module: api/wallets.py.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..coordination import RequestCoordinator, request_key
from .transport import CashlyTransport, path_segment
from .types import Wallet


class WalletClient:
    """Wallet endpoints."""

    def __init__(self, transport: CashlyTransport, coordinator: RequestCoordinator) -> None:
        self._transport = transport
        self._coordinator = coordinator

    async def list_all(self) -> list[Wallet]:
        async def _fetch() -> list[Wallet]:
            rows = await self._transport.get("wallets")
            return [Wallet.model_validate(row) for row in rows or []]

        return await self._coordinator.deduplicate(request_key("wallets"), _fetch)

    async def create(self, data: Mapping[str, Any]) -> Wallet:
        return Wallet.model_validate(await self._transport.post("wallets", data))

    async def update(self, wallet_id: str, data: Mapping[str, Any]) -> Wallet:
        path = f"wallets/{path_segment(wallet_id)}"
        return Wallet.model_validate(await self._transport.put(path, data))

    async def delete(self, wallet_id: str) -> None:
        await self._transport.delete(f"wallets/{path_segment(wallet_id)}")

    async def set_default(self, wallet_id: str) -> Wallet:
        path = f"wallets/{path_segment(wallet_id)}/set-default"
        return Wallet.model_validate(await self._transport.put(path, {}))
