"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Module: api/budgets.py.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..coordination import RequestCoordinator, request_key
from .transport import CashlyTransport, path_segment
from .types import Budget, BudgetStatus


class BudgetClient:
    """Monthly budget endpoints."""

    def __init__(self, transport: CashlyTransport, coordinator: RequestCoordinator) -> None:
        self._transport = transport
        self._coordinator = coordinator

    async def list_all(self) -> list[Budget]:
        async def _fetch() -> list[Budget]:
            rows = await self._transport.get("budgets")
            return [Budget.model_validate(row) for row in rows or []]

        return await self._coordinator.deduplicate(request_key("budgets"), _fetch)

    async def for_wallet(self, wallet_id: str) -> list[Budget]:
        path = f"budgets/wallet/{path_segment(wallet_id)}"

        async def _fetch() -> list[Budget]:
            rows = await self._transport.get(path)
            return [Budget.model_validate(row) for row in rows or []]

        return await self._coordinator.deduplicate(request_key(path), _fetch)

    async def get(self, budget_id: str) -> Budget:
        path = f"budgets/{path_segment(budget_id)}"

        async def _fetch() -> Budget:
            return Budget.model_validate(await self._transport.get(path))

        return await self._coordinator.deduplicate(request_key(path), _fetch)

    async def status(self, budget_id: str) -> BudgetStatus:
        path = f"budgets/{path_segment(budget_id)}/status"

        async def _fetch() -> BudgetStatus:
            return BudgetStatus.model_validate(await self._transport.get(path))

        return await self._coordinator.deduplicate(request_key(path), _fetch)

    async def progress(self, wallet_id: str) -> BudgetStatus:
        """Current-month budget status for one wallet."""
        path = f"budgets/wallet/{path_segment(wallet_id)}/current"

        async def _fetch() -> BudgetStatus:
            return BudgetStatus.model_validate(await self._transport.get(path))

        return await self._coordinator.deduplicate(
            f"budget-progress-wallet-{path_segment(wallet_id)}", _fetch
        )

    async def create(self, data: Mapping[str, Any]) -> Budget:
        return Budget.model_validate(await self._transport.post("budgets", data))

    async def update(self, budget_id: str, data: Mapping[str, Any]) -> Budget:
        path = f"budgets/{path_segment(budget_id)}"
        return Budget.model_validate(await self._transport.put(path, data))

    async def delete(self, budget_id: str) -> None:
        await self._transport.delete(f"budgets/{path_segment(budget_id)}")
