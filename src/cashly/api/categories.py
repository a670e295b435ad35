"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Module: api/categories.py.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..coordination import RequestCoordinator, request_key
from .transport import CashlyTransport, path_segment
from .types import Category


class CategoryClient:
    """Income and expense category endpoints."""

    def __init__(self, transport: CashlyTransport, coordinator: RequestCoordinator) -> None:
        self._transport = transport
        self._coordinator = coordinator

    async def list_all(self) -> list[Category]:
        async def _fetch() -> list[Category]:
            rows = await self._transport.get("categories")
            return [Category.model_validate(row) for row in rows or []]

        return await self._coordinator.deduplicate(request_key("categories"), _fetch)

    async def create(self, data: Mapping[str, Any]) -> Category:
        return Category.model_validate(await self._transport.post("categories", data))

    async def update(self, category_id: str, data: Mapping[str, Any]) -> Category:
        path = f"categories/{path_segment(category_id)}"
        return Category.model_validate(await self._transport.put(path, data))

    async def delete(self, category_id: str) -> None:
        await self._transport.delete(f"categories/{path_segment(category_id)}")
