"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Module: api/transactions.py.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..coordination import RequestCoordinator, request_key
from .search import LatestSearch
from .transport import CashlyTransport, path_segment
from .types import Transaction, TransactionFilters, TransactionPage, TransactionSummary


class TransactionClient:
    """Transaction listing, search and mutation endpoints."""

    def __init__(self, transport: CashlyTransport, coordinator: RequestCoordinator) -> None:
        self._transport = transport
        self._coordinator = coordinator
        self._search = LatestSearch[TransactionPage](coordinator, "transactions#search")

    async def list_page(self, filters: TransactionFilters | None = None) -> TransactionPage:
        params = (filters or TransactionFilters()).to_params()
        return await self._coordinator.deduplicate(
            request_key("transactions", params),
            lambda: self._fetch_page(params),
        )

    async def search(
        self,
        query: str,
        filters: TransactionFilters | None = None,
        *,
        delay_ms: float | None = None,
    ) -> TransactionPage:
        """
        Search-as-you-type listing.

        Keystrokes arriving within ``delay_ms`` of each other collapse into
        one request made with the latest query, and every caller of the
        burst receives that response. A keystroke arriving after the request
        went out waits for it, then gets a fresh request of its own.
        """
        params = (filters or TransactionFilters()).to_params()
        if query.strip():
            params["search"] = query.strip()
        return await self._search.run(lambda: self._fetch_page(params), delay_ms)

    async def summary(self, filters: TransactionFilters | None = None) -> TransactionSummary:
        params = (filters or TransactionFilters()).to_params()
        params.pop("page", None)
        params.pop("limit", None)

        async def _fetch() -> TransactionSummary:
            data = await self._transport.get("transactions/summary", params)
            return TransactionSummary.model_validate(data or {})

        return await self._coordinator.deduplicate(
            request_key("transactions/summary", params), _fetch
        )

    async def create(self, data: Mapping[str, Any]) -> Transaction:
        row = await self._transport.post("transactions", data)
        return Transaction.model_validate(row)

    async def update(self, transaction_id: str, data: Mapping[str, Any]) -> Transaction:
        row = await self._transport.put(f"transactions/{path_segment(transaction_id)}", data)
        return Transaction.model_validate(row)

    async def delete(self, transaction_id: str) -> None:
        await self._transport.delete(f"transactions/{path_segment(transaction_id)}")

    async def _fetch_page(self, params: dict[str, Any]) -> TransactionPage:
        data = await self._transport.get("transactions", params)
        return TransactionPage.model_validate(data or {})
