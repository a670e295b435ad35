"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Dashboard summary, report, chart and export endpoints.
"""

from __future__ import annotations

from typing import Any, Literal

from ..coordination import RequestCoordinator, request_key
from ..coordination.keys import clean_params
from .search import LatestSearch
from .transport import CashlyTransport
from .types import (
    CategoryBreakdown,
    ChartData,
    DashboardSummary,
    TransactionFilters,
    TransactionReport,
    TrendFilters,
    TrendsReport,
)


class DashboardClient:
    """
    Read-side dashboard API.

    Reads are deduplicated per endpoint and filter set, so widgets mounting
    together trigger one request each. ``search_report`` additionally
    debounces, for filter forms that refetch on every edit.
    """

    def __init__(self, transport: CashlyTransport, coordinator: RequestCoordinator) -> None:
        self._transport = transport
        self._coordinator = coordinator
        self._search = LatestSearch[TransactionReport](
            coordinator, "dashboard/reports/transactions#search"
        )

    async def summary(self) -> DashboardSummary:
        async def _fetch() -> DashboardSummary:
            data = await self._transport.get("dashboard/summary")
            return DashboardSummary.model_validate(data)

        return await self._coordinator.deduplicate(request_key("dashboard/summary"), _fetch)

    async def transaction_report(
        self, filters: TransactionFilters | None = None
    ) -> TransactionReport:
        params = (filters or TransactionFilters()).to_params()
        return await self._coordinator.deduplicate(
            request_key("dashboard/reports/transactions", params),
            lambda: self._fetch_report(params),
        )

    async def search_report(
        self,
        filters: TransactionFilters | None = None,
        *,
        delay_ms: float | None = None,
    ) -> TransactionReport:
        """
        Fetch a transaction report once the filters stop changing.

        A caller whose filters arrive after the report request went out gets
        a fresh report rather than the one for the earlier filters.
        """
        params = (filters or TransactionFilters()).to_params()
        return await self._search.run(lambda: self._fetch_report(params), delay_ms)

    async def category_breakdown(
        self, filters: TransactionFilters | None = None
    ) -> CategoryBreakdown:
        params = (filters or TransactionFilters()).to_params()
        params.pop("page", None)
        params.pop("limit", None)
        params.pop("category_id", None)

        async def _fetch() -> CategoryBreakdown:
            data = await self._transport.get("dashboard/reports/category-breakdown", params)
            return CategoryBreakdown.model_validate(data)

        return await self._coordinator.deduplicate(
            request_key("dashboard/reports/category-breakdown", params), _fetch
        )

    async def trends(self, filters: TrendFilters | None = None) -> TrendsReport:
        params = (filters or TrendFilters()).to_params()
        params.pop("type", None)

        async def _fetch() -> TrendsReport:
            data = await self._transport.get("dashboard/reports/trends", params)
            return TrendsReport.model_validate(data)

        return await self._coordinator.deduplicate(
            request_key("dashboard/reports/trends", params), _fetch
        )

    async def chart_data(
        self, chart_type: str, filters: TrendFilters | None = None
    ) -> ChartData:
        if not chart_type.strip():
            raise ValueError("chart_type must be non-empty")
        params = {"chart_type": chart_type, **(filters or TrendFilters()).to_params()}

        async def _fetch() -> ChartData:
            data = await self._transport.get("dashboard/charts", params)
            return ChartData.model_validate(data)

        return await self._coordinator.deduplicate(
            request_key("dashboard/charts", params), _fetch
        )

    async def export_transactions(
        self,
        file_format: Literal["csv", "pdf"],
        filters: TransactionFilters | None = None,
        *,
        filename: str | None = None,
    ) -> bytes:
        """Download a transaction export. Exports are never shared."""
        body: dict[str, Any] = {"format": file_format, **(filters or TransactionFilters()).to_params()}
        body.pop("page", None)
        body.pop("limit", None)
        body.update(clean_params({"filename": filename}))
        return await self._transport.request_bytes(
            "POST", "dashboard/export/transactions", body=body
        )

    async def export_category_breakdown(
        self,
        filters: TransactionFilters | None = None,
        *,
        filename: str | None = None,
    ) -> bytes:
        body: dict[str, Any] = (filters or TransactionFilters()).to_params()
        body.pop("page", None)
        body.pop("limit", None)
        body.update(clean_params({"filename": filename}))
        return await self._transport.request_bytes(
            "POST", "dashboard/export/category-breakdown", body=body
        )

    async def export_trends(
        self,
        filters: TrendFilters | None = None,
        *,
        filename: str | None = None,
    ) -> bytes:
        body: dict[str, Any] = (filters or TrendFilters()).to_params()
        body.pop("type", None)
        body.update(clean_params({"filename": filename}))
        return await self._transport.request_bytes(
            "POST", "dashboard/export/trends", body=body
        )

    async def _fetch_report(self, params: dict[str, Any]) -> TransactionReport:
        data = await self._transport.get("dashboard/reports/transactions", params)
        return TransactionReport.model_validate(data)
