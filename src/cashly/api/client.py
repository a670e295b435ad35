"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Module: api/client.py.
"""

from __future__ import annotations

from ..coordination import CoordinatorSettings, RequestCoordinator
from .budgets import BudgetClient
from .categories import CategoryClient
from .dashboard import DashboardClient
from .reminders import ReminderClient
from .settings import CashlyAPISettings
from .transactions import TransactionClient
from .transport import CashlyTransport, SendFn
from .wallets import WalletClient


class CashlyClient:
    """
    Entry point for the Cashly API.

    Owns one transport and one ``RequestCoordinator`` shared by every
    endpoint group. Pass ``coordinator`` to share coordination with other
    clients; a coordinator passed in is left open by ``aclose()``.
    """

    def __init__(
        self,
        settings: CashlyAPISettings | None = None,
        *,
        coordinator: RequestCoordinator | None = None,
        coordinator_settings: CoordinatorSettings | None = None,
        send: SendFn | None = None,
    ) -> None:
        self.transport = CashlyTransport(settings, send=send)
        self._owns_coordinator = coordinator is None
        self.coordinator = coordinator or RequestCoordinator(coordinator_settings)

        self.dashboard = DashboardClient(self.transport, self.coordinator)
        self.transactions = TransactionClient(self.transport, self.coordinator)
        self.budgets = BudgetClient(self.transport, self.coordinator)
        self.wallets = WalletClient(self.transport, self.coordinator)
        self.categories = CategoryClient(self.transport, self.coordinator)
        self.reminders = ReminderClient(self.transport, self.coordinator)

    @staticmethod
    def from_env() -> "CashlyClient":
        """Build a client from ``CASHLY_*`` environment variables."""
        return CashlyClient(
            CashlyAPISettings.from_env(),
            coordinator_settings=CoordinatorSettings.from_env(),
        )

    async def __aenter__(self) -> "CashlyClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_coordinator:
            await self.coordinator.aclose()
