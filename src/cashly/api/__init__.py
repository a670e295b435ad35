"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Async client for the Cashly REST API.
"""

from .budgets import BudgetClient
from .categories import CategoryClient
from .client import CashlyClient
from .dashboard import DashboardClient
from .errors import CashlyAPIError, CashlyProtocolError
from .reminders import ReminderClient
from .settings import CashlyAPISettings
from .transactions import TransactionClient
from .transport import CashlyTransport, path_segment
from .types import (
    Budget,
    BudgetStatus,
    Category,
    CategoryBreakdown,
    ChartData,
    DashboardSummary,
    Reminder,
    ReminderFilters,
    Transaction,
    TransactionFilters,
    TransactionPage,
    TransactionReport,
    TransactionSummary,
    TrendFilters,
    TrendsReport,
    Wallet,
)
from .wallets import WalletClient

__all__ = [
    "CashlyClient",
    "CashlyAPISettings",
    "CashlyTransport",
    "CashlyAPIError",
    "CashlyProtocolError",
    "DashboardClient",
    "TransactionClient",
    "BudgetClient",
    "WalletClient",
    "CategoryClient",
    "ReminderClient",
    "path_segment",
    "Budget",
    "BudgetStatus",
    "Category",
    "CategoryBreakdown",
    "ChartData",
    "DashboardSummary",
    "Reminder",
    "ReminderFilters",
    "Transaction",
    "TransactionFilters",
    "TransactionPage",
    "TransactionReport",
    "TransactionSummary",
    "TrendFilters",
    "TrendsReport",
    "Wallet",
]
