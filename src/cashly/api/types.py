"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Request filters and response models for the Cashly REST API.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal

from pydantic import BaseModel, Field

from ..coordination.keys import clean_params

TransactionType = Literal["Income", "Expense"]
StatusColour = Literal["green", "yellow", "orange", "red"]
PeriodType = Literal["monthly", "weekly"]
ReminderType = Literal["Payment", "Receivable"]
Recurrence = Literal["once", "daily", "weekly", "monthly", "custom"]


@dataclass(frozen=True, slots=True)
class TransactionFilters:
    """
    Filters accepted by transaction listings and dashboard reports.

    Attributes:
        wallet_id: Restrict to one wallet.
        category_id: Restrict to one category.
        type: ``Income`` or ``Expense``.
        start_date: ISO date lower bound (inclusive).
        end_date: ISO date upper bound (inclusive).
        page: 1-based page number.
        limit: Page size.
    """

    wallet_id: str | None = None
    category_id: str | None = None
    type: TransactionType | None = None
    start_date: str | None = None
    end_date: str | None = None
    page: int | None = None
    limit: int | None = None

    def to_params(self) -> dict[str, Any]:
        return clean_params(asdict(self))


@dataclass(frozen=True, slots=True)
class TrendFilters:
    """Filters for trend reports and time-series charts."""

    wallet_id: str | None = None
    type: TransactionType | None = None
    period: PeriodType | None = None
    months: int | None = None

    def to_params(self) -> dict[str, Any]:
        return clean_params(asdict(self))


class BudgetStatusSummary(BaseModel):
    total_budgets: int = 0
    budgets_on_track: int = 0
    budgets_warning: int = 0
    budgets_over: int = 0
    overall_status: StatusColour = "green"


class DashboardSummary(BaseModel):
    """Headline figures shown at the top of the dashboard."""

    total_balance: float
    monthly_income: float
    monthly_expense: float
    budget_status: BudgetStatusSummary = Field(default_factory=BudgetStatusSummary)
    wallet_count: int = 0
    transaction_count: int = 0


class Transaction(BaseModel):
    id: str
    wallet_id: str
    category_id: str | None = None
    title: str
    amount: float
    type: TransactionType
    user_id: str | None = None
    created_by: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class TransactionPage(BaseModel):
    transactions: list[Transaction] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10
    totalPages: int = 0


class TransactionSummary(BaseModel):
    totalIncome: float = 0.0
    totalExpense: float = 0.0
    balance: float = 0.0
    transactionCount: int = 0


class ReportTotals(BaseModel):
    total_income: float = 0.0
    total_expense: float = 0.0
    net_amount: float = 0.0
    transaction_count: int = 0


class Pagination(BaseModel):
    page: int = 1
    limit: int = 10
    total: int = 0
    total_pages: int = 0


class TransactionReport(BaseModel):
    transactions: list[dict[str, Any]] = Field(default_factory=list)
    summary: ReportTotals = Field(default_factory=ReportTotals)
    pagination: Pagination = Field(default_factory=Pagination)


class CategoryBreakdownItem(BaseModel):
    category_id: str | None = None
    category_name: str
    total_amount: float
    transaction_count: int
    percentage: float


class CategoryBreakdown(BaseModel):
    breakdown: list[CategoryBreakdownItem] = Field(default_factory=list)
    total_amount: float = 0.0
    total_transactions: int = 0


class TrendPoint(BaseModel):
    period: str
    income: float
    expense: float
    net: float


class TrendTotals(BaseModel):
    avg_income: float = 0.0
    avg_expense: float = 0.0
    avg_net: float = 0.0
    total_periods: int = 0


class TrendsReport(BaseModel):
    trends: list[TrendPoint] = Field(default_factory=list)
    period_type: PeriodType = "monthly"
    summary: TrendTotals = Field(default_factory=TrendTotals)


class ChartDataset(BaseModel):
    label: str | None = None
    data: list[float] = Field(default_factory=list)
    backgroundColor: str | list[str] | None = None
    borderColor: str | list[str] | None = None


class ChartData(BaseModel):
    labels: list[str] = Field(default_factory=list)
    datasets: list[ChartDataset] = Field(default_factory=list)


class Budget(BaseModel):
    id: str
    wallet_id: str
    month: str
    limit: float
    created_at: str | None = None
    updated_at: str | None = None


class BudgetStatus(BaseModel):
    """Spending against one budget for its month."""

    budget: Budget
    total_spent: float
    remaining: float
    percentage_used: float
    status: StatusColour


@dataclass(frozen=True, slots=True)
class ReminderFilters:
    """Filters for reminder listings."""

    type: ReminderType | None = None
    is_active: bool | None = None
    overdue: bool | None = None

    def to_params(self) -> dict[str, Any]:
        return clean_params(asdict(self))


class Wallet(BaseModel):
    id: str
    name: str
    is_default: bool = False
    is_family: bool = False
    user_id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class Category(BaseModel):
    id: str
    name: str
    type: TransactionType
    wallet_id: str | None = None
    user_id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class Reminder(BaseModel):
    """A payment or receivable due on a date, optionally recurring."""

    id: str
    title: str
    amount: float
    type: ReminderType
    due_date: str
    recurrence: Recurrence = "once"
    recurrence_interval: int | None = None
    duration_end: str | None = None
    is_active: bool = True
    wallet_id: str | None = None
    user_id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
