"""Finance dashboard package.

This package holds the analytics pipeline behind a personal finance
dashboard: keyword categorization, monthly aggregation, a linear spending
forecast, budget alerts and savings goal progress.  See ``dashboard.py`` for
the assembled pipeline and ``server.py`` for the HTTP entry point.
"""

from finance_dashboard.categorize import backfill_categories, categorize
from finance_dashboard.dashboard import (
    aggregate_monthly,
    build_dashboard,
    category_breakdown,
    latest_month_spend,
)
from finance_dashboard.errors import InvalidArgument
from finance_dashboard.insights import evaluate_budget, forecast, goal_progress
from finance_dashboard.models import (
    Budget,
    Category,
    Goal,
    MonthlyTotal,
    Prediction,
    Transaction,
)
from finance_dashboard.process_transactions import generate_sample_transactions, parse_csv

__all__ = [
    "Budget",
    "Category",
    "Goal",
    "InvalidArgument",
    "MonthlyTotal",
    "Prediction",
    "Transaction",
    "aggregate_monthly",
    "backfill_categories",
    "build_dashboard",
    "categorize",
    "category_breakdown",
    "evaluate_budget",
    "forecast",
    "generate_sample_transactions",
    "goal_progress",
    "latest_month_spend",
    "parse_csv",
]
