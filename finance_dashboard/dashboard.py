# dashboard.py: monthly aggregation and the assembled dashboard pipeline

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from finance_dashboard.categorize import backfill_categories
from finance_dashboard.insights import evaluate_budget, forecast, goal_progress
from finance_dashboard.models import (
    Budget,
    Category,
    CategoryTotal,
    DashboardSummary,
    Goal,
    GoalStatus,
    MonthlyTotal,
    Transaction,
)

logger = logging.getLogger(__name__)

COLUMNS = ["Date", "Description", "Amount", "Category"]


def _prep(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """
    Builds the working frame: one row per transaction plus a ``Month`` key.
    """
    df = pd.DataFrame(
        [
            {
                "Date": t.date,
                "Description": t.description,
                "Amount": t.amount,
                "Category": t.category.value if t.category else None,
            }
            for t in transactions
        ],
        columns=COLUMNS,
    )
    if df.empty:
        df["Month"] = pd.Series(dtype=str)
        return df

    df["Date"] = pd.to_datetime(df["Date"])
    df["Month"] = df["Date"].dt.to_period("M").astype(str)
    df["Amount"] = df["Amount"].astype(float)
    return df


def aggregate_monthly(transactions: Iterable[Transaction]) -> List[MonthlyTotal]:
    """
    Signed sum of amounts per calendar month, oldest month first.

    Totals are rounded to cents only after summing.
    """
    df = _prep(transactions)
    if df.empty:
        return []

    monthly = df.groupby("Month")["Amount"].sum().sort_index()
    return [MonthlyTotal(month=month, total=round(float(total), 2)) for month, total in monthly.items()]


def category_breakdown(transactions: Iterable[Transaction]) -> List[CategoryTotal]:
    """
    Signed total per category, in category declaration order.

    Categories whose total rounds to nothing are left out.
    """
    df = _prep(backfill_categories(transactions))
    if df.empty:
        return []

    by_cat = df.groupby("Category")["Amount"].sum()
    breakdown = []
    for category in Category:
        total = float(by_cat.get(category.value, 0.0))
        if abs(total) > 0.01:
            breakdown.append(CategoryTotal(category=category, total=round(total, 2)))
    return breakdown


def latest_month_spend(monthly_totals: Sequence[MonthlyTotal]) -> float:
    if not monthly_totals:
        return 0.0
    return abs(monthly_totals[-1].total)


def build_dashboard(
    transactions: Iterable[Transaction],
    budget: Budget,
    goals: Optional[Iterable[Goal]] = None,
    horizon: int = 3,
) -> DashboardSummary:
    """Run the whole pipeline over one snapshot of transactions.

    The first forecast period is the value checked against the budget alert.
    """
    txns = backfill_categories(transactions)
    monthly = aggregate_monthly(txns)
    predictions = forecast(monthly, horizon)
    predicted_next = predictions[0].predicted_value
    evaluation = evaluate_budget(predicted_next, budget)

    if evaluation.breaches:
        logger.info(
            "Predicted spend %.2f exceeds %.0f%% of the %.2f budget",
            predicted_next,
            budget.alert_threshold_percent,
            budget.monthly_limit,
        )

    return DashboardSummary(
        monthly_totals=monthly,
        predictions=predictions,
        predicted_next_period=predicted_next,
        latest_month_spend=latest_month_spend(monthly),
        evaluation=evaluation,
        category_breakdown=category_breakdown(txns),
        goals=[GoalStatus(goal=g, progress=goal_progress(txns, g)) for g in goals or []],
    )
