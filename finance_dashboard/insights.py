import math
from typing import Iterable, List, Sequence

import pandas as pd

from finance_dashboard.errors import InvalidArgument
from finance_dashboard.models import (
    Budget,
    BudgetEvaluation,
    Goal,
    GoalProgress,
    MonthlyTotal,
    Prediction,
    Transaction,
)


def _fit_trend(totals: pd.Series):
    """Ordinary least squares of the totals against their 0-based position."""

    x = pd.Series(range(len(totals)), dtype=float)
    y = totals.reset_index(drop=True).astype(float)
    dx = x - x.mean()

    den = float((dx * dx).sum())
    # A single month has no spread in x: project it flat.
    slope = float((dx * (y - y.mean())).sum()) / den if den else 0.0
    intercept = float(y.mean()) - slope * float(x.mean())
    return slope, intercept


def forecast(series: Sequence[MonthlyTotal], horizon: int = 3) -> List[Prediction]:
    """
    Linear-trend forecast for the ``horizon`` months after the series.

    Prediction ``i`` is the fitted line at x = n + i, floored at zero.  With
    no history every prediction is zero.
    """

    if isinstance(horizon, bool) or not isinstance(horizon, int) or horizon < 1:
        raise InvalidArgument(f"Forecast horizon must be a positive integer, got {horizon!r}")

    n = len(series)
    if n == 0:
        return [Prediction(period_index=i, predicted_value=0.0) for i in range(horizon)]

    slope, intercept = _fit_trend(pd.Series([m.total for m in series]))
    last_month = pd.Period(series[-1].month, freq="M")

    predictions = []
    for i in range(horizon):
        x = n + i
        predictions.append(
            Prediction(
                period_index=i,
                predicted_value=max(0.0, slope * x + intercept),
                month=str(last_month + i + 1),
            )
        )
    return predictions


def evaluate_budget(predicted_next_period: float, budget: Budget) -> BudgetEvaluation:
    """Flag a breach when the prediction is strictly above the alert threshold."""

    threshold = budget.monthly_limit * (budget.alert_threshold_percent / 100)
    return BudgetEvaluation(breaches=predicted_next_period > threshold, threshold_value=threshold)


def goal_progress(transactions: Iterable[Transaction], goal: Goal) -> GoalProgress:
    """
    Progress toward a savings goal.

    Every positive transaction in the history counts as saved, so goals
    sharing a history report the same ``saved`` figure.
    """

    if goal.target <= 0:
        raise InvalidArgument(f"Goal target must be positive, got {goal.target}")

    saved = sum(t.amount for t in transactions if t.amount > 0)
    pct = min(100.0, saved / goal.target * 100)
    # Half-up rounding, so 12.5% reports as 13.
    percent = int(math.floor(pct + 0.5))
    return GoalProgress(saved=round(saved, 2), percent=percent)
