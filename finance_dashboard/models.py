"""Pydantic models shared by the pipeline, the store and the HTTP layer."""

from __future__ import annotations

import uuid
import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Category(str, Enum):
    # Declaration order is the keyword matching order.
    GROCERIES = "Groceries"
    ENTERTAINMENT = "Entertainment"
    TRANSPORT = "Transport"
    DINING = "Dining"
    UTILITIES = "Utilities"
    HEALTH = "Health"
    SHOPPING = "Shopping"
    INCOME = "Income"
    OTHER = "Other"


def new_id() -> str:
    return uuid.uuid4().hex


class Transaction(BaseModel):
    id: str = Field(default_factory=new_id)
    date: dt.date
    description: str = ""
    amount: float
    category: Optional[Category] = None


class MonthlyTotal(BaseModel):
    month: str = Field(..., pattern=r"^\d{4}-(0[1-9]|1[0-2])$", description="YYYY-MM key")
    total: float


class Prediction(BaseModel):
    period_index: int = Field(..., ge=0, description="Offset past the last known month")
    predicted_value: float = Field(..., ge=0)
    month: Optional[str] = None


class Budget(BaseModel):
    monthly_limit: float = Field(..., gt=0)
    alert_threshold_percent: float = Field(..., gt=0, le=100)


class Goal(BaseModel):
    id: str = Field(default_factory=new_id)
    name: str
    target: float = Field(..., gt=0)
    created_at: dt.datetime = Field(default_factory=dt.datetime.now)


class BudgetEvaluation(BaseModel):
    breaches: bool
    threshold_value: float


class GoalProgress(BaseModel):
    saved: float
    percent: int = Field(..., ge=0, le=100)


class ParseResult(BaseModel):
    transactions: List[Transaction] = Field(default_factory=list)
    skipped_line_count: int = 0


class CategoryTotal(BaseModel):
    category: Category
    total: float


class GoalStatus(BaseModel):
    goal: Goal
    progress: GoalProgress


class DashboardSummary(BaseModel):
    monthly_totals: List[MonthlyTotal]
    predictions: List[Prediction]
    predicted_next_period: float
    latest_month_spend: float
    evaluation: BudgetEvaluation
    category_breakdown: List[CategoryTotal]
    goals: List[GoalStatus]
