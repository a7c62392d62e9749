"""FastAPI service exposing the dashboard pipeline and its stored state."""

import datetime as dt
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from finance_dashboard import config
from finance_dashboard.categorize import categorize
from finance_dashboard.dashboard import aggregate_monthly, build_dashboard
from finance_dashboard.database import DashboardStore, init_db
from finance_dashboard.errors import InvalidArgument
from finance_dashboard.insights import evaluate_budget, forecast, goal_progress
from finance_dashboard.models import (
    Budget,
    BudgetEvaluation,
    Category,
    DashboardSummary,
    Goal,
    GoalProgress,
    MonthlyTotal,
    ParseResult,
    Prediction,
    Transaction,
)
from finance_dashboard.process_transactions import generate_sample_transactions, parse_csv


@asynccontextmanager
async def lifespan(app: FastAPI):
    config.configure_logging()
    init_db()
    yield


app = FastAPI(title="Finance Dashboard", version="0.1.0", lifespan=lifespan)


def get_store() -> DashboardStore:
    return DashboardStore()


def _bad_request(exc: InvalidArgument) -> HTTPException:
    return HTTPException(status_code=400, detail=str(exc))


# --- Pure tools ---

class CategorizeRequest(BaseModel):
    description: Optional[str] = None
    amount: float


class CategorizeResponse(BaseModel):
    category: Category


@app.post("/tools/categorize", response_model=CategorizeResponse)
async def categorize_transaction(req: CategorizeRequest):
    return CategorizeResponse(category=categorize(req.description, req.amount))


@app.post("/tools/aggregate_monthly", response_model=List[MonthlyTotal])
async def aggregate_tool(transactions: List[Transaction]):
    return aggregate_monthly(transactions)


class ForecastRequest(BaseModel):
    monthly_totals: List[MonthlyTotal]
    horizon: int = Field(config.FORECAST_HORIZON, description="Months to project forward")


@app.post("/tools/forecast", response_model=List[Prediction])
async def forecast_tool(req: ForecastRequest):
    try:
        return forecast(req.monthly_totals, req.horizon)
    except InvalidArgument as exc:
        raise _bad_request(exc)


class EvaluateBudgetRequest(BaseModel):
    predicted_next_period: float
    budget: Budget


@app.post("/tools/evaluate_budget", response_model=BudgetEvaluation)
async def evaluate_budget_tool(req: EvaluateBudgetRequest):
    return evaluate_budget(req.predicted_next_period, req.budget)


class GoalProgressRequest(BaseModel):
    transactions: List[Transaction]
    goal: Goal


@app.post("/tools/goal_progress", response_model=GoalProgress)
async def goal_progress_tool(req: GoalProgressRequest):
    return goal_progress(req.transactions, req.goal)


class CsvRequest(BaseModel):
    text: str


@app.post("/tools/parse_csv", response_model=ParseResult)
async def parse_csv_tool(req: CsvRequest):
    return parse_csv(req.text)


# --- Stored dashboard state ---

class NewTransaction(BaseModel):
    date: dt.date
    description: str
    amount: float
    category: Optional[Category] = None


@app.get("/transactions", response_model=List[Transaction])
async def list_transactions(store: DashboardStore = Depends(get_store)):
    return store.load_transactions()


@app.post("/transactions", response_model=Transaction, status_code=201)
async def add_transaction(req: NewTransaction, store: DashboardStore = Depends(get_store)):
    txn = Transaction(
        date=req.date,
        description=req.description,
        amount=req.amount,
        category=req.category or categorize(req.description, req.amount),
    )
    store.add_transactions([txn])
    return txn


@app.delete("/transactions/{txn_id}", status_code=204)
async def delete_transaction(txn_id: str, store: DashboardStore = Depends(get_store)):
    if not store.delete_transaction(txn_id):
        raise HTTPException(status_code=404, detail=f"Transaction {txn_id} not found")


@app.post("/transactions/import", response_model=ParseResult)
async def import_csv(req: CsvRequest, store: DashboardStore = Depends(get_store)):
    result = parse_csv(req.text)
    store.add_transactions(result.transactions)
    return result


class SampleRequest(BaseModel):
    count: int = Field(config.SAMPLE_SIZE, ge=0, le=10000)
    seed: Optional[int] = None


@app.post("/transactions/sample", response_model=List[Transaction])
async def generate_sample(req: SampleRequest, store: DashboardStore = Depends(get_store)):
    sample = generate_sample_transactions(req.count, seed=req.seed)
    store.replace_transactions(sample)
    return sample


@app.get("/budget", response_model=Budget)
async def get_budget(store: DashboardStore = Depends(get_store)):
    return store.load_budget()


@app.put("/budget", response_model=Budget)
async def set_budget(budget: Budget, store: DashboardStore = Depends(get_store)):
    return store.save_budget(budget)


class NewGoal(BaseModel):
    name: str = Field(..., min_length=1)
    target: float = Field(..., gt=0)


@app.get("/goals", response_model=List[Goal])
async def list_goals(store: DashboardStore = Depends(get_store)):
    return store.load_goals()


@app.post("/goals", response_model=Goal, status_code=201)
async def add_goal(req: NewGoal, store: DashboardStore = Depends(get_store)):
    return store.add_goal(Goal(name=req.name, target=req.target))


@app.delete("/goals/{goal_id}", status_code=204)
async def delete_goal(goal_id: str, store: DashboardStore = Depends(get_store)):
    if not store.delete_goal(goal_id):
        raise HTTPException(status_code=404, detail=f"Goal {goal_id} not found")


@app.get("/goals/{goal_id}/progress", response_model=GoalProgress)
async def get_goal_progress(goal_id: str, store: DashboardStore = Depends(get_store)):
    goal = next((g for g in store.load_goals() if g.id == goal_id), None)
    if goal is None:
        raise HTTPException(status_code=404, detail=f"Goal {goal_id} not found")
    return goal_progress(store.load_transactions(), goal)


@app.get("/dashboard", response_model=DashboardSummary)
async def dashboard(horizon: int = config.FORECAST_HORIZON, store: DashboardStore = Depends(get_store)):
    try:
        return build_dashboard(store.load_transactions(), store.load_budget(), store.load_goals(), horizon)
    except InvalidArgument as exc:
        raise _bad_request(exc)


@app.post("/reset", status_code=204)
async def reset(store: DashboardStore = Depends(get_store)):
    store.reset()


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("finance_dashboard.server:app", host="0.0.0.0", port=8001, reload=True)
