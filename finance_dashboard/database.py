import logging
from typing import Iterable, List

from sqlalchemy import Column, Date, DateTime, Float, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from finance_dashboard import config
from finance_dashboard.models import Budget, Category, Goal, Transaction

logger = logging.getLogger(__name__)

Base = declarative_base()


def make_engine(url: str = config.DB_URL, **kwargs):
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, **kwargs)


engine = make_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# --- Models ---

class TransactionRecord(Base):
    __tablename__ = "transactions"

    id = Column(String, primary_key=True, index=True)
    date = Column(Date, nullable=False)
    description = Column(String, default="")
    amount = Column(Float, nullable=False)
    category = Column(String, nullable=True)   # None until categorized


class GoalRecord(Base):
    __tablename__ = "goals"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    target = Column(Float, nullable=False)
    created_at = Column(DateTime, nullable=False)


class BudgetSettings(Base):
    __tablename__ = "budget_settings"

    id = Column(Integer, primary_key=True)   # single row, id 1
    monthly_limit = Column(Float, nullable=False)
    alert_threshold_percent = Column(Float, nullable=False)


# --- Init DB ---
def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)


def _to_transaction(row: TransactionRecord) -> Transaction:
    return Transaction(
        id=row.id,
        date=row.date,
        description=row.description or "",
        amount=row.amount,
        category=Category(row.category) if row.category else None,
    )


def _to_record(txn: Transaction) -> TransactionRecord:
    return TransactionRecord(
        id=txn.id,
        date=txn.date,
        description=txn.description,
        amount=txn.amount,
        category=txn.category.value if txn.category else None,
    )


class DashboardStore:
    """Load/save collaborator for dashboard state.

    Each call opens and closes its own session from ``session_factory`` so the
    store can be shared across requests.
    """

    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    # Transactions

    def load_transactions(self) -> List[Transaction]:
        db = self.session_factory()
        try:
            rows = db.query(TransactionRecord).order_by(TransactionRecord.date.desc()).all()
            return [_to_transaction(r) for r in rows]
        finally:
            db.close()

    def add_transactions(self, transactions: Iterable[Transaction]) -> int:
        """Insert transactions, skipping ids that already exist. Returns the count added."""
        db = self.session_factory()
        try:
            count = 0
            for txn in transactions:
                if db.get(TransactionRecord, txn.id) is not None:
                    continue
                db.add(_to_record(txn))
                count += 1
            db.commit()
            logger.info("Stored %d new transactions", count)
            return count
        finally:
            db.close()

    def replace_transactions(self, transactions: Iterable[Transaction]) -> int:
        db = self.session_factory()
        try:
            db.query(TransactionRecord).delete()
            records = [_to_record(t) for t in transactions]
            db.add_all(records)
            db.commit()
            return len(records)
        finally:
            db.close()

    def delete_transaction(self, txn_id: str) -> bool:
        db = self.session_factory()
        try:
            deleted = db.query(TransactionRecord).filter(TransactionRecord.id == txn_id).delete()
            db.commit()
            return bool(deleted)
        finally:
            db.close()

    # Budget

    def load_budget(self) -> Budget:
        db = self.session_factory()
        try:
            row = db.get(BudgetSettings, 1)
            if row is None:
                return Budget(
                    monthly_limit=config.DEFAULT_MONTHLY_BUDGET,
                    alert_threshold_percent=config.DEFAULT_ALERT_THRESHOLD_PERCENT,
                )
            return Budget(monthly_limit=row.monthly_limit, alert_threshold_percent=row.alert_threshold_percent)
        finally:
            db.close()

    def save_budget(self, budget: Budget) -> Budget:
        db = self.session_factory()
        try:
            row = db.get(BudgetSettings, 1)
            if row is None:
                row = BudgetSettings(id=1)
                db.add(row)
            row.monthly_limit = budget.monthly_limit
            row.alert_threshold_percent = budget.alert_threshold_percent
            db.commit()
            return budget
        finally:
            db.close()

    # Goals

    def load_goals(self) -> List[Goal]:
        db = self.session_factory()
        try:
            rows = db.query(GoalRecord).order_by(GoalRecord.created_at.desc()).all()
            return [Goal(id=r.id, name=r.name, target=r.target, created_at=r.created_at) for r in rows]
        finally:
            db.close()

    def add_goal(self, goal: Goal) -> Goal:
        db = self.session_factory()
        try:
            db.add(GoalRecord(id=goal.id, name=goal.name, target=goal.target, created_at=goal.created_at))
            db.commit()
            return goal
        finally:
            db.close()

    def delete_goal(self, goal_id: str) -> bool:
        db = self.session_factory()
        try:
            deleted = db.query(GoalRecord).filter(GoalRecord.id == goal_id).delete()
            db.commit()
            return bool(deleted)
        finally:
            db.close()

    def reset(self) -> None:
        """Drop every transaction, goal and budget setting."""
        db = self.session_factory()
        try:
            db.query(TransactionRecord).delete()
            db.query(GoalRecord).delete()
            db.query(BudgetSettings).delete()
            db.commit()
            logger.info("Dashboard state reset")
        finally:
            db.close()
