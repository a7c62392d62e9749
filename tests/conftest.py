from datetime import date

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from finance_dashboard.database import DashboardStore, init_db, make_engine
from finance_dashboard.models import Transaction


@pytest.fixture
def store():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    yield DashboardStore(sessionmaker(autocommit=False, autoflush=False, bind=engine))
    engine.dispose()


@pytest.fixture
def transactions():
    return [
        Transaction(id="a", date=date(2025, 1, 5), description="Coffee shop", amount=-4.5),
        Transaction(id="b", date=date(2025, 1, 20), description="Whole Foods grocery", amount=-120.25),
        Transaction(id="c", date=date(2025, 2, 1), description="Salary deposit", amount=250.0),
        Transaction(id="d", date=date(2025, 2, 14), description="Uber ride", amount=-18.0),
        Transaction(id="e", date=date(2025, 3, 3), description="Electric company", amount=-80.1),
    ]
