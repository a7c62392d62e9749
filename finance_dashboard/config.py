from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Default to local SQLite, but allow override for a hosted Postgres
DB_URL = os.getenv("DATABASE_URL", "sqlite:///finance_dashboard.db")

DEFAULT_MONTHLY_BUDGET = float(os.getenv("DEFAULT_MONTHLY_BUDGET", "2000"))
DEFAULT_ALERT_THRESHOLD_PERCENT = float(os.getenv("DEFAULT_ALERT_THRESHOLD_PERCENT", "90"))
FORECAST_HORIZON = int(os.getenv("FORECAST_HORIZON", "3"))
SAMPLE_SIZE = int(os.getenv("SAMPLE_SIZE", "120"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(level: str | int | None = None) -> None:
    """Attach a console handler to the package logger once."""
    logger = logging.getLogger("finance_dashboard")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level or LOG_LEVEL)

    if logger.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
