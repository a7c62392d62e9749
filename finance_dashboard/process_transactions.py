"""
process_transactions.py
-----------------------
Turn pasted CSV text into categorized transactions, and build synthetic
transaction histories for demos and empty dashboards.

The CSV format is deliberately loose: one ``date,description,amount`` row
per line, no header, extra trailing fields ignored.  Rows that cannot be
read are skipped and counted rather than failing the whole import.
"""

from __future__ import annotations

import logging
import math
import random
import re
from datetime import date, timedelta
from typing import List, Optional

import pandas as pd

from finance_dashboard.categorize import categorize
from finance_dashboard.models import Category, ParseResult, Transaction

logger = logging.getLogger(__name__)

SAMPLE_CATEGORIES = [
    Category.GROCERIES,
    Category.DINING,
    Category.TRANSPORT,
    Category.UTILITIES,
    Category.ENTERTAINMENT,
    Category.SHOPPING,
]


def _parse_amount(raw: str) -> Optional[float]:
    amount = pd.to_numeric(raw, errors="coerce")
    if pd.isna(amount) or not math.isfinite(float(amount)):
        return None
    return float(amount)


def _parse_date(raw: str) -> Optional[date]:
    parsed = pd.to_datetime(raw, errors="coerce", format="mixed")
    if pd.isna(parsed):
        return None
    return parsed.date()


def parse_csv(text: str) -> ParseResult:
    """Parse ``date,description,amount`` lines into categorized transactions.

    Blank lines are ignored.  Lines with fewer than three fields, or whose
    amount or date does not parse, are skipped and counted in
    ``skipped_line_count``.
    """
    rows = [line.strip() for line in re.split(r"\r?\n", text or "")]

    transactions: List[Transaction] = []
    skipped = 0
    for line_no, line in enumerate(rows, start=1):
        if not line:
            continue

        parts = line.split(",")
        if len(parts) < 3:
            logger.debug("Line %d: expected 3 fields, got %d", line_no, len(parts))
            skipped += 1
            continue

        raw_date, description, raw_amount = (p.strip() for p in parts[:3])
        amount = _parse_amount(raw_amount)
        if amount is None:
            logger.debug("Line %d: amount %r is not a number", line_no, raw_amount)
            skipped += 1
            continue

        txn_date = _parse_date(raw_date)
        if txn_date is None:
            logger.debug("Line %d: date %r is not a date", line_no, raw_date)
            skipped += 1
            continue

        transactions.append(
            Transaction(
                date=txn_date,
                description=description,
                amount=amount,
                category=categorize(description, amount),
            )
        )

    if skipped:
        logger.info("Parsed %d transactions, skipped %d malformed lines", len(transactions), skipped)
    return ParseResult(transactions=transactions, skipped_line_count=skipped)


def generate_sample_transactions(
    count: int = 120,
    seed: Optional[int] = None,
    today: Optional[date] = None,
) -> List[Transaction]:
    """
    Build ``count`` random expenses from the past year plus one salary deposit.

    Pass ``seed`` for a repeatable history and ``today`` to pin the dates.
    """
    rng = random.Random(seed)
    today = today or date.today()

    sample = []
    for i in range(count):
        days_ago = rng.randrange(365)
        amount = -1 * (rng.random() * 200 + 5)
        category = rng.choice(SAMPLE_CATEGORIES)
        sample.append(
            Transaction(
                id=str(i),
                date=today - timedelta(days=days_ago),
                description=f"{category.value} purchase #{i}",
                amount=round(amount, 2),
                category=category,
            )
        )

    sample.append(
        Transaction(
            id="i1",
            date=today,
            description="Salary deposit",
            amount=3000.0,
            category=Category.INCOME,
        )
    )
    return sample
