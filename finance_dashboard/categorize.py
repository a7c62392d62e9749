from __future__ import annotations

from typing import Iterable, List, Optional

from finance_dashboard.keywords import KEYWORD_MAP, LARGE_PURCHASE_THRESHOLD
from finance_dashboard.models import Category, Transaction


def categorize(description: Optional[str], amount: float) -> Category:
    """Assign a category from the description text and the signed amount.

    Positive amounts are always income.  Otherwise the first category (in
    ``KEYWORD_MAP`` order) with a keyword contained in the description wins,
    and unmatched rows fall back on the size of the amount.
    """
    if not description:
        return Category.OTHER

    if amount > 0:
        return Category.INCOME

    lowered = description.lower()
    for category, keywords in KEYWORD_MAP.items():
        if any(keyword in lowered for keyword in keywords):
            return category

    if abs(amount) > LARGE_PURCHASE_THRESHOLD:
        return Category.SHOPPING
    return Category.OTHER


def backfill_categories(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Return the transactions with a category on every row.

    Rows that already carry a category are passed through as-is; the rest are
    copied with the result of ``categorize``.
    """
    filled = []
    for txn in transactions:
        if txn.category is None:
            txn = txn.model_copy(update={"category": categorize(txn.description, txn.amount)})
        filled.append(txn)
    return filled
