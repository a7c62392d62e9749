"""
keywords.py

This module defines the keyword lists used to categorize transaction
descriptions.  Each category maps to a list of lower-case fragments; a
description matches a category when any fragment occurs anywhere in the
lower-cased text.  Categories are listed in matching order, so a description
that contains keywords from two categories lands in whichever appears first
here (``"cafe at the mall"`` is Dining, not Shopping).

``Other`` has no keywords: it is only ever reached through the fallback
rules in ``categorize.py``.
"""

from finance_dashboard.models import Category

KEYWORD_MAP = {
    Category.GROCERIES: ["grocery", "supermarket", "market", "aldi", "walmart"],
    Category.ENTERTAINMENT: ["netflix", "movie", "concert", "spotify", "game"],
    Category.TRANSPORT: ["uber", "lyft", "taxi", "bus", "train", "fuel", "gas"],
    Category.DINING: ["restaurant", "cafe", "diner", "pizza", "coffee", "eat"],
    # "gas bill" never wins: Transport already claims "gas".
    Category.UTILITIES: ["electric", "water", "gas bill", "internet", "phone"],
    Category.HEALTH: ["pharmacy", "hospital", "doctor", "dentist", "clinic"],
    Category.SHOPPING: ["amazon", "mall", "clothes", "shoe", "store", "shop"],
    Category.INCOME: ["salary", "deposit", "payroll", "refund"],
}

# Unmatched expenses above this magnitude are assumed to be purchases.
LARGE_PURCHASE_THRESHOLD = 200
