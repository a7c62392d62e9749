"""
seed_db.py
----------
Fill the dashboard store with a synthetic transaction history so an empty
dashboard has something to show.

Usage:

    python -m finance_dashboard.seed_db [--count 120] [--seed 42] [--force]

Existing transactions are left alone unless ``--force`` is given.
"""

import argparse
import logging
from typing import Optional

from finance_dashboard import config
from finance_dashboard.database import DashboardStore, init_db
from finance_dashboard.process_transactions import generate_sample_transactions

logger = logging.getLogger(__name__)


def seed_transactions(store: DashboardStore, count: int, seed: Optional[int] = None, force: bool = False) -> int:
    """Replace the stored transactions with sample data. Returns the number written."""
    if store.load_transactions() and not force:
        logger.info("Transactions already exist. Skipping seed.")
        return 0

    written = store.replace_transactions(generate_sample_transactions(count, seed=seed))
    logger.info("Database seeded with %d sample transactions.", written)
    return written


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Seed the finance dashboard with sample transactions")
    parser.add_argument("--count", type=int, default=config.SAMPLE_SIZE, help="Number of sample expenses")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a repeatable history")
    parser.add_argument("--force", action="store_true", help="Overwrite existing transactions")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    config.configure_logging()
    init_db()
    seed_transactions(DashboardStore(), args.count, seed=args.seed, force=args.force)


if __name__ == "__main__":
    main()
