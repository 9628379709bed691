"""
Build the SQLite statute database from the ingestion seeds.
Defaults to data/seed -> data/database.db; both can be overridden by flags or
the KENYA_LAW_SEED_DIR / KENYA_LAW_DB_PATH environment variables.
"""
import os
import sys
import argparse
import logging

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from kenya_law import config  # noqa: E402
from kenya_law.store.loader import build_database  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("build_db")


def main():
    parser = argparse.ArgumentParser(description="Build statute database from seed JSON")
    parser.add_argument("--seed-dir", type=str, default=config.SEED_DIR, help="Directory containing seed JSON")
    parser.add_argument("--out", type=str, default=config.DB_PATH, help="Output SQLite path")
    args = parser.parse_args()

    try:
        logger.info(f"Loading seeds from {args.seed_dir}...")
        totals = build_database(args.seed_dir, args.out)
        logger.info(
            f"Database saved to {args.out}: {totals['documents']} documents, "
            f"{totals['provisions']} provisions, {totals['definitions']} definitions "
            f"({totals['failed']} seeds skipped)"
        )
    except Exception as e:
        logger.error(f"Failed to build database: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
