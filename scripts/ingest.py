"""Ingest key Kenyan Acts from new.kenyalaw.org (Akoma Ntoso HTML).

Kenya Law provides free public access to legislation under Government Open
Data principles. Each Act is fetched (or read from data/source/), parsed into
provisions and definitions, and written to data/seed/<act-id>.json.

Usage:
    python scripts/ingest.py                 # full ingestion
    python scripts/ingest.py --limit 5       # first 5 Acts of the catalog
    python scripts/ingest.py --skip-fetch    # reuse cached pages and seeds

A failing Act never stops the run; only an unwritable output location does
(exit code 1).
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
from kenya_law.ingest.catalog import KEY_KENYAN_ACTS  # noqa: E402
from kenya_law.ingest.pipeline import IngestionOrchestrator  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger("ingest")


def main():
    parser = argparse.ArgumentParser(description="Ingest Kenyan legislation from new.kenyalaw.org")
    parser.add_argument("--limit", type=int, default=None, help="Only process the first N Acts")
    parser.add_argument("--skip-fetch", action="store_true", help="Reuse cached pages and seeds")
    parser.add_argument("--source-dir", type=str, default=config.SOURCE_DIR, help="Raw HTML cache directory")
    parser.add_argument("--seed-dir", type=str, default=config.SEED_DIR, help="Seed JSON output directory")
    args = parser.parse_args()

    logger.info("Kenya Law ingestion pipeline")
    logger.info("  Source: new.kenyalaw.org (National Council for Law Reporting)")
    logger.info("  Format: AKN (Akoma Ntoso) structured HTML")
    if args.limit:
        logger.info(f"  --limit {args.limit}")
    if args.skip_fetch:
        logger.info("  --skip-fetch")

    acts = KEY_KENYAN_ACTS[:args.limit] if args.limit else KEY_KENYAN_ACTS
    try:
        report = IngestionOrchestrator(source_dir=args.source_dir, seed_dir=args.seed_dir).run(
            acts, skip_fetch=args.skip_fetch
        )
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)
    print(report.render())


if __name__ == "__main__":
    main()
