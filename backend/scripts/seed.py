#!/usr/bin/env python3
"""Load the sample employees into the configured store.

Run from the backend/ directory:

    python3 scripts/seed.py [--dry-run] [--force] [--verbose]

Uses DATABASE_URL / EMPLOYEE_STORE from the environment (or .env), creates the
schema when missing and saves the sample records unless the store already
holds employees.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from app.core.config import Settings  # noqa: E402
from app.core.logging_config import setup_logging  # noqa: E402
from app.services.employee_store import build_employee_store  # noqa: E402
from app.services.seed_loader import SEED_EMPLOYEES, seed_employees  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load sample employees into the employee store")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the sample employees without writing anything",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Save the samples even when the store already holds employees",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


async def seed(args: argparse.Namespace, settings: Settings | None = None) -> int:
    """Seed the store and return the number of employees written."""
    settings = settings or Settings()

    if args.dry_run:
        for first_name, last_name, role in SEED_EMPLOYEES:
            logger.info("[DRY RUN] Would preload %s %s (%s)", first_name, last_name, role)
        return 0

    store = build_employee_store(settings)
    await store.initialize()
    try:
        saved = await seed_employees(store, only_if_empty=not args.force)
    finally:
        await store.close()

    logger.info("Seeding complete: %d employees written", len(saved))
    return len(saved)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "INFO")
    asyncio.run(seed(args))


if __name__ == "__main__":
    main()
