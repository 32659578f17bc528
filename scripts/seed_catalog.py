#!/usr/bin/env python3
"""Seed product catalog script.

Deletes all products and inserts the seed dataset.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --create-tables --concurrency 2
"""

import argparse
import asyncio

from catalog_api.domain.exceptions import SeedError
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import async_session_factory, create_tables, engine
from catalog_api.infrastructure.logging import configure_logging
from catalog_api.seed.data import SEED_PRODUCTS
from catalog_api.seed.service import SeedService


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Replace the product catalog with the seed dataset",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create database tables before seeding",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=settings.seed_concurrency,
        help=f"Maximum concurrent inserts (default: {settings.seed_concurrency})",
    )

    args = parser.parse_args()

    configure_logging(settings.log_level, json_output=settings.log_json)

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)
    print(f"Products: {len(SEED_PRODUCTS)}")
    print(f"Concurrency: {args.concurrency}")
    print()

    try:
        if args.create_tables:
            print("Creating database tables...")
            await create_tables()
            print("Tables ready.")
            print()

        service = SeedService(async_session_factory, concurrency=args.concurrency)
        try:
            message = await service.run_seed()
        except SeedError as e:
            print(f"  ✗ {e.message}")
            for title, error in e.failures.items():
                print(f"    - {title}: {error}")
            raise

        print(f"  ✓ {message}")
    finally:
        await engine.dispose()

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
