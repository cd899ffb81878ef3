"""Seed the built-in exercise catalog. Safe to re-run.

Usage (from the repo root, after `alembic upgrade head`):
    python scripts/seed_exercises.py
"""

import asyncio
import logging

from liftlog.db.session import async_session_maker, engine
from liftlog.services.catalog import seed_catalog


async def main():
    async with async_session_maker() as session:
        added = await seed_catalog(session)
        await session.commit()
    await engine.dispose()
    print(f"Catalog seeded: {added} new exercise(s).")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
