"""Reusable seed data fixtures for integration tests."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories import make_record


@pytest_asyncio.fixture
async def seeded_db(db: AsyncSession) -> AsyncSession:
    """Seed the three default teapots plus one extra."""
    db.add_all(
        [
            make_record(id="mouse", name="Mouse", brand="Tefal", capacity=0.3),
            make_record(id="einstein", name="Einstein", brand="Sony", capacity=3),
            make_record(id="nemezis", name="Nemezis", brand="Philips", capacity=10),
            make_record(id="brown-betty", name="Brown Betty", brand="Cauldon", capacity=3),
        ]
    )
    await db.commit()
    return db
