import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from teapots.domain import MAX_LENGTHS
from teapots.models import TeapotRecord
from tests.factories import make_record


# ---------------------------------------------------------------------------
# 1. Persistence
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_seed_creates_4_teapots(seeded_db: AsyncSession) -> None:
    teapots = (await seeded_db.execute(select(TeapotRecord))).scalars().all()
    assert len(teapots) == 4


# ---------------------------------------------------------------------------
# 2. Check constraint on capacity
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
@pytest.mark.parametrize("capacity", [0, -1.5], ids=["zero", "negative"])
async def test_capacity_must_be_positive(db: AsyncSession, capacity: float) -> None:
    db.add(make_record(capacity=capacity))
    with pytest.raises(IntegrityError):
        await db.flush()


# ---------------------------------------------------------------------------
# 3. Duplicate primary key
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_duplicate_id_raises(db: AsyncSession) -> None:
    db.add(make_record(id="twin"))
    await db.commit()
    db.expunge_all()

    db.add(make_record(id="twin", name="Other"))
    with pytest.raises(IntegrityError):
        await db.flush()


# ---------------------------------------------------------------------------
# 4. Table shape: exactly the teapot fields, widths shared with the validator
# ---------------------------------------------------------------------------
def test_teapot_columns() -> None:
    columns = TeapotRecord.__table__.c
    assert [c.name for c in columns] == ["id", "name", "brand", "capacity"]
    for field, length in MAX_LENGTHS.items():
        assert columns[field].type.length == length
