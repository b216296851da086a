"""Teapot data-access layer.

The id-keyed store: get / put / delete / clear / exists / count over the
teapots table. Pure query functions, no business rules, no HTTP concerns.
Each function takes a session; none of them commit.
"""

from collections.abc import Iterable

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from teapots.domain import Teapot
from teapots.models import TeapotRecord


def _to_entity(record: TeapotRecord) -> Teapot:
    return Teapot(id=record.id, name=record.name, brand=record.brand, capacity=record.capacity)


async def get_teapot(db: AsyncSession, teapot_id: str) -> Teapot | None:
    """Return the teapot stored under teapot_id, or None."""
    record = await db.get(TeapotRecord, teapot_id)
    return _to_entity(record) if record is not None else None


async def list_teapots(db: AsyncSession) -> list[Teapot]:
    result = await db.execute(select(TeapotRecord).order_by(TeapotRecord.id))
    return [_to_entity(record) for record in result.scalars().all()]


async def list_teapots_by_ids(db: AsyncSession, teapot_ids: Iterable[str]) -> list[Teapot]:
    """Return the stored teapots whose id is in teapot_ids; unknown ids are skipped."""
    ids = list(teapot_ids)
    if not ids:
        return []
    stmt = select(TeapotRecord).where(TeapotRecord.id.in_(ids)).order_by(TeapotRecord.id)
    result = await db.execute(stmt)
    return [_to_entity(record) for record in result.scalars().all()]


async def existing_ids(db: AsyncSession, teapot_ids: Iterable[str]) -> set[str]:
    """Return the subset of teapot_ids present in the store."""
    ids = list(teapot_ids)
    if not ids:
        return set()
    result = await db.execute(select(TeapotRecord.id).where(TeapotRecord.id.in_(ids)))
    return set(result.scalars().all())


async def teapot_exists(db: AsyncSession, teapot_id: str) -> bool:
    stmt = select(TeapotRecord.id).where(TeapotRecord.id == teapot_id)
    return (await db.scalar(stmt)) is not None


async def count_teapots(db: AsyncSession) -> int:
    result = await db.execute(select(func.count(TeapotRecord.id)))
    return result.scalar_one()


async def insert_teapots(db: AsyncSession, teapots: Iterable[Teapot]) -> None:
    db.add_all(
        TeapotRecord(id=t.id, name=t.name, brand=t.brand, capacity=t.capacity) for t in teapots
    )
    await db.flush()


async def replace_teapot(db: AsyncSession, teapot_id: str, teapot: Teapot) -> bool:
    """Overwrite the row stored under teapot_id, re-keying it if teapot.id differs.

    Returns False when no row is stored under teapot_id.
    """
    record = await db.get(TeapotRecord, teapot_id)
    if record is None:
        return False
    record.id = teapot.id
    record.name = teapot.name
    record.brand = teapot.brand
    record.capacity = teapot.capacity
    await db.flush()
    return True


async def delete_teapot(db: AsyncSession, teapot_id: str) -> bool:
    """Delete the row stored under teapot_id. Returns False when there was none."""
    record = await db.get(TeapotRecord, teapot_id)
    if record is None:
        return False
    await db.delete(record)
    await db.flush()
    return True


async def delete_all_teapots(db: AsyncSession) -> int:
    """Delete every row and return how many were removed."""
    result = await db.execute(delete(TeapotRecord))
    return result.rowcount  # type: ignore[attr-defined, no-any-return]
