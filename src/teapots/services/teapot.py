"""Teapot business logic.

Enforces the existence and uniqueness rules on top of the repository and
raises domain exceptions that main.py translates into HTTP responses.
Functions take the request's session and never commit; TeapotSeeder is the
one place that opens and commits its own session.
"""

import asyncio
from collections.abc import Iterable, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from teapots.domain import Teapot
from teapots.exceptions import AlreadyExistsError, NotFoundError
from teapots.logging import get_logger
from teapots.repositories.teapot import (
    count_teapots,
    delete_all_teapots,
    delete_teapot,
    existing_ids,
    get_teapot,
    insert_teapots,
    list_teapots,
    list_teapots_by_ids,
    replace_teapot,
    teapot_exists,
)

ENTITY = "Teapot"

logger = get_logger(__name__)


async def find(db: AsyncSession, teapot_id: str) -> Teapot:
    teapot = await get_teapot(db, teapot_id)
    if teapot is None:
        raise NotFoundError(ENTITY, teapot_id)
    return teapot


async def find_all(db: AsyncSession) -> list[Teapot]:
    return await list_teapots(db)


async def find_all_by_ids(db: AsyncSession, teapot_ids: Iterable[str]) -> list[Teapot]:
    """Return the teapots with the given ids.

    Raises NotFoundError naming every missing id (in request order) if any is absent.
    """
    ids = list(dict.fromkeys(teapot_ids))
    teapots = await list_teapots_by_ids(db, ids)
    found = {teapot.id for teapot in teapots}
    missing = [teapot_id for teapot_id in ids if teapot_id not in found]
    if missing:
        raise NotFoundError(ENTITY, *missing)
    return teapots


async def count(db: AsyncSession) -> int:
    return await count_teapots(db)


async def exists(db: AsyncSession, teapot: Teapot) -> bool:
    return await teapot_exists(db, teapot.id)


async def add(db: AsyncSession, teapot: Teapot) -> None:
    if await exists(db, teapot):
        raise AlreadyExistsError(ENTITY, teapot.id)
    await insert_teapots(db, [teapot])
    logger.info("teapot_created", teapot_id=teapot.id)


async def add_all(db: AsyncSession, teapots: Sequence[Teapot]) -> None:
    """Insert a batch of teapots, all or nothing.

    Raises AlreadyExistsError naming every id that is already stored or
    repeated inside the batch.
    """
    seen: set[str] = set()
    repeated: list[str] = []
    for teapot in teapots:
        if teapot.id in seen and teapot.id not in repeated:
            repeated.append(teapot.id)
        seen.add(teapot.id)

    stored = await existing_ids(db, seen)
    conflicts = list(dict.fromkeys([t.id for t in teapots if t.id in stored] + repeated))
    if conflicts:
        raise AlreadyExistsError(ENTITY, *conflicts)
    await insert_teapots(db, teapots)


async def update(db: AsyncSession, teapot_id: str, teapot: Teapot) -> None:
    """Replace the teapot stored under teapot_id with teapot.

    teapot.id may differ from teapot_id, in which case the entry is re-keyed.
    """
    if not await teapot_exists(db, teapot_id):
        raise NotFoundError(ENTITY, teapot_id)
    if teapot.id != teapot_id and await exists(db, teapot):
        raise AlreadyExistsError(ENTITY, teapot.id)
    await replace_teapot(db, teapot_id, teapot)
    logger.info("teapot_updated", teapot_id=teapot_id, new_id=teapot.id)


async def delete(db: AsyncSession, teapot_id: str) -> None:
    if not await delete_teapot(db, teapot_id):
        raise NotFoundError(ENTITY, teapot_id)
    logger.info("teapot_deleted", teapot_id=teapot_id)


async def delete_all(db: AsyncSession) -> None:
    removed = await delete_all_teapots(db)
    logger.info("teapots_cleared", removed=removed)


class TeapotSeeder:
    """Resets the store to a fixed list of seed teapots.

    Resets are serialized by a lock and each one runs in its own committed
    session, so concurrent calls never observe a half-cleared store.
    Create one seeder per event loop.
    """

    def __init__(
        self,
        sessions: async_sessionmaker[AsyncSession],
        seeds: Iterable[Teapot],
    ) -> None:
        self._sessions = sessions
        self._seeds = list(seeds)
        self._lock = asyncio.Lock()

    @property
    def seeds(self) -> list[Teapot]:
        return list(self._seeds)

    async def reset(self) -> None:
        """Clear the store and reinstall the seeds.

        Best effort: domain errors and integrity violations (a concurrent
        request inserting a seed id, a seed breaking a table constraint) are
        logged and the reset is rolled back, but never raised to the caller.
        """
        async with self._lock, self._sessions() as db:
            try:
                await delete_all(db)
                await add_all(db, self._seeds)
                await db.commit()
            except (NotFoundError, AlreadyExistsError) as exc:
                await db.rollback()
                logger.warning("teapot_reset_failed", error=exc.message)
                return
            except IntegrityError as exc:
                await db.rollback()
                logger.warning("teapot_reset_failed", error=str(exc.orig))
                return
        logger.info("teapots_reset", seeds=[teapot.id for teapot in self._seeds])
