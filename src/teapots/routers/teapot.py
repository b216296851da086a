"""Teapot CRUD endpoints."""

from fastapi import APIRouter, Query

from teapots.dependencies import DB, Seeder, ValidMapping, ValidTeapot
from teapots.mappers import from_mapping, to_teapot
from teapots.schemas.teapot import TeapotResponse
from teapots.services import teapot as crud

router = APIRouter(prefix="/teapots", tags=["teapots"])


def _split_ids(ids: list[str]) -> list[str]:
    """Accept both ?ids=a&ids=b and ?ids=a,b."""
    return [part.strip() for value in ids for part in value.split(",") if part.strip()]


@router.get("/", response_model=list[TeapotResponse], status_code=200)
async def list_teapots(db: DB, ids: list[str] | None = Query(None)) -> list[TeapotResponse]:
    """List every teapot, or only those named in ``ids`` (404 if any is missing)."""
    if ids is not None:
        teapots = await crud.find_all_by_ids(db, _split_ids(ids))
    else:
        teapots = await crud.find_all(db)
    return [TeapotResponse.model_validate(teapot) for teapot in teapots]


@router.get("/count", status_code=200)
async def count_teapots(db: DB) -> int:
    return await crud.count(db)


@router.get("/{teapot_id}", response_model=TeapotResponse, status_code=200)
async def get_teapot(db: DB, teapot_id: str) -> TeapotResponse:
    return TeapotResponse.model_validate(await crud.find(db, teapot_id))


@router.delete("/{teapot_id}", status_code=204)
async def delete_teapot(db: DB, teapot_id: str) -> None:
    await crud.delete(db, teapot_id)


@router.post("/", response_model=TeapotResponse, status_code=201)
async def create_teapot(db: DB, body: ValidTeapot) -> TeapotResponse:
    teapot = to_teapot(body)
    await crud.add(db, teapot)
    return TeapotResponse.model_validate(teapot)


@router.put("/{teapot_id}", status_code=204)
async def update_teapot(db: DB, teapot_id: str, body: ValidMapping) -> None:
    """Apply the fields present in the body over the stored teapot and save it."""
    teapot = await crud.find(db, teapot_id)
    from_mapping(body, teapot)
    await crud.update(db, teapot_id, teapot)


@router.post("/reset", status_code=204)
async def reset_teapots(seeder: Seeder) -> None:
    """Clear the store and reinstall the seed teapots. Always succeeds."""
    await seeder.reset()
