"""Shared FastAPI dependencies.

Reusable type aliases and dependency functions that routers import.
Defined here (not in main.py) to avoid circular imports when routers
are registered in main.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from teapots.db.session import get_db
from teapots.exceptions import ValidationFailedError
from teapots.schemas.teapot import TeapotMapping
from teapots.services.teapot import TeapotSeeder
from teapots.validators import validate_teapot

DB = Annotated[AsyncSession, Depends(get_db)]


def get_seeder(request: Request) -> TeapotSeeder:
    """Return the seeder built by the lifespan handler."""
    return request.app.state.seeder  # type: ignore[no-any-return]


Seeder = Annotated[TeapotSeeder, Depends(get_seeder)]


async def valid_teapot(body: TeapotMapping) -> TeapotMapping:
    """Request body for create: every field required and valid."""
    errors = validate_teapot(body)
    if errors:
        raise ValidationFailedError(errors)
    return body


async def valid_mapping(body: TeapotMapping) -> TeapotMapping:
    """Request body for update: only the fields present are checked."""
    errors = validate_teapot(body, partial=True)
    if errors:
        raise ValidationFailedError(errors)
    return body


ValidTeapot = Annotated[TeapotMapping, Depends(valid_teapot)]
ValidMapping = Annotated[TeapotMapping, Depends(valid_mapping)]
