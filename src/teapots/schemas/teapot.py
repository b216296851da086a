"""Teapot request and response schemas.

TeapotMapping is the transport representation for both create and update
bodies. Every field is optional so that missing or empty fields reach the
validator and come back as readable messages rather than pydantic errors.
"""

from pydantic import BaseModel, Field


class TeapotMapping(BaseModel):
    """Teapot fields as sent by a client. Unset fields are left alone on update."""

    model_config = {"extra": "ignore"}

    id: str | None = None
    name: str | None = None
    brand: str | None = None
    capacity: float | None = Field(default=None, strict=True)


class TeapotResponse(BaseModel):
    """A stored teapot."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    brand: str
    capacity: float
