"""Conversions between TeapotMapping (transport) and Teapot (domain)."""

from dataclasses import asdict

from teapots.domain import Teapot
from teapots.schemas.teapot import TeapotMapping


def to_mapping(teapot: Teapot) -> TeapotMapping:
    """Return a mapping carrying every field of teapot, all marked as set."""
    return TeapotMapping(**asdict(teapot))


def from_mapping(mapping: TeapotMapping, target: Teapot) -> None:
    """Copy the fields present in mapping onto target, in place."""
    for field, value in mapping.model_dump(exclude_unset=True).items():
        setattr(target, field, value)


def to_teapot(mapping: TeapotMapping) -> Teapot:
    """Build a new teapot from a fully validated mapping."""
    return Teapot(
        id=mapping.id,  # type: ignore[arg-type]
        name=mapping.name,  # type: ignore[arg-type]
        brand=mapping.brand,  # type: ignore[arg-type]
        capacity=mapping.capacity,  # type: ignore[arg-type]
    )
