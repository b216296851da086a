"""Field constraints for teapot request bodies."""

from teapots.domain import CAPACITIES, MAX_LENGTHS
from teapots.schemas.teapot import TeapotMapping

REQUIRED_FIELDS = ("id", "name", "brand", "capacity")


def _format_capacity(value: float) -> str:
    return f"{value:g}"


def validate_teapot(teapot: TeapotMapping, *, partial: bool = False) -> list[str]:
    """Return one message per violated constraint; an empty list means valid.

    With partial=True only the fields present in the body are checked, which
    is what an update needs: absent fields keep their stored value.
    """
    fields = [f for f in REQUIRED_FIELDS if not partial or f in teapot.model_fields_set]
    errors: list[str] = []

    for field in fields:
        value = getattr(teapot, field)
        if value is None:
            errors.append(f"{field} is required")
        elif isinstance(value, str) and not value.strip():
            errors.append(f"{field} must not be empty")
        elif isinstance(value, str) and len(value) > MAX_LENGTHS[field]:
            errors.append(f"{field} must be at most {MAX_LENGTHS[field]} characters")

    if "capacity" in fields and teapot.capacity is not None and teapot.capacity not in CAPACITIES:
        allowed = ", ".join(_format_capacity(c) for c in CAPACITIES)
        errors.append(
            f"capacity must be one of {allowed} liters, got {_format_capacity(teapot.capacity)}"
        )

    return errors
