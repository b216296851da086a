"""Teapot domain entity.

A plain dataclass: services and mappers work with it, repositories convert
it to and from ORM rows, routers serialize it through Pydantic schemas.
"""

from dataclasses import dataclass

# Allowed capacities, in liters
L0_3 = 0.3
L3 = 3.0
L10 = 10.0

CAPACITIES: tuple[float, ...] = (L0_3, L3, L10)

# Column widths of the teapots table
MAX_LENGTHS: dict[str, int] = {"id": 64, "name": 100, "brand": 100}


@dataclass
class Teapot:
    id: str
    name: str
    brand: str
    capacity: float
