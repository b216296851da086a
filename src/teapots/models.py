"""SQLAlchemy models.

All ORM models inherit from Base so that init_db() can create their tables.
"""

from sqlalchemy import CheckConstraint, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from teapots.db.session import Base
from teapots.domain import MAX_LENGTHS


class TeapotRecord(Base):
    __tablename__ = "teapots"
    __table_args__ = (CheckConstraint("capacity > 0", name="capacity_positive"),)

    id: Mapped[str] = mapped_column(String(MAX_LENGTHS["id"]), primary_key=True)
    name: Mapped[str] = mapped_column(String(MAX_LENGTHS["name"]))
    brand: Mapped[str] = mapped_column(String(MAX_LENGTHS["brand"]))
    capacity: Mapped[float] = mapped_column(Float)
