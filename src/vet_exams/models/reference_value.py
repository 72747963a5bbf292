"""
Reference value model for the vet-exams package.

Reference values are the normal ranges of an organ measurement for a given
exam type and species (for example the length of a dog's left kidney on
an ultrasound). One row exists per (exam_type, species, organ, measurement).
"""

from typing import Optional

from sqlalchemy import REAL, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class ReferenceValue(Base):
    """Normal range of a measurement, with optional bounds and unit."""

    __tablename__ = "reference_values"
    __table_args__ = (
        UniqueConstraint("exam_type", "species", "organ", "measurement"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    exam_type: Mapped[str] = mapped_column(Text, nullable=False)
    species: Mapped[str] = mapped_column(Text, nullable=False)
    organ: Mapped[str] = mapped_column(Text, nullable=False)
    measurement: Mapped[str] = mapped_column(Text, nullable=False)
    min_value: Mapped[Optional[float]] = mapped_column(REAL)
    max_value: Mapped[Optional[float]] = mapped_column(REAL)
    unit: Mapped[Optional[str]] = mapped_column(Text)

    def __repr__(self) -> str:
        return (
            f"<ReferenceValue(id={self.id}, exam_type={self.exam_type!r}, "
            f"species={self.species!r}, organ={self.organ!r}, "
            f"measurement={self.measurement!r})>"
        )
