"""
Patient model for the vet-exams package.

A patient is an animal seen at the clinic. Exams belong to a patient and
are removed by the engine when the patient is deleted.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, timestamp_column


class Patient(Base):
    """Patient record: the animal, its species/breed and the owner's name."""

    __tablename__ = "patients"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    species: Mapped[Optional[str]] = mapped_column(Text)
    breed: Mapped[Optional[str]] = mapped_column(Text)
    owner_name: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[Optional[datetime]] = timestamp_column()

    def __repr__(self) -> str:
        return f"<Patient(id={self.id}, name={self.name!r})>"
