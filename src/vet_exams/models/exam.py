"""
Exam model for the vet-exams package.

This module contains the Exam table. The ``exam_data`` column holds the
exam's structured payload serialized as JSON text; see
``vet_exams.database.types`` for the (de)serialization rules.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, timestamp_column


class Exam(Base):
    """
    Exam performed on a patient.

    ``patient_id`` references ``patients.id`` with ``ON DELETE CASCADE``;
    the engine enforces it once foreign keys are enabled on the connection.
    ``updated_at`` is refreshed by the update statement, not by the ORM.
    """

    __tablename__ = "exams"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    patient_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("patients.id", ondelete="CASCADE"),
        nullable=False,
    )
    exam_type: Mapped[str] = mapped_column(Text, nullable=False)
    exam_data: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[Optional[datetime]] = timestamp_column()
    updated_at: Mapped[Optional[datetime]] = timestamp_column()

    def __repr__(self) -> str:
        return f"<Exam(id={self.id}, patient_id={self.patient_id}, exam_type={self.exam_type!r})>"
