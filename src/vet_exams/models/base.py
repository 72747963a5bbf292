"""
Base model class for all SQLAlchemy models in the vet-exams package.

The models in this package describe the tables of the local exam records
database. They are the single source of the DDL emitted by
``ExamDatabase.ensure_schema``; data access itself goes through plain
parameterized SQL, so the models carry no behaviour beyond their columns.

Example:
    >>> from vet_exams.models.base import Base
    >>> from sqlalchemy.orm import Mapped, mapped_column
    >>> from sqlalchemy import Text

    >>> class Note(Base):
    ...     __tablename__ = "notes"
    ...     __table_args__ = {"sqlite_autoincrement": True}
    ...     id: Mapped[int] = mapped_column(primary_key=True)
    ...     body: Mapped[str] = mapped_column(Text)
"""

from typing import Any

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, MappedColumn, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """
    Base declarative class for all SQLAlchemy models.

    All tables registered on ``Base.metadata`` are created by the schema
    initialization routine.
    """


def timestamp_column() -> MappedColumn[Any]:
    """Timestamp column defaulted to CURRENT_TIMESTAMP by the database engine."""
    return mapped_column(
        DateTime,
        server_default=func.current_timestamp(),
    )
