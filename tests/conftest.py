"""
Pytest configuration and fixtures for vet-exams tests.

This module provides common fixtures for all tests in the vet-exams package:
a facade over a temporary SQLite file with the schema created, and factory
helpers for building entity payloads.
"""

from pathlib import Path
from typing import Any, AsyncGenerator, Dict

import pytest
import pytest_asyncio

from vet_exams.database import ExamDatabase


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    """Path of a fresh database file for one test."""
    return tmp_path / "vet_exams_test.db"


@pytest_asyncio.fixture
async def database(database_path: Path) -> AsyncGenerator[ExamDatabase, None]:
    """
    Provide an ExamDatabase with the schema created.

    Each test gets its own database file, closed after the test completes.
    """
    db = ExamDatabase.from_path(database_path)
    await db.ensure_schema(strict=True)
    try:
        yield db
    finally:
        await db.close()


# Factory classes for building test payloads
class PatientFactory:
    """Factory for patient payloads."""

    @staticmethod
    def build(**kwargs: Any) -> Dict[str, Any]:
        defaults = {
            "name": "Rex",
            "species": "dog",
            "breed": "Labrador",
            "owner_name": "Ana Souza",
        }
        defaults.update(kwargs)
        return defaults

    @staticmethod
    async def create(database: ExamDatabase, **kwargs: Any) -> int:
        result = await database.add_patient(PatientFactory.build(**kwargs))
        return result.last_insert_id


class ExamFactory:
    """Factory for exam payloads."""

    @staticmethod
    def build(patient_id: int, **kwargs: Any) -> Dict[str, Any]:
        defaults = {
            "patient_id": patient_id,
            "exam_type": "ultrasound",
            "exam_data": {
                "liver": {"size": "normal", "echogenicity": "preserved"},
                "kidneys": {"left_cm": 5.1, "right_cm": 5.3},
                "notes": "No abnormalities detected",
            },
        }
        defaults.update(kwargs)
        return defaults

    @staticmethod
    async def create(database: ExamDatabase, patient_id: int, **kwargs: Any) -> int:
        result = await database.add_exam(ExamFactory.build(patient_id, **kwargs))
        return result.last_insert_id


class ReferenceValueFactory:
    """Factory for reference value payloads."""

    @staticmethod
    def build(**kwargs: Any) -> Dict[str, Any]:
        defaults = {
            "exam_type": "ultrasound",
            "species": "dog",
            "organ": "kidney",
            "measurement": "length",
            "min_value": 4.5,
            "max_value": 6.5,
            "unit": "cm",
        }
        defaults.update(kwargs)
        return defaults


@pytest.fixture
def patient_factory() -> type:
    return PatientFactory


@pytest.fixture
def exam_factory() -> type:
    return ExamFactory


@pytest.fixture
def reference_value_factory() -> type:
    return ReferenceValueFactory
