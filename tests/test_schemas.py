"""
Tests for Pydantic input schemas.
"""

import pytest
from pydantic import ValidationError

from vet_exams.schemas import (
    ExamCreate,
    ExamUpdate,
    PatientCreate,
    PatientUpdate,
    ReferenceValueCreate,
    TemplateCreate,
    TemplateUpdate,
)


class TestPatientSchemas:
    def test_patient_create_minimal(self):
        patient = PatientCreate(name="Rex")

        assert patient.model_dump() == {
            "name": "Rex",
            "species": None,
            "breed": None,
            "owner_name": None,
        }

    def test_patient_create_strips_whitespace(self):
        patient = PatientCreate(name="  Rex  ", owner_name=" Ana Souza ")

        assert patient.name == "Rex"
        assert patient.owner_name == "Ana Souza"

    def test_patient_create_requires_name(self):
        with pytest.raises(ValidationError):
            PatientCreate(species="dog")

    def test_patient_update_requires_id(self):
        with pytest.raises(ValidationError):
            PatientUpdate(name="Rex")

        assert PatientUpdate(id=1, name="Rex").id == 1


class TestExamSchemas:
    def test_exam_create_defaults_to_empty_payload(self):
        exam = ExamCreate(patient_id=1, exam_type="xray")

        assert exam.exam_data == {}

    def test_exam_create_keeps_payload_as_given(self):
        payload = {"findings": ["a", "b"], "score": 2.5}

        exam = ExamCreate(patient_id=1, exam_type="xray", exam_data=payload)

        assert exam.model_dump()["exam_data"] == payload

    def test_exam_create_rejects_non_integer_patient(self):
        with pytest.raises(ValidationError):
            ExamCreate(patient_id="rex", exam_type="xray")

    def test_exam_update(self):
        update = ExamUpdate(id=4, exam_data={"notes": "revised"})

        assert update.model_dump() == {"id": 4, "exam_data": {"notes": "revised"}}


class TestTemplateSchemas:
    def test_template_create_requires_content(self):
        with pytest.raises(ValidationError):
            TemplateCreate(name="Abdomen")

    def test_template_update(self):
        update = TemplateUpdate(id=2, name="Abdomen", content="...")

        assert update.model_dump() == {"id": 2, "name": "Abdomen", "content": "..."}


class TestReferenceValueSchemas:
    def test_bounds_are_optional(self):
        reference = ReferenceValueCreate(
            exam_type="ultrasound", species="dog", organ="kidney", measurement="length"
        )

        assert reference.min_value is None
        assert reference.max_value is None
        assert reference.unit is None

    def test_bounds_coerced_to_float(self):
        reference = ReferenceValueCreate(
            exam_type="ultrasound",
            species="dog",
            organ="kidney",
            measurement="length",
            min_value=4,
            max_value="6.5",
        )

        assert reference.min_value == 4.0
        assert reference.max_value == 6.5
