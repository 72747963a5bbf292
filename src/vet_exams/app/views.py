"""
Routed views of the application shell.

Views load the data their page shows through the database facade and return
it as a plain dictionary for the front end. They hold no business logic.
"""

from typing import Any, Dict

from ..database import ExamDatabase


class View:
    """Base class for routed views."""

    name = "view"

    def __init__(self, database: ExamDatabase):
        self.database = database

    async def render(self, **params: Any) -> Dict[str, Any]:
        raise NotImplementedError


class HomeView(View):
    """Patient list."""

    name = "home"

    async def render(self, **params: Any) -> Dict[str, Any]:
        return {"view": self.name, "patients": await self.database.list_patients()}


class ExamView(View):
    """Single exam with its patient; ``exam`` is None for an unknown id."""

    name = "exam"

    async def render(self, exam_id: int, **params: Any) -> Dict[str, Any]:
        exam = await self.database.get_exam(exam_id)
        patient = None
        if exam is not None:
            patient = await self.database.get_patient(exam["patient_id"])
        return {
            "view": self.name,
            "exam_id": exam_id,
            "exam": exam,
            "patient": patient,
            "templates": await self.database.list_templates(),
        }


class SettingsView(View):
    """Application settings and report templates."""

    name = "settings"

    async def render(self, **params: Any) -> Dict[str, Any]:
        return {
            "view": self.name,
            "settings": await self.database.get_all_settings(),
            "templates": await self.database.list_templates(),
        }
