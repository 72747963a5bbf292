"""
Result types and payload encoding for the vet-exams database layer.

This module holds the small value objects returned by ``ExamDatabase`` and
the JSON encoding rules for the ``exams.exam_data`` column.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..exceptions import ExamDataException


@dataclass(frozen=True)
class ExecuteResult:
    """
    Outcome of a non-returning statement.

    Attributes:
        rows_affected: Number of rows changed (``-1`` for DDL)
        last_insert_id: Rowid of the last inserted row, if the engine reports one
    """

    rows_affected: int
    last_insert_id: Optional[int] = None


@dataclass
class SchemaInitResult:
    """
    Outcome of schema initialization, one entry per table statement.

    A failed statement does not stop the remaining ones, so ``created`` and
    ``failures`` may both be non-empty.
    """

    created: List[str] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True when every table statement succeeded."""
        return not self.failures


def serialize_exam_data(exam_data: Any) -> str:
    """
    Serialize an exam payload to JSON text for storage.

    Args:
        exam_data: JSON-serializable payload

    Returns:
        JSON text

    Raises:
        ExamDataException: If the payload cannot be represented as JSON
    """
    try:
        return json.dumps(exam_data, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise ExamDataException(
            "Exam data is not JSON-serializable", original_error=e
        ) from e


def deserialize_exam_data(raw: Optional[str], exam_id: Optional[int] = None) -> Any:
    """
    Parse stored exam payload text.

    A NULL column decodes to an empty dict.

    Args:
        raw: Stored JSON text
        exam_id: Exam the payload belongs to, for error reporting

    Returns:
        The decoded payload

    Raises:
        ExamDataException: If the text is not valid JSON
    """
    if raw is None:
        return {}

    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        raise ExamDataException(exam_id=exam_id, original_error=e) from e
