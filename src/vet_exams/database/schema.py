"""
Schema DDL for the exam records database.

The DDL is compiled from the table declarations in ``vet_exams.models`` as
one ``CREATE TABLE IF NOT EXISTS`` statement per table, so schema
initialization can run and report on each statement separately.
"""

from typing import List, Tuple

from sqlalchemy.dialects import sqlite
from sqlalchemy.schema import CreateTable

from ..models import SCHEMA_TABLES


def schema_statements() -> List[Tuple[str, str]]:
    """
    Return ``(table_name, ddl)`` pairs in creation order.

    Returns:
        One idempotent CREATE TABLE statement per table
    """
    dialect = sqlite.dialect()
    return [
        (
            table.name,
            str(CreateTable(table, if_not_exists=True).compile(dialect=dialect)).strip(),
        )
        for table in SCHEMA_TABLES
    ]
