"""
Database access facade for the exam records application.

``ExamDatabase`` owns a single connection to the local SQLite database,
opened lazily on first use, and exposes two primitives, ``execute`` for
statements that change data and ``query`` for statements that return rows,
plus schema initialization and one method per entity operation. Each entity
operation is a fixed SQL template with positional ``?`` parameters.

Example:
    >>> db = ExamDatabase.from_path("tvusvet.db")
    >>> await db.ensure_schema()
    >>> result = await db.add_patient({"name": "Rex", "species": "dog"})
    >>> await db.add_exam(
    ...     {"patient_id": result.last_insert_id, "exam_type": "xray",
    ...      "exam_data": {"notes": "clear"}}
    ... )
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from ..exceptions import (
    ConnectionException,
    ConstraintViolationException,
    DatabaseException,
    ExamDataException,
    SchemaException,
    StatementException,
)
from .connection import DatabaseConfig, close_engine, create_engine
from .schema import schema_statements
from .types import (
    ExecuteResult,
    SchemaInitResult,
    deserialize_exam_data,
    serialize_exam_data,
)

logger = logging.getLogger(__name__)

Row = Dict[str, Any]
Entity = Union[Mapping[str, Any], BaseModel]


def _as_mapping(entity: Entity) -> Mapping[str, Any]:
    """Read an entity argument given as a mapping or a pydantic schema."""
    if isinstance(entity, BaseModel):
        return entity.model_dump()
    if isinstance(entity, Mapping):
        return entity
    raise TypeError(
        f"Expected a mapping or pydantic model, got {type(entity).__name__}"
    )


def _values(entity: Entity, *fields: str) -> List[Any]:
    """Pick statement parameters by field name; absent fields bind NULL."""
    data = _as_mapping(entity)
    return [data.get(name) for name in fields]


class ExamDatabase:
    """
    Facade over the exam records database.

    The facade holds at most one connection. Every operation opens it first
    if needed; ``close()`` releases it. Each statement runs and commits (or
    rolls back) under a lock, so a failing statement never discards another
    caller's acknowledged write.
    """

    def __init__(
        self,
        config: Optional[DatabaseConfig] = None,
        engine: Optional[AsyncEngine] = None,
    ):
        """
        Initialize the facade.

        Args:
            config: Database configuration used to build the engine on open
            engine: Pre-built engine to use instead; it is not disposed on close

        Raises:
            ValueError: If neither a configuration nor an engine is given
        """
        if config is None and engine is None:
            raise ValueError("ExamDatabase needs a DatabaseConfig or an AsyncEngine")

        self.config = config
        self._engine = engine
        self._owns_engine = engine is None
        self._connection: Optional[AsyncConnection] = None
        self._open_lock = asyncio.Lock()
        self._statement_lock = asyncio.Lock()

    @classmethod
    def from_path(cls, path: Union[str, Path], echo: bool = False) -> "ExamDatabase":
        """Create a facade for a database file path (or ``:memory:``)."""
        return cls(DatabaseConfig.from_path(path, echo=echo))

    @property
    def is_open(self) -> bool:
        """Whether the connection is currently held."""
        return self._connection is not None

    @property
    def database_url(self) -> Optional[str]:
        if self.config is not None:
            return self.config.database_url
        if self._engine is not None:
            return str(self._engine.url)
        return None

    async def open(self) -> None:
        """
        Open the database connection if it is not open yet.

        Raises:
            ConnectionException: If the engine cannot be created or connected
        """
        if self._connection is not None:
            return

        async with self._open_lock:
            if self._connection is not None:
                return

            try:
                if self._engine is None:
                    self._engine = create_engine(
                        self.config.database_url,
                        echo=self.config.echo,
                        busy_timeout=self.config.busy_timeout,
                    )
                self._connection = await self._engine.connect()
            except Exception as e:
                logger.error(f"Failed to open database {self.database_url}: {e}")
                raise ConnectionException(
                    "Failed to open database",
                    database_url=self.database_url,
                    original_error=e,
                ) from e

            logger.info("Database connection opened")

    async def close(self) -> None:
        """Close the connection and dispose of an engine built by this facade."""
        if self._connection is not None:
            try:
                await self._connection.close()
            finally:
                self._connection = None
            logger.info("Database connection closed")

        if self._engine is not None and self._owns_engine:
            await close_engine(self._engine)
            self._engine = None

    async def __aenter__(self) -> "ExamDatabase":
        await self.open()
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        await self.close()

    async def _get_connection(self) -> AsyncConnection:
        if self._connection is None:
            await self.open()
        return self._connection

    async def _rollback_quietly(self, conn: AsyncConnection) -> None:
        try:
            await conn.rollback()
        except SQLAlchemyError as e:
            logger.error(f"Rollback after failed statement also failed: {e}")

    def _statement_error(
        self, sql: str, params: Sequence[Any], error: SQLAlchemyError
    ) -> StatementException:
        cause = getattr(error, "orig", None) or error
        if isinstance(error, IntegrityError):
            return ConstraintViolationException(
                f"Constraint violated: {cause}",
                sql=sql,
                params=params,
                original_error=cause,
            )
        return StatementException(
            f"Statement failed: {cause}",
            sql=sql,
            params=params,
            original_error=cause,
        )

    async def execute(
        self, sql: str, params: Optional[Sequence[Any]] = None
    ) -> ExecuteResult:
        """
        Run a statement that does not return rows and commit it.

        Args:
            sql: SQL with positional ``?`` placeholders
            params: Values bound to the placeholders

        Returns:
            Rows affected and the last inserted rowid

        Raises:
            ConnectionException: If the database cannot be opened
            ConstraintViolationException: On NOT NULL, UNIQUE or FOREIGN KEY violations
            StatementException: On any other statement failure
        """
        params = list(params or [])
        conn = await self._get_connection()

        async with self._statement_lock:
            try:
                result = await conn.exec_driver_sql(
                    sql, tuple(params) if params else None
                )
                outcome = ExecuteResult(
                    rows_affected=result.rowcount,
                    last_insert_id=result.lastrowid,
                )
                await conn.commit()
            except SQLAlchemyError as e:
                logger.error(f"Error executing: {sql} {params}: {e}")
                await self._rollback_quietly(conn)
                raise self._statement_error(sql, params, e) from e

        return outcome

    async def query(
        self, sql: str, params: Optional[Sequence[Any]] = None
    ) -> List[Row]:
        """
        Run a statement that returns rows.

        Args:
            sql: SQL with positional ``?`` placeholders
            params: Values bound to the placeholders

        Returns:
            Rows as dictionaries, in the order the engine returned them

        Raises:
            ConnectionException: If the database cannot be opened
            StatementException: If the statement fails
        """
        params = list(params or [])
        conn = await self._get_connection()

        async with self._statement_lock:
            try:
                result = await conn.exec_driver_sql(
                    sql, tuple(params) if params else None
                )
                rows = [dict(row) for row in result.mappings().all()]
                await conn.commit()
            except SQLAlchemyError as e:
                logger.error(f"Error querying: {sql} {params}: {e}")
                await self._rollback_quietly(conn)
                raise self._statement_error(sql, params, e) from e

        return rows

    async def ensure_schema(self, strict: bool = False) -> SchemaInitResult:
        """
        Create every table that does not exist yet.

        Tables are created one statement at a time. A failing statement is
        logged and recorded, and the remaining statements still run.

        Args:
            strict: Raise ``SchemaException`` after the run if any statement failed

        Returns:
            Per-table outcome of the run

        Raises:
            ConnectionException: If the database cannot be opened
            SchemaException: If ``strict`` and at least one statement failed
        """
        await self._get_connection()
        outcome = SchemaInitResult()

        for table_name, ddl in schema_statements():
            try:
                await self.execute(ddl)
            except DatabaseException as e:
                logger.error(f"Error creating table {table_name}: {e.original_error}")
                outcome.failures[table_name] = str(e.original_error or e)
            else:
                outcome.created.append(table_name)

        if outcome.ok:
            logger.info("Tables created or verified successfully")
        elif strict:
            raise SchemaException(failures=outcome.failures)

        return outcome

    # Patients

    async def list_patients(self) -> List[Row]:
        return await self.query("SELECT * FROM patients ORDER BY name ASC")

    async def get_patient(self, patient_id: int) -> Optional[Row]:
        rows = await self.query("SELECT * FROM patients WHERE id = ?", [patient_id])
        return rows[0] if rows else None

    async def add_patient(self, patient: Entity) -> ExecuteResult:
        sql = "INSERT INTO patients (name, species, breed, owner_name) VALUES (?, ?, ?, ?)"
        return await self.execute(
            sql, _values(patient, "name", "species", "breed", "owner_name")
        )

    async def update_patient(self, patient: Entity) -> ExecuteResult:
        sql = "UPDATE patients SET name = ?, species = ?, breed = ?, owner_name = ? WHERE id = ?"
        return await self.execute(
            sql, _values(patient, "name", "species", "breed", "owner_name", "id")
        )

    async def delete_patient(self, patient_id: int) -> ExecuteResult:
        """Delete a patient; the engine removes the patient's exams with it."""
        return await self.execute("DELETE FROM patients WHERE id = ?", [patient_id])

    # Exams

    async def list_exams_for_patient(self, patient_id: int) -> List[Row]:
        """
        List a patient's exams with ``exam_data`` left as stored JSON text.

        No ordering is applied.
        """
        return await self.query(
            "SELECT * FROM exams WHERE patient_id = ?", [patient_id]
        )

    async def add_exam(self, exam: Entity) -> ExecuteResult:
        """
        Insert an exam, storing ``exam_data`` as JSON text.

        An exam given without an ``exam_data`` key stores NULL.

        Raises:
            ExamDataException: If ``exam_data`` is not JSON-serializable
        """
        data = _as_mapping(exam)
        sql = "INSERT INTO exams (patient_id, exam_type, exam_data) VALUES (?, ?, ?)"
        return await self.execute(
            sql,
            [
                data.get("patient_id"),
                data.get("exam_type"),
                self._encode_exam_data(data),
            ],
        )

    async def update_exam(self, exam: Entity) -> ExecuteResult:
        """
        Replace an exam's payload and refresh its ``updated_at`` timestamp.

        Raises:
            ExamDataException: If ``exam_data`` is not JSON-serializable
        """
        data = _as_mapping(exam)
        sql = "UPDATE exams SET exam_data = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?"
        return await self.execute(sql, [self._encode_exam_data(data), data.get("id")])

    @staticmethod
    def _encode_exam_data(data: Mapping[str, Any]) -> Optional[str]:
        if "exam_data" not in data:
            return None
        return serialize_exam_data(data["exam_data"])

    async def get_exam(self, exam_id: int, strict: bool = False) -> Optional[Row]:
        """
        Fetch one exam with its payload decoded.

        Args:
            exam_id: Primary key of the exam
            strict: Raise instead of substituting an empty payload when the
                stored JSON is malformed

        Returns:
            The exam row, or None if no exam has this id

        Raises:
            ExamDataException: If ``strict`` and the stored payload is malformed
        """
        rows = await self.query("SELECT * FROM exams WHERE id = ?", [exam_id])
        if not rows:
            return None

        exam = rows[0]
        try:
            exam["exam_data"] = deserialize_exam_data(exam["exam_data"], exam_id)
        except ExamDataException as e:
            if strict:
                raise
            logger.warning(f"Failed to parse exam_data for exam {exam_id}: {e}")
            exam["exam_data"] = {}
        return exam

    async def delete_exam(self, exam_id: int) -> ExecuteResult:
        return await self.execute("DELETE FROM exams WHERE id = ?", [exam_id])

    # Settings

    async def get_all_settings(self) -> Dict[str, Optional[str]]:
        """Return every setting as a ``{key: value}`` mapping."""
        rows = await self.query("SELECT * FROM settings")
        settings: Dict[str, Optional[str]] = {}
        for row in rows:
            settings[row["key"]] = row["value"]
        return settings

    async def save_setting(self, key: str, value: Optional[str]) -> ExecuteResult:
        """Insert a setting or replace the existing value for ``key``."""
        sql = "INSERT OR REPLACE INTO settings (key, value) VALUES (?, ?)"
        return await self.execute(sql, [key, value])

    # Templates

    async def list_templates(self) -> List[Row]:
        return await self.query("SELECT * FROM templates ORDER BY name ASC")

    async def add_template(self, template: Entity) -> ExecuteResult:
        sql = "INSERT INTO templates (name, content) VALUES (?, ?)"
        return await self.execute(sql, _values(template, "name", "content"))

    async def update_template(self, template: Entity) -> ExecuteResult:
        sql = "UPDATE templates SET name = ?, content = ? WHERE id = ?"
        return await self.execute(sql, _values(template, "name", "content", "id"))

    async def delete_template(self, template_id: int) -> ExecuteResult:
        return await self.execute("DELETE FROM templates WHERE id = ?", [template_id])

    # Reference values

    async def list_reference_values(
        self, exam_type: Optional[str] = None, species: Optional[str] = None
    ) -> List[Row]:
        """
        List reference values, optionally narrowed to an exam type and species.

        Rows are ordered by organ, then measurement.
        """
        sql = "SELECT * FROM reference_values"
        clauses = []
        params: List[Any] = []
        if exam_type is not None:
            clauses.append("exam_type = ?")
            params.append(exam_type)
        if species is not None:
            clauses.append("species = ?")
            params.append(species)
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)
        sql += " ORDER BY organ ASC, measurement ASC"
        return await self.query(sql, params)

    async def add_reference_value(self, reference: Entity) -> ExecuteResult:
        sql = (
            "INSERT INTO reference_values "
            "(exam_type, species, organ, measurement, min_value, max_value, unit) "
            "VALUES (?, ?, ?, ?, ?, ?, ?)"
        )
        return await self.execute(
            sql,
            _values(
                reference,
                "exam_type",
                "species",
                "organ",
                "measurement",
                "min_value",
                "max_value",
                "unit",
            ),
        )

    async def update_reference_value(self, reference: Entity) -> ExecuteResult:
        sql = (
            "UPDATE reference_values SET exam_type = ?, species = ?, organ = ?, "
            "measurement = ?, min_value = ?, max_value = ?, unit = ? WHERE id = ?"
        )
        return await self.execute(
            sql,
            _values(
                reference,
                "exam_type",
                "species",
                "organ",
                "measurement",
                "min_value",
                "max_value",
                "unit",
                "id",
            ),
        )

    async def delete_reference_value(self, reference_id: int) -> ExecuteResult:
        return await self.execute(
            "DELETE FROM reference_values WHERE id = ?", [reference_id]
        )


# Global facade instance (will be initialized by application)
_database_service: Optional[ExamDatabase] = None


def initialize_database_service(
    config: Union[DatabaseConfig, str, Path],
) -> ExamDatabase:
    """
    Initialize the global database facade.

    Args:
        config: Database configuration, or a database file path

    Returns:
        The facade; it connects on first use
    """
    global _database_service
    if not isinstance(config, DatabaseConfig):
        config = DatabaseConfig.from_path(config)
    _database_service = ExamDatabase(config)
    logger.info("Database service initialized")
    return _database_service


def get_database_service() -> ExamDatabase:
    """
    Get the global database facade.

    Raises:
        RuntimeError: If the facade is not initialized
    """
    if _database_service is None:
        raise RuntimeError(
            "Database service not initialized. Call initialize_database_service() first."
        )
    return _database_service
