"""
Application shell for the exam records front end.

The shell initializes the database schema once at startup, resolves page
paths to views, and hosts the theme and the notification surface. Errors
raised while rendering a view are reported as error toasts; the shell is the
top of the call stack, so they are not raised further.
"""

import logging
from typing import Any, Dict, Optional, Type

from ..database import DatabaseConfig, ExamDatabase, SchemaInitResult
from ..database.service import initialize_database_service
from ..exceptions import VetExamsException, log_exception_context
from ..utils.config import AppConfig, LoggingConfigurator
from .notifications import Toaster
from .routing import Router, default_router
from .theme import Theme
from .views import ExamView, HomeView, SettingsView, View

logger = logging.getLogger(__name__)

THEME_SETTING_KEY = "theme"

DEFAULT_VIEWS: Dict[str, Type[View]] = {
    "home": HomeView,
    "exam": ExamView,
    "settings": SettingsView,
}


class Application:
    """Bootstraps the database and dispatches page paths to views."""

    def __init__(
        self,
        database: ExamDatabase,
        router: Optional[Router] = None,
        toaster: Optional[Toaster] = None,
        theme: Theme = Theme.SYSTEM,
    ):
        self.database = database
        self.router = router or default_router()
        self.toaster = toaster or Toaster(position="top-right")
        self.theme = theme
        self.views: Dict[str, View] = {
            name: view_cls(database) for name, view_cls in DEFAULT_VIEWS.items()
        }
        self.schema_result: Optional[SchemaInitResult] = None

    @property
    def started(self) -> bool:
        return self.schema_result is not None

    async def start(self) -> SchemaInitResult:
        """
        Ensure the schema exists and load the saved theme.

        Runs once; later calls return the first result. A partially created
        schema is reported as an error toast.

        Raises:
            ConnectionException: If the database cannot be opened
        """
        if self.schema_result is not None:
            return self.schema_result

        self.schema_result = await self.database.ensure_schema()
        if not self.schema_result.ok:
            failed = ", ".join(sorted(self.schema_result.failures))
            self.toaster.error(
                f"Database setup incomplete: {failed}",
                {"failures": self.schema_result.failures},
            )

        try:
            settings = await self.database.get_all_settings()
        except VetExamsException as e:
            log_exception_context(e, {"step": "load_theme"}, logger)
            self.toaster.error_from_exception(e)
        else:
            if THEME_SETTING_KEY in settings:
                self.theme = Theme.parse(settings[THEME_SETTING_KEY])

        logger.info("Application started")
        return self.schema_result

    async def navigate(self, path: str) -> Optional[Dict[str, Any]]:
        """
        Render the view for a path.

        Returns:
            The view's data, or None when the path is unknown or the view
            failed; the failure is queued as an error toast.
        """
        try:
            route, params = self.router.resolve(path)
            return await self.views[route.name].render(**params)
        except VetExamsException as e:
            log_exception_context(e, {"path": path}, logger)
            self.toaster.error_from_exception(e)
            return None

    async def set_theme(self, theme: Theme) -> None:
        """Switch theme and persist the choice as a setting."""
        self.theme = theme
        try:
            await self.database.save_setting(THEME_SETTING_KEY, theme.value)
        except VetExamsException as e:
            log_exception_context(e, {"step": "save_theme"}, logger)
            self.toaster.error_from_exception(e)

    async def stop(self) -> None:
        await self.database.close()
        logger.info("Application stopped")


def create_application(config: Optional[AppConfig] = None) -> Application:
    """
    Build the application from configuration.

    Configures logging (to ``config.log_file`` when set, otherwise to stderr)
    and the global database facade. The database is opened lazily, on
    ``Application.start``.

    Args:
        config: Application configuration; read from the environment if omitted
    """
    config = config or AppConfig.from_environment()
    if config.log_file:
        LoggingConfigurator.configure_basic_logging(
            level=config.log_level, log_file=config.log_file
        )
    else:
        LoggingConfigurator.configure_structured_logging(level=config.log_level)

    database = initialize_database_service(
        DatabaseConfig.from_path(
            config.database_path,
            echo=config.echo,
            busy_timeout=config.busy_timeout,
        )
    )
    return Application(database, theme=Theme.parse(config.theme))
