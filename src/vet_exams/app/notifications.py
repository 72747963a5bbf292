"""
Transient notifications for the application shell.

The ``Toaster`` collects short messages for the front end to display and
dismiss. Errors raised by the data layer are turned into error toasts using
the standard error response format.
"""

import logging
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Deque, Dict, List, Optional

from ..exceptions import create_error_response

logger = logging.getLogger(__name__)


class ToastLevel(Enum):
    """Severity of a notification."""

    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


@dataclass
class Toast:
    level: ToastLevel
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    created_at: float = field(default_factory=time.time)


class Toaster:
    """Bounded queue of pending notifications; the oldest are dropped first."""

    def __init__(self, position: str = "top-right", max_pending: int = 20):
        self.position = position
        self._pending: Deque[Toast] = deque(maxlen=max_pending)

    def notify(
        self,
        level: ToastLevel,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> Toast:
        toast = Toast(level=level, message=message, details=details or {})
        self._pending.append(toast)
        return toast

    def success(self, message: str) -> Toast:
        return self.notify(ToastLevel.SUCCESS, message)

    def info(self, message: str) -> Toast:
        return self.notify(ToastLevel.INFO, message)

    def error(self, message: str, details: Optional[Dict[str, Any]] = None) -> Toast:
        return self.notify(ToastLevel.ERROR, message, details)

    def error_from_exception(self, exception: Exception) -> Toast:
        """Queue an error toast describing an exception."""
        response = create_error_response(exception)
        error = response["error"]
        logger.debug(f"Showing error toast for {error['type']}: {error['message']}")
        return self.error(error["message"], {"code": error["code"]})

    @property
    def pending(self) -> List[Toast]:
        return list(self._pending)

    def drain(self) -> List[Toast]:
        """Return and clear all pending toasts, oldest first."""
        toasts = list(self._pending)
        self._pending.clear()
        return toasts
