"""
Page routing for the exam records application.

Routes are path templates such as ``/exam/{exam_id}``; placeholders match one
path segment and are converted with the type registered for them. Paths may
be given in hash form (``#/exam/3``), as produced by a hash-based router.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Pattern, Tuple

from ..exceptions import RouteNotFoundException

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@dataclass
class Route:
    """A path template bound to a view name."""

    template: str
    name: str
    converters: Dict[str, Callable[[str], Any]] = field(default_factory=dict)
    pattern: Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        parts = []
        last = 0
        for placeholder in _PLACEHOLDER.finditer(self.template):
            parts.append(re.escape(self.template[last : placeholder.start()]))
            parts.append(f"(?P<{placeholder.group(1)}>[^/]+)")
            last = placeholder.end()
        parts.append(re.escape(self.template[last:]))
        self.pattern = re.compile("^" + "".join(parts) + "$")

    def match(self, path: str) -> Optional[Dict[str, Any]]:
        """Return converted path parameters, or None if the path does not match."""
        found = self.pattern.match(path)
        if found is None:
            return None

        params: Dict[str, Any] = {}
        for key, raw in found.groupdict().items():
            converter = self.converters.get(key, str)
            try:
                params[key] = converter(raw)
            except ValueError:
                return None
        return params


class Router:
    """Ordered collection of routes; the first matching route wins."""

    def __init__(self, routes: Optional[List[Route]] = None):
        self.routes: List[Route] = list(routes or [])

    def add(
        self,
        template: str,
        name: str,
        **converters: Callable[[str], Any],
    ) -> Route:
        route = Route(template, name, converters)
        self.routes.append(route)
        return route

    @staticmethod
    def normalize(path: str) -> str:
        """Strip a leading ``#``, query string and trailing slash."""
        path = path.lstrip("#").split("?", 1)[0] or "/"
        if not path.startswith("/"):
            path = "/" + path
        return path.rstrip("/") or "/"

    def resolve(self, path: str) -> Tuple[Route, Dict[str, Any]]:
        """
        Find the route for a path.

        Args:
            path: Request path, optionally in hash form

        Returns:
            The matched route and its converted parameters

        Raises:
            RouteNotFoundException: If no route matches
        """
        normalized = self.normalize(path)
        for route in self.routes:
            params = route.match(normalized)
            if params is not None:
                return route, params
        raise RouteNotFoundException(path)


def default_router() -> Router:
    """Router with the application's three pages."""
    router = Router()
    router.add("/", "home")
    router.add("/exam/{exam_id}", "exam", exam_id=int)
    router.add("/settings", "settings")
    return router
