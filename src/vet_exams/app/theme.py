"""Colour theme selection for the application shell."""

import enum


class Theme(enum.Enum):
    """User-selectable theme; ``SYSTEM`` follows the operating system."""

    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, value: str) -> "Theme":
        """Parse a stored theme name, falling back to ``SYSTEM`` when unknown."""
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            return cls.SYSTEM

    def resolve(self, system_prefers_dark: bool = False) -> str:
        """Return the concrete theme, ``"light"`` or ``"dark"``."""
        if self is Theme.SYSTEM:
            return "dark" if system_prefers_dark else "light"
        return self.value
