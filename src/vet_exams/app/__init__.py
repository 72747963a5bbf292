"""
Application shell: routing, views, theme and notifications.

The shell wires the database facade to the three pages of the front end
(patient list, exam detail, settings).
"""

from .notifications import Toast, Toaster, ToastLevel
from .routing import Route, Router, default_router
from .shell import Application, create_application
from .theme import Theme
from .views import ExamView, HomeView, SettingsView, View

__all__ = [
    "Application",
    "create_application",
    "Route",
    "Router",
    "default_router",
    "Theme",
    "Toast",
    "Toaster",
    "ToastLevel",
    "View",
    "HomeView",
    "ExamView",
    "SettingsView",
]
