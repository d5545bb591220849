"""Application layer for GUI bootstrap.

Public exports: application bootstrap and its context object.
"""

from .bootstrap import create_app, AppContext, qt_available  # noqa: F401

__all__ = [
    "create_app",
    "AppContext",
    "qt_available",
]
