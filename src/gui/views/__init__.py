"""GUI view layer.

Exports:
 - LocationTableView
"""

from .location_table_view import LocationTableView  # noqa: F401

__all__ = ["LocationTableView"]
