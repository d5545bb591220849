from .location_table_viewmodel import LocationTableViewModel  # noqa: F401

__all__ = ["LocationTableViewModel"]
