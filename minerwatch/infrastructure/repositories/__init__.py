"""
Repositories Package - Infrastructure Layer

Concrete implementations of the repository interfaces defined in the
domain layer.
"""

from .series_state_repository import SeriesStateRepository

__all__ = ["SeriesStateRepository"]
