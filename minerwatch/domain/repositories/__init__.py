from .series_state_repository import ISeriesStateRepository

__all__ = ["ISeriesStateRepository"]
