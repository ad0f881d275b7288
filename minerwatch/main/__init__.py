"""
Main module - Main/Composition Root Layer

Configuration, dependency wiring and the two entry points (FastAPI app
and headless poller).
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppContainer",
    "AppSettings",
    "get_container",
    "get_settings",
    "init_container",
]
