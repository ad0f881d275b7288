"""
Presentation Layer Package

FastAPI routers exposing the read-only chart projection.
"""

from minerwatch.presentation import controllers

__all__ = ["controllers"]
