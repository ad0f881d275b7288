"""
Controllers Package - Presentation Layer

FastAPI routers mapping HTTP requests onto application use cases.
"""

from .chart_controller import router as chart_router

__all__ = ["chart_router"]
