"""
Application Layer Package

Use cases that drive the series buffer (import, poll, projection) and
the pydantic DTOs exchanged with the device and the presentation layer.
"""

from minerwatch.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
