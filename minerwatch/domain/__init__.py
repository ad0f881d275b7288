"""
Domain Layer Package

Entities and rules of the synchronized hashrate series, free of any
transport, storage or framework concerns.
"""

from minerwatch.domain import entities, gateways, ports, repositories, services

__all__ = ["entities", "gateways", "ports", "repositories", "services"]
