"""
Infrastructure Layer Package

Concrete implementations of the domain gateway, repository and storage
interfaces, plus the asyncio poll scheduler.
"""
