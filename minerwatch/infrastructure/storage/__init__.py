"""
Storage Package - Infrastructure Layer

Durable key/value stores implementing the domain ``IKeyValueStore`` port.
"""

from .file_store import FileKeyValueStore
from .redis_store import RedisKeyValueStore

__all__ = ["FileKeyValueStore", "RedisKeyValueStore"]
