from .key_value_store import IKeyValueStore

__all__ = ["IKeyValueStore"]
