"""Key/value store backed by Redis."""

from __future__ import annotations

from typing import Optional

import redis
import structlog

from minerwatch.domain.entities.errors import StorageError

logger = structlog.get_logger(__name__)


class RedisKeyValueStore:
    """String values kept as plain Redis keys, optionally prefixed."""

    def __init__(
        self,
        url: str,
        key_prefix: str = "",
        socket_timeout: float = 1.5,
    ) -> None:
        self._url = url
        self._prefix = key_prefix
        self._client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_connect_timeout=socket_timeout,
            socket_timeout=socket_timeout,
        )

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str) -> Optional[str]:
        try:
            return self._client.get(self._key(key))
        except redis.RedisError as exc:
            raise StorageError(
                f"Redis GET {key} failed: {exc}", {"key": key}
            ) from exc

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(self._key(key), value)
        except redis.RedisError as exc:
            raise StorageError(
                f"Redis SET {key} failed: {exc}", {"key": key}
            ) from exc

    def delete(self, key: str) -> None:
        try:
            self._client.delete(self._key(key))
        except redis.RedisError as exc:
            raise StorageError(
                f"Redis DEL {key} failed: {exc}", {"key": key}
            ) from exc

    def close(self) -> None:
        try:
            self._client.close()
        except redis.RedisError as exc:
            logger.warning("storage.redis.close_failed", error=str(exc))
