"""
Redis integration — Store backed by redis.asyncio.

Usage:
    from redis.asyncio import Redis
    from objcache import ObjectCache, RedisStore

    store = RedisStore(Redis.from_url("redis://localhost:6379/0"), prefix="shop:")
    cache = ObjectCache(store, {"expire": 600})

Keys are laid out as "{prefix}{namespace}:{key}".
"""

from __future__ import annotations

from redis.asyncio import Redis
from redis.exceptions import (
    ConnectionError as RedisConnectionError,
    TimeoutError as RedisTimeoutError,
)


class RedisStore:
    """
    Store over a redis.asyncio client.

    Note: redis connection and timeout errors are re-raised as the builtin
    ConnectionError / TimeoutError, so flush results classify them as
    UNAVAILABLE without importing redis.
    """

    def __init__(self, client: Redis, prefix: str = "") -> None:
        self._redis = client
        self._prefix = prefix

    def _make_key(self, key: str, namespace: str) -> str:
        return f"{self._prefix}{namespace}:{key}"

    async def get(self, key: str, namespace: str) -> tuple[bytes | None, bool]:
        try:
            data = await self._redis.get(self._make_key(key, namespace))
        except RedisTimeoutError as e:
            raise TimeoutError(str(e)) from e
        except RedisConnectionError as e:
            raise ConnectionError(str(e)) from e
        return data, data is not None

    async def set(self, key: str, value: bytes, namespace: str, ttl: int) -> None:
        try:
            await self._redis.set(
                self._make_key(key, namespace), value, ex=ttl if ttl > 0 else None
            )
        except RedisTimeoutError as e:
            raise TimeoutError(str(e)) from e
        except RedisConnectionError as e:
            raise ConnectionError(str(e)) from e

    async def delete(self, key: str, namespace: str) -> bool:
        try:
            return await self._redis.delete(self._make_key(key, namespace)) > 0
        except RedisTimeoutError as e:
            raise TimeoutError(str(e)) from e
        except RedisConnectionError as e:
            raise ConnectionError(str(e)) from e


__all__ = ("RedisStore",)
