"""
Cache store — the external key-value backend.

Store — protocol the cache talks to. Users implement it for their backend
(Memcached, Redis, a host framework's object cache...).
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol

# ═══════════════════════════════════════════════════════════════════════════════
# Store Protocol — Users Implement This
# ═══════════════════════════════════════════════════════════════════════════════


class Store(Protocol):
    """
    Namespaced key-value store protocol.

    get() reports a miss through the found flag, so falsy payloads are hits.
    Errors are raised, the cache decides how to handle them.

    Example:
        class MemcachedStore:
            def __init__(self, client: aiomcache.Client) -> None:
                self.client = client

            async def get(self, key: str, namespace: str) -> tuple[bytes | None, bool]:
                data = await self.client.get(f"{namespace}:{key}".encode())
                return data, data is not None

            async def set(self, key: str, value: bytes, namespace: str, ttl: int) -> None:
                await self.client.set(f"{namespace}:{key}".encode(), value, exptime=ttl)

            async def delete(self, key: str, namespace: str) -> bool:
                return await self.client.delete(f"{namespace}:{key}".encode())
    """

    async def get(self, key: str, namespace: str) -> tuple[bytes | None, bool]:
        """Get payload. Returns (payload, found)."""
        ...

    async def set(self, key: str, value: bytes, namespace: str, ttl: int) -> None:
        """Set payload. ttl in seconds, 0 means no expiry."""
        ...

    async def delete(self, key: str, namespace: str) -> bool:
        """Delete entry. Returns True if existed."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Function-based Store Builder
# ═══════════════════════════════════════════════════════════════════════════════

type GetFn = Callable[[str, str], Awaitable[tuple[bytes | None, bool]]]
type SetFn = Callable[[str, bytes, str, int], Awaitable[None]]
type DeleteFn = Callable[[str, str], Awaitable[bool]]


@dataclass(frozen=True)
class FunctionalStore:
    """
    Store built from functions.

    Example:
        store = store_from(
            get=host_cache.get,
            set=host_cache.set,
            delete=host_cache.delete,
        )
    """

    _get: GetFn
    _set: SetFn
    _delete: DeleteFn

    async def get(self, key: str, namespace: str) -> tuple[bytes | None, bool]:
        return await self._get(key, namespace)

    async def set(self, key: str, value: bytes, namespace: str, ttl: int) -> None:
        await self._set(key, value, namespace, ttl)

    async def delete(self, key: str, namespace: str) -> bool:
        return await self._delete(key, namespace)


def store_from(get: GetFn, set: SetFn, delete: DeleteFn) -> FunctionalStore:
    """Create Store from functions."""
    return FunctionalStore(_get=get, _set=set, _delete=delete)


# ═══════════════════════════════════════════════════════════════════════════════
# Memory Store — For Testing
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass
class _Entry:
    value: bytes
    expires_at: datetime | None

    @property
    def is_expired(self) -> bool:
        return self.expires_at is not None and datetime.now() > self.expires_at


class MemoryStore:
    """
    In-memory store with TTL.

    Note: Single process only. Expired entries are dropped lazily on read.
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[str, str], _Entry] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str, namespace: str) -> tuple[bytes | None, bool]:
        async with self._lock:
            entry = self._entries.get((namespace, key))
            if entry is None:
                return None, False
            if entry.is_expired:
                del self._entries[(namespace, key)]
                return None, False
            return entry.value, True

    async def set(self, key: str, value: bytes, namespace: str, ttl: int) -> None:
        async with self._lock:
            expires_at = datetime.now() + timedelta(seconds=ttl) if ttl > 0 else None
            self._entries[(namespace, key)] = _Entry(value, expires_at)

    async def delete(self, key: str, namespace: str) -> bool:
        async with self._lock:
            return self._entries.pop((namespace, key), None) is not None

    async def flush(self) -> None:
        """Drop every entry in every namespace."""
        async with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


__all__ = (
    "Store",
    "FunctionalStore",
    "store_from",
    "MemoryStore",
)
