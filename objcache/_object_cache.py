"""
ObjectCache — compute-or-fetch façade over a Store.

READ:   store → hit → value
        store → miss → producer() → store → value
FLUSH:  delete the group aggregate (group mode entries only)
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any

from kungfu import LazyCoroResult, Ok, Error

from objcache._codec import Codec, PickleCodec
from objcache._coerce import normalize_numeric
from objcache._config import CacheConfig, set_default_atts
from objcache._ops import delete_group
from objcache._store import Store
from objcache._types import (
    CacheError,
    CacheResult,
    CodecError,
    Config,
    HostContext,
    Producer,
)
from objcache.logging import get_logger

log = get_logger(__name__)

type Overrides = Mapping[str, Any] | CacheConfig | None


class ObjectCache:
    """
    Cache-aside helper with group flushing.

    Two storage modes:
        single=True:  one store entry per key, namespace = group.
        single=False: one aggregate dict per group, stored under the group
                      name; flush_group() drops every key of the group at once.

    Example:
        cache = ObjectCache(MemoryStore(), {"expire": 600, "group": "catalog"})

        price = await cache.get_object("price:42", lambda: repo.price(42))
        await cache.flush_group()

    Note: No locking. Concurrent misses on the same key all run the
    producer, the last write wins.
    """

    def __init__(
        self,
        store: Store,
        config: Mapping[str, Any] | CacheConfig | None = None,
        *,
        context: HostContext | None = None,
        codec: Codec | None = None,
    ) -> None:
        self._store = store
        self._context = context or HostContext()
        self._codec: Codec = codec or PickleCodec()
        defaults = CacheConfig.defaults(self._context).as_dict()
        self._config = CacheConfig.build(defaults, config)

    @property
    def config(self) -> CacheConfig:
        return self._config

    @property
    def context(self) -> HostContext:
        return self._context

    def with_context(self, context: HostContext) -> ObjectCache:
        """Same store, config and codec, different host context."""
        return ObjectCache(self._store, self._config, context=context, codec=self._codec)

    # ═══════════════════════════════════════════════════════════════════════════
    # Read path
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_object[T](
        self,
        key: str,
        producer: Producer[T],
        overrides: Overrides = None,
        *,
        context: HostContext | None = None,
    ) -> Any:
        """
        Return the cached value of key, or producer()'s result on miss.

        Numeric strings come back as int / float.
        Exceptions raised by producer propagate unchanged.
        """
        result = await self.resolve(key, producer, overrides, context=context)
        return result.value

    async def resolve[T](
        self,
        key: str,
        producer: Producer[T],
        overrides: Overrides = None,
        *,
        context: HostContext | None = None,
    ) -> CacheResult[Any]:
        """Like get_object(), with hit/miss metadata."""
        ctx = context or self._context
        cfg = self._config.merged(overrides)
        group = self._scoped_group(cfg.group, ctx)
        object_key = self._object_key(key, cfg, ctx)

        aggregate: dict[str, Any] = {}
        if cfg.single:
            hit, value = await self._read(object_key, group)
        else:
            found, stored = await self._read(group, group)
            if found and isinstance(stored, Mapping):
                aggregate = dict(stored)
            hit = object_key in aggregate
            value = aggregate.get(object_key)

        if not hit:
            log.debug("cache_miss", key=object_key, group=group)
            value = producer()
            if inspect.isawaitable(value):
                value = await value

            if cfg.single:
                await self._write(object_key, value, group, cfg.expire)
            else:
                aggregate[object_key] = value
                await self._write(group, aggregate, group, cfg.expire)
        else:
            log.debug("cache_hit", key=object_key, group=group)

        return CacheResult(
            value=normalize_numeric(value),
            hit=hit,
            key=object_key,
            group=group,
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # Flush
    # ═══════════════════════════════════════════════════════════════════════════

    def try_flush_group(self, group_name: str | None = None) -> LazyCoroResult[bool, CacheError]:
        """
        Delete a group aggregate, keeping the failure reason.

        Ok(existed) on success, Error(CacheError) when the store raised.
        """
        return delete_group(self._store, self._flush_target(group_name))

    async def flush_group(self, group_name: str | None = None) -> bool:
        """
        Delete a group aggregate. Defaults to the instance group.

        Returns False if the store raised. Single-mode entries are untouched.
        """
        match await self.try_flush_group(group_name):
            case Ok(_):
                return True
            case Error(err):
                log.warning(
                    "cache_flush_failed",
                    group=self._flush_target(group_name),
                    kind=err.kind.name,
                    error=err.message,
                )
                return False

    # ═══════════════════════════════════════════════════════════════════════════
    # Config utility
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def set_default_atts(
        defaults: Mapping[str, Any],
        overrides: Mapping[str, Any] | None,
    ) -> Config:
        """Right-biased merge restricted to the keys of defaults."""
        return set_default_atts(defaults, overrides)

    # ═══════════════════════════════════════════════════════════════════════════
    # Internals
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def _scoped_group(group: str, ctx: HostContext) -> str:
        if ctx.multisite:
            return f"{group}_{ctx.network_id}"
        return group

    def _flush_target(self, group_name: str | None) -> str:
        return self._scoped_group(group_name or self._config.group, self._context)

    @staticmethod
    def _object_key(key: str, cfg: CacheConfig, ctx: HostContext) -> str:
        if ctx.multisite and not cfg.network_global and ctx.tenant_id:
            return f"{key}_{ctx.tenant_id}"
        return key

    async def _read(self, key: str, namespace: str) -> tuple[bool, Any]:
        """(found, value). Store errors and unreadable payloads are misses."""
        try:
            payload, found = await self._store.get(key, namespace)
        except Exception as e:
            log.warning("cache_read_failed", key=key, group=namespace, error=str(e))
            return False, None
        if not found or payload is None:
            return False, None
        try:
            return True, self._codec.decode(payload)
        except CodecError as e:
            log.debug("cache_payload_unreadable", key=key, group=namespace, error=str(e))
            return False, None

    async def _write(self, key: str, value: Any, namespace: str, ttl: int) -> None:
        # Best effort: the produced value is returned even if storing fails
        try:
            await self._store.set(key, self._codec.encode(value), namespace, ttl)
        except Exception as e:
            log.warning("cache_write_failed", key=key, group=namespace, error=str(e))
            return
        log.debug("cache_stored", key=key, group=namespace, ttl=ttl)


__all__ = ("ObjectCache",)
