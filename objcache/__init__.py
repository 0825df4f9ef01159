"""
objcache — cache-aside helper over a pluggable object cache.

    from objcache import ObjectCache, MemoryStore

    cache = ObjectCache(MemoryStore(), {"expire": 600, "group": "catalog"})
    price = await cache.get_object("price:42", lambda: repo.price(42))
    await cache.flush_group()
"""

from objcache._types import (
    Result,
    Ok,
    Error,
    LazyCoroResult,
    Producer,
    HostContext,
    CacheResult,
    CacheError,
    CacheErrorKind,
    CodecError,
)
from objcache._coerce import to_bool, to_int, is_numeric, normalize_numeric
from objcache._config import HOUR_IN_SECONDS, CacheConfig, set_default_atts
from objcache._codec import Codec, PickleCodec, JsonCodec
from objcache._store import Store, FunctionalStore, store_from, MemoryStore
from objcache._ops import delete_group
from objcache._object_cache import ObjectCache
from objcache.logging import configure_logging
from objcache.settings import ObjectCacheSettings, get_settings

__version__ = "0.1.0"

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Types
    "Producer",
    "HostContext",
    "CacheResult",
    "CacheError",
    "CacheErrorKind",
    "CodecError",
    # Config
    "HOUR_IN_SECONDS",
    "CacheConfig",
    "set_default_atts",
    "to_bool",
    "to_int",
    "is_numeric",
    "normalize_numeric",
    # Codecs
    "Codec",
    "PickleCodec",
    "JsonCodec",
    # Stores
    "Store",
    "FunctionalStore",
    "store_from",
    "MemoryStore",
    # Cache
    "ObjectCache",
    "delete_group",
    # Ambient
    "configure_logging",
    "ObjectCacheSettings",
    "get_settings",
)

# Redis integration (optional import)
try:
    from objcache._redis import RedisStore

    __all__ += ("RedisStore",)
except ImportError:
    pass
