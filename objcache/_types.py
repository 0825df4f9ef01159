"""
Core types for objcache.

Re-exports from kungfu + cache data structures.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Producer — computes the value on cache miss
# ═══════════════════════════════════════════════════════════════════════════════

type Producer[T] = Callable[[], T | Awaitable[T]]
"""Zero-argument callable. Plain functions and coroutine functions both work."""


# ═══════════════════════════════════════════════════════════════════════════════
# Host Context — environment facts, passed explicitly
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HostContext:
    """
    Facts about the host deployment.

    namespace:  site identifier, used to build the default group name.
    multisite:  whether the deployment hosts several tenants.
    network_id: id of the network all tenants belong to (group suffix).
    tenant_id:  id of the current tenant (key suffix, unless network_global).

    Example:
        ctx = HostContext(namespace="shop", multisite=True, network_id=1, tenant_id=7)
    """

    namespace: str = "default"
    multisite: bool = False
    network_id: int = 1
    tenant_id: int = 1

    @property
    def default_group(self) -> str:
        return f"{self.namespace}_cache_group"

    def for_tenant(self, tenant_id: int) -> HostContext:
        """Same deployment, different tenant."""
        return HostContext(
            namespace=self.namespace,
            multisite=self.multisite,
            network_id=self.network_id,
            tenant_id=tenant_id,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Cache Result
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CacheResult[T]:
    """Value returned by the cache with lookup metadata."""

    value: T
    hit: bool
    key: str
    group: str


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class CacheErrorKind(Enum):
    """Cache error kinds."""

    NOT_FOUND = auto()  # Store reported the entry missing by raising
    UNAVAILABLE = auto()  # Connection / timeout talking to the store
    OTHER = auto()


@dataclass(frozen=True, slots=True)
class CacheError:
    """Cache operation error."""

    kind: CacheErrorKind
    message: str
    cause: Exception | None = None

    @classmethod
    def from_exception(cls, exc: Exception) -> CacheError:
        match exc:
            case LookupError():
                kind = CacheErrorKind.NOT_FOUND
            case ConnectionError() | TimeoutError() | OSError():
                kind = CacheErrorKind.UNAVAILABLE
            case _:
                kind = CacheErrorKind.OTHER
        return cls(kind, str(exc) or type(exc).__name__, exc)


class CodecError(Exception):
    """Payload could not be encoded or decoded."""


type Config = dict[str, Any]


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

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
    "CacheErrorKind",
    "CacheError",
    "CodecError",
    "Config",
)
