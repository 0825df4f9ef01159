"""
Cache operations — standalone utilities.
"""

from __future__ import annotations

from kungfu import LazyCoroResult
from combinators import lift as L

from objcache._store import Store
from objcache._types import CacheError

# ═══════════════════════════════════════════════════════════════════════════════
# delete_group() — drop one group aggregate
# ═══════════════════════════════════════════════════════════════════════════════


def delete_group(store: Store, group: str) -> LazyCoroResult[bool, CacheError]:
    """
    Delete the aggregate entry of a group.

    The aggregate is stored under the group name, inside the namespace of
    the same name.

    Example:
        match await delete_group(store, "shop_cache_group"):
            case Ok(existed): ...
            case Error(err): print(err.kind)
    """

    async def do_delete() -> bool:
        return await store.delete(group, group)

    return L.catching_async(do_delete, on_error=CacheError.from_exception)


__all__ = ("delete_group",)
