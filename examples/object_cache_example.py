"""
ObjectCache — compute-or-fetch with group flushing.

Key concepts:
- Store = backend (global, inject via DI)
- ObjectCache = façade with per-instance defaults, per-call overrides
- Group mode keeps a whole group in one entry: flush_group() drops it at once
"""

import asyncio

from objcache import HostContext, MemoryStore, ObjectCache, configure_logging, get_settings


store = MemoryStore()


def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


async def load_price(sku: str) -> str:
    print(f"  [ORIGIN] Loading price of {sku}...")
    await asyncio.sleep(0.01)
    return "19.99"


async def main() -> None:
    configure_logging(get_settings().log_level)
    banner("ObjectCache: cache-aside + group flush")

    cache = ObjectCache(store, {"group": "prices", "expire": 600})

    print("\n1. First request (miss → origin):")
    r1 = await cache.resolve("sku:1", lambda: load_price("sku:1"))
    print(f"   hit={r1.hit} → {r1.value!r}")

    print("\n2. Second request (hit, numeric string normalized):")
    r2 = await cache.resolve("sku:1", lambda: load_price("sku:1"))
    print(f"   hit={r2.hit} → {r2.value!r}")

    print("\n3. Flush group, request again (miss):")
    print(f"   flushed={await cache.flush_group()}")
    r3 = await cache.resolve("sku:1", lambda: load_price("sku:1"))
    print(f"   hit={r3.hit} → {r3.value!r}")

    print("\n4. Multi-tenant: each tenant gets its own value:")
    network = HostContext(namespace="shop", multisite=True, network_id=1, tenant_id=1)
    for tenant in (1, 2):
        r = await cache.resolve("banner", lambda: f"banner for tenant {tenant}", context=network.for_tenant(tenant))
        print(f"   tenant={tenant} key={r.key} group={r.group} → {r.value!r}")

    print("\nDone!")


if __name__ == "__main__":
    asyncio.run(main())
