"""
Store tests

MemoryStore semantics and the function-based store builder.
"""

from datetime import datetime, timedelta

import pytest

from objcache import FunctionalStore, MemoryStore, store_from


class TestMemoryStore:
    @pytest.mark.asyncio
    async def test_get_missing(self, store):
        assert await store.get("k", "ns") == (None, False)

    @pytest.mark.asyncio
    async def test_set_then_get(self, store):
        await store.set("k", b"v", "ns", 0)

        assert await store.get("k", "ns") == (b"v", True)

    @pytest.mark.asyncio
    async def test_empty_payload_is_found(self, store):
        await store.set("k", b"", "ns", 0)

        assert await store.get("k", "ns") == (b"", True)

    @pytest.mark.asyncio
    async def test_namespaces_separate(self, store):
        await store.set("k", b"one", "a", 0)
        await store.set("k", b"two", "b", 0)

        assert await store.get("k", "a") == (b"one", True)
        assert await store.get("k", "b") == (b"two", True)

    @pytest.mark.asyncio
    async def test_delete(self, store):
        await store.set("k", b"v", "ns", 0)

        assert await store.delete("k", "ns") is True
        assert await store.delete("k", "ns") is False
        assert await store.get("k", "ns") == (None, False)

    @pytest.mark.asyncio
    async def test_expired_entry_is_miss(self, store):
        await store.set("k", b"v", "ns", 60)
        store._entries[("ns", "k")].expires_at = datetime.now() - timedelta(seconds=1)

        assert await store.get("k", "ns") == (None, False)
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_zero_ttl_never_expires(self, store):
        await store.set("k", b"v", "ns", 0)

        assert store._entries[("ns", "k")].expires_at is None

    @pytest.mark.asyncio
    async def test_flush(self, store):
        await store.set("a", b"1", "x", 0)
        await store.set("b", b"2", "y", 0)

        await store.flush()

        assert len(store) == 0


class TestFunctionalStore:
    @pytest.mark.asyncio
    async def test_delegates(self):
        backing = MemoryStore()
        store = store_from(get=backing.get, set=backing.set, delete=backing.delete)

        await store.set("k", b"v", "ns", 10)

        assert isinstance(store, FunctionalStore)
        assert await store.get("k", "ns") == (b"v", True)
        assert await store.delete("k", "ns") is True
