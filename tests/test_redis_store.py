"""
RedisStore tests

Run against an in-memory stand-in for redis.asyncio.Redis.
"""

import pytest

redis_exceptions = pytest.importorskip("redis.exceptions")

from objcache import ObjectCache  # noqa: E402
from objcache._redis import RedisStore  # noqa: E402


class FakeRedis:
    """Subset of the redis.asyncio client used by RedisStore."""

    def __init__(self) -> None:
        self.data: dict[str, bytes] = {}
        self.expiry: dict[str, int | None] = {}
        self.error: Exception | None = None

    def _check(self) -> None:
        if self.error is not None:
            raise self.error

    async def get(self, key):
        self._check()
        return self.data.get(key)

    async def set(self, key, value, ex=None):
        self._check()
        self.data[key] = value
        self.expiry[key] = ex
        return True

    async def delete(self, key):
        self._check()
        return 1 if self.data.pop(key, None) is not None else 0


@pytest.fixture
def client() -> FakeRedis:
    return FakeRedis()


class TestRedisStore:
    @pytest.mark.asyncio
    async def test_key_layout_and_ttl(self, client):
        store = RedisStore(client, prefix="shop:")

        await store.set("k", b"v", "catalog", 30)
        await store.set("n", b"v", "catalog", 0)

        assert client.data["shop:catalog:k"] == b"v"
        assert client.expiry == {"shop:catalog:k": 30, "shop:catalog:n": None}

    @pytest.mark.asyncio
    async def test_get_found_flag(self, client):
        store = RedisStore(client)
        await store.set("k", b"", "ns", 0)

        assert await store.get("k", "ns") == (b"", True)
        assert await store.get("other", "ns") == (None, False)

    @pytest.mark.asyncio
    async def test_delete(self, client):
        store = RedisStore(client)
        await store.set("k", b"v", "ns", 0)

        assert await store.delete("k", "ns") is True
        assert await store.delete("k", "ns") is False

    @pytest.mark.asyncio
    async def test_connection_error_translated(self, client):
        store = RedisStore(client)
        client.error = redis_exceptions.ConnectionError("refused")

        with pytest.raises(ConnectionError):
            await store.delete("k", "ns")

    @pytest.mark.asyncio
    async def test_timeout_translated(self, client):
        store = RedisStore(client)
        client.error = redis_exceptions.TimeoutError("slow")

        with pytest.raises(TimeoutError):
            await store.get("k", "ns")

    @pytest.mark.asyncio
    async def test_flush_through_cache(self, client):
        cache = ObjectCache(RedisStore(client), {"group": "catalog"})
        await cache.get_object("k", lambda: "v")

        assert "catalog:catalog" in client.data
        assert await cache.flush_group() is True
        assert client.data == {}

        client.error = redis_exceptions.ConnectionError("refused")
        assert await cache.flush_group() is False


def test_exported_from_package():
    import objcache

    assert "RedisStore" in objcache.__all__
    assert objcache.RedisStore is RedisStore
