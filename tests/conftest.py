"""
Shared fixtures for objcache tests.
"""

import sys
from typing import Any

import pytest

from objcache import HostContext, MemoryStore, ObjectCache


class CountingProducer:
    """Producer that records how many times it ran."""

    def __init__(self, value: Any) -> None:
        self.value = value
        self.calls = 0

    def __call__(self) -> Any:
        self.calls += 1
        return self.value


class FailingStore(MemoryStore):
    """MemoryStore whose operations can be made to raise."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_get: Exception | None = None
        self.fail_set: Exception | None = None
        self.fail_delete: Exception | None = None

    async def get(self, key: str, namespace: str) -> tuple[bytes | None, bool]:
        if self.fail_get is not None:
            raise self.fail_get
        return await super().get(key, namespace)

    async def set(self, key: str, value: bytes, namespace: str, ttl: int) -> None:
        if self.fail_set is not None:
            raise self.fail_set
        await super().set(key, value, namespace, ttl)

    async def delete(self, key: str, namespace: str) -> bool:
        if self.fail_delete is not None:
            raise self.fail_delete
        return await super().delete(key, namespace)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture
def cache(store: MemoryStore) -> ObjectCache:
    return ObjectCache(store, {"group": "catalog"})


@pytest.fixture
def network() -> HostContext:
    """Multi-tenant deployment, tenant 1 of network 3."""
    return HostContext(namespace="shop", multisite=True, network_id=3, tenant_id=1)


@pytest.fixture
def default_digit_limit():
    """Pin the int string conversion limit to the interpreter default."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield
    sys.set_int_max_str_digits(previous)
