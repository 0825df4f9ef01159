"""
Environment configuration.

Every field can be set through an OBJCACHE_* variable or a .env file:

    OBJCACHE_NAMESPACE=shop
    OBJCACHE_MULTISITE=true
    OBJCACHE_TENANT_ID=7
    OBJCACHE_EXPIRE=600
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from objcache._config import HOUR_IN_SECONDS
from objcache._types import HostContext


class ObjectCacheSettings(BaseSettings):
    """Host facts and cache defaults read from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="OBJCACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Host context
    namespace: str = Field(default="default", description="Site identifier")
    multisite: bool = Field(default=False, description="Multi-tenant deployment")
    network_id: int = Field(default=1, ge=0, description="Network id, suffixes group names")
    tenant_id: int = Field(default=1, ge=0, description="Current tenant id, suffixes keys")

    # Cache defaults
    expire: int = Field(default=HOUR_IN_SECONDS, ge=0, description="TTL in seconds, 0 = never")
    group: str | None = Field(default=None, description="Default group, <namespace>_cache_group if unset")
    single: bool = Field(default=False, description="One entry per key instead of group aggregates")
    network_global: bool = Field(default=False, description="Share values across tenants")

    log_level: str = Field(default="info", description="Used by configure_logging()")

    def host_context(self) -> HostContext:
        return HostContext(
            namespace=self.namespace,
            multisite=self.multisite,
            network_id=self.network_id,
            tenant_id=self.tenant_id,
        )

    def defaults(self) -> dict[str, Any]:
        """Config mapping for ObjectCache(store, settings.defaults(), ...)."""
        return {
            "expire": self.expire,
            "group": self.group or self.host_context().default_group,
            "single": self.single,
            "network_global": self.network_global,
        }


@lru_cache
def get_settings() -> ObjectCacheSettings:
    """Cached settings instance."""
    return ObjectCacheSettings()


__all__ = ("ObjectCacheSettings", "get_settings")
