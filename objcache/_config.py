"""
Cache configuration — defaults, merging, coercion.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from objcache._coerce import to_bool, to_int
from objcache._types import Config, HostContext

HOUR_IN_SECONDS = 3600


# ═══════════════════════════════════════════════════════════════════════════════
# set_default_atts() — right-biased merge restricted to the default keys
# ═══════════════════════════════════════════════════════════════════════════════


def set_default_atts(
    defaults: Mapping[str, Any],
    overrides: Mapping[str, Any] | None,
) -> Config:
    """
    Fill in defaults for every supported key.

    A key present in overrides wins, whatever its value (None included).
    Keys unknown to defaults are dropped.

    Example:
        set_default_atts({"a": 1, "b": 2}, {"a": 5})     # {"a": 5, "b": 2}
        set_default_atts({"a": 1}, {"a": None})          # {"a": None}
        set_default_atts({"a": 1}, {"c": 9})             # {"a": 1}
    """
    overrides = overrides or {}
    return {
        name: overrides[name] if name in overrides else default
        for name, default in defaults.items()
    }


# ═══════════════════════════════════════════════════════════════════════════════
# CacheConfig
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """
    Effective cache configuration.

    expire:         TTL in seconds, 0 means no expiry.
    group:          store namespace, and aggregate key in group mode.
    single:         one store entry per key instead of one aggregate per group.
    network_global: share the value across all tenants of a network.
    force:          accepted for compatibility, not used.

    Note: Immutable — merged() returns a new config.
    """

    expire: int
    group: str
    single: bool = False
    network_global: bool = False
    force: bool = False

    @classmethod
    def defaults(cls, context: HostContext | None = None) -> CacheConfig:
        ctx = context or HostContext()
        return cls(expire=HOUR_IN_SECONDS, group=ctx.default_group)

    @classmethod
    def build(
        cls,
        defaults: Mapping[str, Any],
        overrides: Mapping[str, Any] | CacheConfig | None = None,
    ) -> CacheConfig:
        """Merge overrides over defaults, then coerce every field."""
        if isinstance(overrides, CacheConfig):
            overrides = overrides.as_dict()
        merged = set_default_atts(defaults, overrides)
        return cls(
            expire=max(0, to_int(merged["expire"])),
            group="" if merged["group"] is None else str(merged["group"]),
            single=to_bool(merged["single"]),
            network_global=to_bool(merged["network_global"]),
            force=to_bool(merged["force"]),
        )

    def merged(self, overrides: Mapping[str, Any] | CacheConfig | None) -> CacheConfig:
        """Per-call config: overrides win, missing keys fall back to self."""
        if not overrides:
            return self
        return CacheConfig.build(self.as_dict(), overrides)

    def as_dict(self) -> Config:
        return asdict(self)


__all__ = ("HOUR_IN_SECONDS", "set_default_atts", "CacheConfig")
