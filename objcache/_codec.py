"""
Codecs — turn cached values into bytes and back.
"""

from __future__ import annotations

import json
import pickle
from typing import Any, Protocol

from objcache._types import CodecError

# ═══════════════════════════════════════════════════════════════════════════════
# Codec Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class Codec(Protocol):
    """
    Payload codec protocol.

    decode() must raise CodecError on a payload it cannot read, the cache
    treats that entry as missing.
    """

    def encode(self, value: Any) -> bytes: ...

    def decode(self, payload: bytes) -> Any: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Pickle — Default
# ═══════════════════════════════════════════════════════════════════════════════


class PickleCodec:
    """Any picklable value. Only use with stores you trust."""

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        self._protocol = protocol

    def encode(self, value: Any) -> bytes:
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            raise CodecError(f"Cannot pickle {type(value).__name__}: {e}") from e

    def decode(self, payload: bytes) -> Any:
        try:
            return pickle.loads(payload)
        except Exception as e:
            raise CodecError(f"Cannot unpickle payload: {e}") from e


# ═══════════════════════════════════════════════════════════════════════════════
# JSON
# ═══════════════════════════════════════════════════════════════════════════════


class JsonCodec:
    """JSON payloads, for stores shared with non-Python readers."""

    def encode(self, value: Any) -> bytes:
        try:
            return json.dumps(value, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise CodecError(f"Cannot encode {type(value).__name__} as JSON: {e}") from e

    def decode(self, payload: bytes) -> Any:
        try:
            return json.loads(payload)
        except (TypeError, ValueError) as e:
            raise CodecError(f"Cannot decode JSON payload: {e}") from e


__all__ = ("Codec", "PickleCodec", "JsonCodec")
