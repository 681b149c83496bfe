# src/token_list/types.py
from __future__ import annotations

from typing import Protocol, runtime_checkable

"""
types.py.

Does: Define the structural Protocols a host implements to back a TokenSet.
Used by: core.token_set, hosts.
"""


@runtime_checkable
class TokenSource(Protocol):
    """
    Read/write capability over the host-owned source string.

    - read_source(): current authoritative value ("" when unset).
      Must be idempotent and side-effect free.
    - write_source(value): replace the stored value before returning.
    """

    def read_source(self) -> str: ...
    def write_source(self, value: str) -> None: ...


@runtime_checkable
class AttributeHost(Protocol):
    """Element-like object with named string attributes."""

    def get_attribute(self, name: str) -> str | None: ...
    def set_attribute(self, name: str, value: str) -> None: ...


__all__ = ["TokenSource", "AttributeHost"]

__docformat__ = "google"
