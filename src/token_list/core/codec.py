# src/token_list/core/codec.py
# ──────────────────────────────────────────────────────────────
# Source string <-> token sequence
# ──────────────────────────────────────────────────────────────
"""
codec.

Does: Parse a host source string into its ordered token sequence and
      serialize a working sequence back to canonical form.
Returns: parse_tokens(), serialize_tokens().
Used by: TokenSet read paths (parse) and write paths (serialize).
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["parse_tokens", "serialize_tokens"]


def parse_tokens(source: str | None) -> list[str]:
    """
    Does: Split on runs of whitespace. None, "" and all-whitespace
          sources give []; leading/trailing whitespace never yields "" tokens.
          Duplicates already present in the source are kept as-is.
    Returns: New list of tokens in source order.
    """
    if not source:
        return []
    return source.split()


def serialize_tokens(tokens: Iterable[str]) -> str:
    """Does: Join with single spaces and trim; the canonical source form."""
    return " ".join(tokens).strip()
