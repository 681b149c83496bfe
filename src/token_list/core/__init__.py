# src/token_list/core/__init__.py
"""
core.
====

Does: Provide the TokenSet component with its parsing, serialization and
      validation rules.
Exports: TokenSet, parse_tokens, serialize_tokens, validate_token, is_valid_token
"""

from __future__ import annotations

from .codec import parse_tokens, serialize_tokens
from .token_set import TokenSet
from .validate import is_valid_token, validate_token

__all__ = [
    "TokenSet",
    # codec
    "parse_tokens",
    "serialize_tokens",
    # validation
    "validate_token",
    "is_valid_token",
]
