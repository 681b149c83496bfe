"""
token_list
==========

Does: Root package for the live space-separated token list.
Returns: Re-exports TokenSet, host adapters, host protocols and the error taxonomy.
Used by: Any host exposing a class-list style view over one of its strings.
Example:
    el = Element(**{"class": "foo bar"}); el.class_list.add("baz")
"""

from __future__ import annotations

from .core import TokenSet, is_valid_token, parse_tokens, serialize_tokens, validate_token
from .errors import EmptyOrUndefinedToken, InvalidCharacterToken, TokenError
from .hosts import AttributeSource, CallbackSource, Element, StringSource
from .types import AttributeHost, TokenSource

__all__ = [
    "TokenSet",
    # hooks
    "TokenSource",
    "AttributeHost",
    "CallbackSource",
    "AttributeSource",
    "StringSource",
    "Element",
    # rules
    "parse_tokens",
    "serialize_tokens",
    "validate_token",
    "is_valid_token",
    # errors
    "TokenError",
    "EmptyOrUndefinedToken",
    "InvalidCharacterToken",
]
__docformat__ = "google"
