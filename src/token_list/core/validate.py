# src/token_list/core/validate.py

"""
validate.

Does: Check a single token argument before any TokenSet operation uses it.
Returns: The token unchanged when valid; raises a TokenError subclass otherwise.
Used by: TokenSet.add / remove / contains / toggle.
"""

from __future__ import annotations

import logging
import re

from token_list.errors import EmptyOrUndefinedToken, InvalidCharacterToken

__all__ = ["validate_token", "is_valid_token"]

log = logging.getLogger(__name__)

# Same whitespace class the parser splits on (str.isspace)
_WHITESPACE_RE = re.compile(r"\s")


def validate_token(token: str | None) -> str:
    """
    Does: Reject None/"" (EmptyOrUndefinedToken) and any token holding
          whitespace (InvalidCharacterToken). Non-str values raise TypeError.
    Returns: token.
    """
    if token is None or token == "":
        log.debug("[reject] empty or undefined token %r", token)
        raise EmptyOrUndefinedToken(token)
    if not isinstance(token, str):
        raise TypeError(f"token must be str, got {type(token).__name__}")
    if _WHITESPACE_RE.search(token):
        log.debug("[reject] whitespace in token %r", token)
        raise InvalidCharacterToken(token)
    return token


def is_valid_token(token: object) -> bool:
    """Does: Non-raising variant of validate_token()."""
    if not isinstance(token, str):
        return False
    return token != "" and _WHITESPACE_RE.search(token) is None
