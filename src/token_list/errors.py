# src/token_list/errors.py

"""
errors.py.

Does: Define the token validation error taxonomy.
Returns: TokenError base class plus EmptyOrUndefinedToken / InvalidCharacterToken.
Used by: core.validate, TokenSet operations, demo CLI.
"""

from __future__ import annotations

__all__ = [
    "TokenError",
    "EmptyOrUndefinedToken",
    "InvalidCharacterToken",
]


class TokenError(ValueError):
    """Raise when a token argument fails validation."""

    def __init__(self, message: str, token: str | None = None):
        super().__init__(message)
        self.token = token


class EmptyOrUndefinedToken(TokenError):
    """Raise when a token argument is the empty string or None."""

    def __init__(self, token: str | None = None):
        super().__init__("An invalid or illegal string was specified", token)


class InvalidCharacterToken(TokenError):
    """Raise when a token argument contains a whitespace character."""

    def __init__(self, token: str):
        super().__init__(f"String contains an invalid character: {token!r}", token)
