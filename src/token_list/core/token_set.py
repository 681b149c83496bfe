# src/token_list/core/token_set.py

"""
token_set.py.
============

Does: Live, ordered, duplicate-free token set kept in sync with a single
      host-owned source string (class-list style attribute semantics).
Returns: TokenSet with add/remove/contains/item/length/toggle/to_string and
         the Python container protocol (len, in, [i], iter, str).
Used by: Hosts wanting a token view over one of their string values
         (see token_list.hosts).

The host string is ground truth: every call re-reads it, mutations work on a
throwaway working list and write back once, only when something changed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from token_list.core.codec import parse_tokens, serialize_tokens
from token_list.core.validate import validate_token
from token_list.types import AttributeHost, TokenSource

__all__ = ["TokenSet"]

log = logging.getLogger(__name__)


class TokenSet:
    """Does: Expose token-collection operations over a TokenSource.
    Args: source: object implementing read_source()/write_source().
    """

    def __init__(self, source: TokenSource):
        self._source = source

    # ── Constructors ──────────────────────────────────────────────────────────
    @classmethod
    def from_callables(
        cls, read: Callable[[], str], write: Callable[[str], None]
    ) -> TokenSet:
        """Does: Bind to a plain pair of read/write hooks."""
        from token_list.hosts import CallbackSource

        return cls(CallbackSource(read, write))

    @classmethod
    def for_attribute(cls, element: AttributeHost, attribute: str) -> TokenSet:
        """Does: Bind to one named attribute of an element-like host."""
        from token_list.hosts import AttributeSource

        return cls(AttributeSource(element, attribute))

    @property
    def source(self) -> TokenSource:
        """Returns: The bound TokenSource."""
        return self._source

    # ── Internal read/write paths ─────────────────────────────────────────────
    def _tokens(self) -> list[str]:
        return parse_tokens(self._source.read_source())

    def _commit(self, tokens: list[str]) -> None:
        value = serialize_tokens(tokens)
        log.debug("[write] %r", value)
        self._source.write_source(value)

    # ── Mutations ─────────────────────────────────────────────────────────────
    def add(self, *tokens: str) -> None:
        """
        Does: Validate each token in order and append the ones not present.
              Writes once after the loop, and only if something was appended.
              An invalid token raises before the write; nothing reaches the host.
        """
        working = self._tokens()
        updated = False

        for token in tokens:
            validate_token(token)
            if token not in working:
                working.append(token)
                updated = True

        if updated:
            self._commit(working)
        else:
            log.debug("[add] nothing new in %r, write skipped", tokens)

    def remove(self, *tokens: str) -> None:
        """
        Does: Validate each token in order and delete every occurrence of it.
              Writes once after the loop, and only if something was removed.
        """
        working = self._tokens()
        updated = False

        for token in tokens:
            validate_token(token)
            # source strings may carry duplicates; drop them all
            while token in working:
                working.remove(token)
                updated = True

        if updated:
            self._commit(working)
        else:
            log.debug("[remove] none of %r present, write skipped", tokens)

    def toggle(self, token: str, force: bool | None = None) -> bool:
        """
        Does: force=True ensures presence, force=False ensures absence,
              omitted flips presence.
        Returns: force when it is a bool, else whether the token is now present.
        """
        present = self.contains(token)
        if present:
            if force is not True:
                self.remove(token)
        elif force is not False:
            self.add(token)

        return force if isinstance(force, bool) else not present

    # ── Queries ───────────────────────────────────────────────────────────────
    def contains(self, token: str) -> bool:
        validate_token(token)
        return token in self._tokens()

    def item(self, index: int) -> str | None:
        """Returns: Token at index, or None when out of range (negative included)."""
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        tokens = self._tokens()
        if 0 <= index < len(tokens):
            return tokens[index]
        return None

    @property
    def length(self) -> int:
        return len(self._tokens())

    def to_string(self) -> str:
        """Returns: The host's raw source string, unmodified."""
        return self._source.read_source()

    # ── Container protocol ────────────────────────────────────────────────────
    def __len__(self) -> int:
        return self.length

    def __contains__(self, token: object) -> bool:
        """Validates like contains(): a non-str operand raises TypeError, not False."""
        return self.contains(token)  # type: ignore[arg-type]

    def __getitem__(self, index: int) -> str:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"TokenSet indices must be integers, not {type(index).__name__}")
        token = self.item(index)
        if token is None:
            raise IndexError(f"TokenSet index out of range: {index}")
        return token

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._tokens()!r})"
