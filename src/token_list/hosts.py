# src/token_list/hosts.py

"""
hosts.py.
========

Does: Ready-made TokenSource adapters binding a TokenSet to where the
      source string actually lives.
Returns: CallbackSource (two callables), AttributeSource (element attribute),
         StringSource (in-memory, counts writes), Element (minimal attribute
         host with a class_list view).
Used by: TokenSet.from_callables / TokenSet.for_attribute, demo CLI, tests.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from token_list.core.token_set import TokenSet
from token_list.types import AttributeHost

__all__ = [
    "CallbackSource",
    "AttributeSource",
    "StringSource",
    "Element",
]

log = logging.getLogger(__name__)


class CallbackSource:
    """Does: Wrap a read() -> str and write(str) pair as a TokenSource."""

    def __init__(self, read: Callable[[], str], write: Callable[[str], None]):
        self._read = read
        self._write = write

    def read_source(self) -> str:
        return self._read() or ""

    def write_source(self, value: str) -> None:
        self._write(value)


class AttributeSource:
    """Does: Read/write one named attribute of an element-like host.
    Args: element: AttributeHost; attribute: attribute name.
    An unset (None) or empty attribute reads as "".
    """

    def __init__(self, element: AttributeHost, attribute: str):
        self.element = element
        self.attribute = attribute

    def read_source(self) -> str:
        return self.element.get_attribute(self.attribute) or ""

    def write_source(self, value: str) -> None:
        self.element.set_attribute(self.attribute, value)


class StringSource:
    """Does: Hold the source string in memory.
    Args: initial: starting value.
    write_count tracks how many times the value was written.
    """

    def __init__(self, initial: str = ""):
        self.value = initial
        self.write_count = 0

    def read_source(self) -> str:
        return self.value

    def write_source(self, value: str) -> None:
        self.value = value
        self.write_count += 1

    def __repr__(self) -> str:
        return f"StringSource({self.value!r}, writes={self.write_count})"


class Element:
    """Does: Minimal attribute host (name -> string value).
    Args: tag: element name; **attributes: initial attribute values.
    """

    def __init__(self, tag: str = "div", **attributes: str):
        self.tag = tag
        self._attributes: dict[str, str] = dict(attributes)

    def get_attribute(self, name: str) -> str | None:
        return self._attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        log.debug("[%s] set %s=%r", self.tag, name, value)
        self._attributes[name] = str(value)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def remove_attribute(self, name: str) -> None:
        self._attributes.pop(name, None)

    @property
    def class_list(self) -> TokenSet:
        """Returns: TokenSet bound to this element's "class" attribute."""
        return TokenSet.for_attribute(self, "class")

    def __repr__(self) -> str:
        attrs = " ".join(f'{k}="{v}"' for k, v in self._attributes.items())
        return f"<{self.tag}{' ' + attrs if attrs else ''}>"
