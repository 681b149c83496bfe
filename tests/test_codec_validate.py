# tests/test_codec_validate.py
"""Tests for the parsing/serialization rules and single-token validation."""

from __future__ import annotations

import pytest

from token_list.core import codec as C
from token_list.core import validate as V
from token_list.errors import EmptyOrUndefinedToken, InvalidCharacterToken, TokenError


# ---------- parse_tokens ----------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("", []),
        (None, []),
        ("   ", []),
        ("\t\n\r\f", []),
        ("foo", ["foo"]),
        ("foo bar", ["foo", "bar"]),
        ("  foo   bar  ", ["foo", "bar"]),           # no empty tokens at the edges
        ("foo\tbar\nbaz", ["foo", "bar", "baz"]),     # any whitespace run separates
        ("a a b", ["a", "a", "b"]),                   # source duplicates kept as-is
        ("Foo foo", ["Foo", "foo"]),                  # case-sensitive
        ("x\u00a0y", ["x", "y"]),                     # unicode whitespace
    ],
)
def test_parse_tokens(source, expected):
    assert C.parse_tokens(source) == expected


def test_parse_returns_fresh_list():
    a = C.parse_tokens("foo bar")
    a.append("baz")
    assert C.parse_tokens("foo bar") == ["foo", "bar"]


# ---------- serialize_tokens ----------
def test_serialize_joins_with_single_space():
    assert C.serialize_tokens(["foo", "bar", "baz"]) == "foo bar baz"
    assert C.serialize_tokens([]) == ""
    assert C.serialize_tokens(iter(["a"])) == "a"


@pytest.mark.parametrize(
    "tokens",
    [
        [],
        ["solo"],
        ["foo", "bar"],
        ["btn", "btn-primary", "is-active", "ÉTÉ", "x_1"],
    ],
)
def test_serialize_then_parse_round_trips(tokens):
    assert C.parse_tokens(C.serialize_tokens(tokens)) == tokens


# ---------- validate_token ----------
@pytest.mark.parametrize("token", ["", None])
def test_validate_rejects_empty_or_undefined(token):
    with pytest.raises(EmptyOrUndefinedToken) as exc:
        V.validate_token(token)
    assert exc.value.token == token
    assert "invalid or illegal string" in str(exc.value)


@pytest.mark.parametrize("token", [" ", "a b", "a\tb", "lead ", " trail", "a\nb", "x\u00a0y"])
def test_validate_rejects_whitespace(token):
    with pytest.raises(InvalidCharacterToken) as exc:
        V.validate_token(token)
    assert exc.value.token == token
    assert "invalid character" in str(exc.value)


def test_errors_share_token_error_base():
    assert issubclass(EmptyOrUndefinedToken, TokenError)
    assert issubclass(InvalidCharacterToken, TokenError)
    assert issubclass(TokenError, ValueError)


def test_validate_accepts_and_returns_token():
    assert V.validate_token("is-active") == "is-active"
    assert V.validate_token("日本") == "日本"


@pytest.mark.parametrize("token", [0, 1.5, b"foo", ["foo"]])
def test_validate_rejects_non_str(token):
    with pytest.raises(TypeError):
        V.validate_token(token)


@pytest.mark.parametrize(
    "token,expected",
    [("ok", True), ("", False), (None, False), ("a b", False), (3, False)],
)
def test_is_valid_token(token, expected):
    assert V.is_valid_token(token) is expected
