"""Tests for core data models."""
from __future__ import annotations

import dataclasses

import pytest

from simpletemplate.core.models import (
    KEYWORD_KINDS,
    Conditional,
    Diagnostic,
    Loop,
    ParseResult,
    Text,
    Token,
    TokenKind,
    Variable,
)


def test_token_defaults() -> None:
    t = Token(kind=TokenKind.TEXT, text="hello")
    assert t.position == 0
    assert t.name == ""
    assert t.index == 0


def test_token_kind_values() -> None:
    assert TokenKind.FOR.value == "for"
    assert TokenKind.ENDFOR.value == "endfor"
    assert TokenKind.INDEX.value == "index"


def test_keyword_kinds() -> None:
    assert set(KEYWORD_KINDS) == {"else", "endif", "endfor"}


def test_nodes_are_frozen_and_hashable() -> None:
    loop = Loop(var="x", iterable="xs", body=(Variable("x"),))
    with pytest.raises(dataclasses.FrozenInstanceError):
        loop.var = "y"  # type: ignore[misc]
    assert hash(loop) == hash(Loop("x", "xs", (Variable("x"),)))


def test_conditional_defaults() -> None:
    c = Conditional(cond="flag")
    assert c.if_body == ()
    assert c.else_body is None


def test_parse_result_has_warnings() -> None:
    r = ParseResult(nodes=(Text("a"),))
    assert not r.has_warnings
    r.diagnostics.append(Diagnostic(level="info", reason="note"))
    assert not r.has_warnings
    r.diagnostics.append(Diagnostic(level="warning", reason="unclosed", position=3))
    assert r.has_warnings
