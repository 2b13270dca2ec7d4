"""Render pipeline: lex, parse and evaluate a template."""
from __future__ import annotations

import functools
from typing import Any

from simpletemplate.core.models import Diagnostic, Node, Token
from simpletemplate.engine.evaluator import evaluate
from simpletemplate.engine.lexer import tokenize
from simpletemplate.engine.parser import Parser


class Template:
    """A compiled template; render it any number of times.

    Compiled templates hold no mutable state and can be shared between
    threads.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens: tuple[Token, ...] = tuple(tokenize(source))
        self._result = Parser(list(self.tokens)).parse()
        self.nodes: tuple[Node, ...] = self._result.nodes
        self.diagnostics: tuple[Diagnostic, ...] = tuple(self._result.diagnostics)

    def __repr__(self) -> str:
        return f"Template({self.source[:40]!r}, nodes={len(self.nodes)})"

    @property
    def has_warnings(self) -> bool:
        return self._result.has_warnings

    def render(self, data: Any) -> str:
        return evaluate(self.nodes, data)


@functools.lru_cache(maxsize=128)
def compile_template(source: str) -> Template:
    """Compile *source*, reusing the result for identical text."""
    return Template(source)


def render(template: str, data: Any) -> str:
    """Render *template* against the data tree *data*.

    Never raises for malformed templates or missing data: unknown keys and
    out-of-range indexes render as ``null``, non-array loop targets and falsy
    conditions without an ``else`` render as nothing.
    """
    return compile_template(template).render(data)
