"""Recursive-descent parser building the template AST from tokens."""
from __future__ import annotations

import logging

from simpletemplate.core.models import (
    Conditional,
    Diagnostic,
    Index,
    Loop,
    Node,
    ParseResult,
    Text,
    Token,
    TokenKind,
    Variable,
)
from simpletemplate.utils.text import LOOSE_TAG_RE, strip_leading_newlines

logger = logging.getLogger(__name__)

_ELSE = frozenset({TokenKind.ELSE})


def _append(nodes: list[Node], node: Node) -> None:
    """Append *node*, merging it into a preceding text node."""
    if isinstance(node, Text):
        if not node.text:
            return
        if nodes and isinstance(nodes[-1], Text):
            nodes[-1] = Text(nodes[-1].text + node.text)
            return
    nodes.append(node)


def _trim_branch(nodes: list[Node]) -> tuple[Node, ...]:
    """Trim whitespace at both ends of a conditional branch's literal text."""
    out = list(nodes)
    if out and isinstance(out[0], Text):
        out[0] = Text(out[0].text.lstrip())
    if out and isinstance(out[-1], Text):
        out[-1] = Text(out[-1].text.rstrip())
    return tuple(n for n in out if not (isinstance(n, Text) and not n.text))


def _loop_body(nodes: list[Node]) -> tuple[Node, ...]:
    out = list(nodes)
    if out and isinstance(out[0], Text):
        out[0] = Text(strip_leading_newlines(out[0].text))
        if not out[0].text:
            out.pop(0)
    return tuple(out)


class Parser:
    """Build a node tree from a token stream.

    Blocks nest; each ``endfor``/``endif`` closes the innermost open block of
    its kind. Structural problems never raise: an unclosed opener is kept as
    literal text and a stray ``else``/``endif``/``endfor`` is read as a bare
    variable of that name. Each such fallback is recorded as a
    :class:`Diagnostic`.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._diagnostics: list[Diagnostic] = []

    def parse(self) -> ParseResult:
        self._pos = 0
        self._diagnostics = []
        nodes, _ = self._parse_nodes(frozenset())
        for d in self._diagnostics:
            logger.debug("template %s at offset %d: %s", d.level, d.position, d.reason)
        return ParseResult(nodes=tuple(nodes), diagnostics=list(self._diagnostics))

    # -- helpers ----------------------------------------------------------------

    def _warn(self, reason: str, position: int) -> None:
        self._diagnostics.append(Diagnostic(level="warning", reason=reason, position=position))

    def _check_text(self, tok: Token) -> None:
        for m in LOOSE_TAG_RE.finditer(tok.text):
            self._diagnostics.append(Diagnostic(
                level="info",
                reason=f"unrecognised placeholder {m.group(0)!r} left as text",
                position=tok.position + m.start(),
            ))

    # -- grammar ----------------------------------------------------------------

    def _parse_nodes(self, stop: frozenset[TokenKind]) -> tuple[list[Node], Token | None]:
        """Parse until a token in *stop* (left unconsumed) or end of input."""
        nodes: list[Node] = []
        while self._pos < len(self._tokens):
            tok = self._tokens[self._pos]
            if tok.kind in stop:
                return nodes, tok
            self._pos += 1

            if tok.kind is TokenKind.TEXT:
                self._check_text(tok)
                _append(nodes, Text(tok.text))
            elif tok.kind is TokenKind.VARIABLE:
                nodes.append(Variable(tok.name))
            elif tok.kind is TokenKind.INDEX:
                nodes.append(Index(tok.name, tok.index))
            elif tok.kind is TokenKind.FOR:
                for node in self._parse_loop(tok, stop):
                    _append(nodes, node)
            elif tok.kind is TokenKind.IF:
                for node in self._parse_conditional(tok, stop):
                    _append(nodes, node)
            else:
                self._warn(f"stray {tok.text!r} outside a matching block", tok.position)
                nodes.append(Variable(tok.name))
        return nodes, None

    def _parse_loop(self, opener: Token, outer: frozenset[TokenKind]) -> list[Node]:
        closers = (outer - _ELSE) | {TokenKind.ENDFOR}
        body, end = self._parse_nodes(closers)
        if end is None or end.kind is not TokenKind.ENDFOR:
            self._warn(f"unclosed {opener.text!r}, expected '{{{{ endfor }}}}'", opener.position)
            return [Text(opener.text), *body]
        self._pos += 1
        return [Loop(var=opener.name, iterable=opener.iterable, body=_loop_body(body))]

    def _parse_conditional(self, opener: Token, outer: frozenset[TokenKind]) -> list[Node]:
        closers = (outer - _ELSE) | {TokenKind.ENDIF}
        if_body, end = self._parse_nodes(closers | _ELSE)
        else_body: list[Node] | None = None
        if end is not None and end.kind is TokenKind.ELSE:
            self._pos += 1
            else_body, end = self._parse_nodes(closers)

        if end is None or end.kind is not TokenKind.ENDIF:
            self._warn(f"unclosed {opener.text!r}, expected '{{{{ endif }}}}'", opener.position)
            out: list[Node] = [Text(opener.text), *if_body]
            if else_body is not None:
                out.append(Variable("else"))
                out.extend(else_body)
            return out

        self._pos += 1
        return [Conditional(
            cond=opener.name,
            if_body=_trim_branch(if_body),
            else_body=_trim_branch(else_body) if else_body is not None else None,
        )]


def parse(tokens: list[Token]) -> ParseResult:
    """Parse *tokens* into a :class:`ParseResult`."""
    return Parser(tokens).parse()


def dump_tree(nodes: tuple[Node, ...] | list[Node], depth: int = 0) -> str:
    """Render an AST as an indented outline, one node per line."""
    pad = "  " * depth
    lines: list[str] = []
    for node in nodes:
        if isinstance(node, Text):
            lines.append(f"{pad}Text {node.text!r}")
        elif isinstance(node, Variable):
            lines.append(f"{pad}Variable {node.name}")
        elif isinstance(node, Index):
            lines.append(f"{pad}Index {node.name}[{node.index}]")
        elif isinstance(node, Loop):
            lines.append(f"{pad}Loop {node.var} in {node.iterable}")
            if node.body:
                lines.append(dump_tree(node.body, depth + 1))
        elif isinstance(node, Conditional):
            lines.append(f"{pad}Conditional {node.cond}")
            if node.if_body:
                lines.append(dump_tree(node.if_body, depth + 1))
            if node.else_body is not None:
                lines.append(f"{pad}Else")
                if node.else_body:
                    lines.append(dump_tree(node.else_body, depth + 1))
    return "\n".join(lines)
