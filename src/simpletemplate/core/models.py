"""Core data models for simpletemplate."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

# ---------------------------------------------------------------------------
# Lexer tokens
# ---------------------------------------------------------------------------

class TokenKind(Enum):
    """Kind of a lexed template token."""

    TEXT = "text"
    VARIABLE = "variable"
    INDEX = "index"
    FOR = "for"
    IF = "if"
    ELSE = "else"
    ENDIF = "endif"
    ENDFOR = "endfor"


# Bare placeholders whose identifier is a block keyword.
KEYWORD_KINDS: dict[str, TokenKind] = {
    "else": TokenKind.ELSE,
    "endif": TokenKind.ENDIF,
    "endfor": TokenKind.ENDFOR,
}


@dataclass(frozen=True)
class Token:
    """A single lexed token.

    ``text`` is always the exact source slice the token was read from, so an
    unparseable tag can be emitted back verbatim.
    """

    kind: TokenKind
    text: str
    position: int = 0
    name: str = ""
    iterable: str = ""
    index: int = 0


# ---------------------------------------------------------------------------
# AST nodes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Text:
    """Literal template text."""

    text: str


@dataclass(frozen=True)
class Variable:
    """A bare ``{{ name }}`` placeholder."""

    name: str


@dataclass(frozen=True)
class Index:
    """An indexed array access, ``{{ name[index] }}``."""

    name: str
    index: int


@dataclass(frozen=True)
class Loop:
    """A ``for <var> in <iterable>`` block."""

    var: str
    iterable: str
    body: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Conditional:
    """An ``if <cond>`` block with an optional ``else`` branch."""

    cond: str
    if_body: tuple[Node, ...] = ()
    else_body: tuple[Node, ...] | None = None


Node = Union[Text, Variable, Index, Loop, Conditional]


# ---------------------------------------------------------------------------
# Parse diagnostics
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Diagnostic:
    """A structural problem found while parsing a template."""

    level: str  # "warning" or "info"
    reason: str
    position: int = 0


@dataclass
class ParseResult:
    """AST plus the diagnostics collected while building it."""

    nodes: tuple[Node, ...]
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return any(d.level == "warning" for d in self.diagnostics)
