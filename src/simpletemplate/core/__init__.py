from simpletemplate.core.models import (
    KEYWORD_KINDS,
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

__all__ = [
    "Token", "TokenKind", "KEYWORD_KINDS",
    "Node", "Text", "Variable", "Index", "Loop", "Conditional",
    "Diagnostic", "ParseResult",
]
