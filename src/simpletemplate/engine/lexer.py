"""Template lexer: chops template text into a flat token stream."""
from __future__ import annotations

import re
import sys

from simpletemplate.core.models import KEYWORD_KINDS, Token, TokenKind
from simpletemplate.utils.text import TAG_RE


def _parse_index(digits: str) -> int:
    """Read an index; one too long to convert is past the end of any array."""
    try:
        return int(digits)
    except ValueError:
        return sys.maxsize


def _tag_token(m: re.Match[str]) -> Token:
    text = m.group(0)
    pos = m.start()
    if m.group("for_var") is not None:
        return Token(TokenKind.FOR, text, pos, name=m.group("for_var"), iterable=m.group("for_iter"))
    if m.group("if_cond") is not None:
        return Token(TokenKind.IF, text, pos, name=m.group("if_cond"))
    if m.group("index_name") is not None:
        return Token(TokenKind.INDEX, text, pos, name=m.group("index_name"), index=_parse_index(m.group("index")))
    name = m.group("name")
    return Token(KEYWORD_KINDS.get(name, TokenKind.VARIABLE), text, pos, name=name)


def tokenize(source: str) -> list[Token]:
    """Split *source* into text and placeholder tokens.

    Only spans matching one of the placeholder shapes become tags; anything
    else between ``{{`` and ``}}`` stays literal text. Adjacent literal text
    is always emitted as a single token and empty text tokens are never
    produced.
    """
    tokens: list[Token] = []
    pos = 0
    for m in TAG_RE.finditer(source):
        if m.start() > pos:
            tokens.append(Token(TokenKind.TEXT, source[pos:m.start()], pos))
        tokens.append(_tag_token(m))
        pos = m.end()
    if pos < len(source):
        tokens.append(Token(TokenKind.TEXT, source[pos:], pos))
    return tokens
