from simpletemplate.engine.formatter import format_joined, format_value, is_falsy
from simpletemplate.engine.lexer import tokenize
from simpletemplate.engine.parser import Parser, dump_tree, parse
from simpletemplate.engine.pipeline import Template, compile_template, render

__all__ = [
    "render", "Template", "compile_template",
    "tokenize", "parse", "Parser", "dump_tree",
    "format_value", "format_joined", "is_falsy",
]
