"""AST evaluator: walks parsed nodes against a data tree."""
from __future__ import annotations

from collections import ChainMap
from collections.abc import Mapping
from typing import Any

from simpletemplate.core.models import Conditional, Index, Loop, Node, Text, Variable
from simpletemplate.engine.formatter import format_joined, format_value, is_array, is_falsy, lookup


def _render_variable(node: Variable, data: Any, scope: Mapping[str, Any]) -> str:
    # Loop bindings render as-is; only top-level arrays are comma-joined.
    if node.name in scope:
        return format_value(scope[node.name])
    return format_joined(lookup(data, node.name))


def _render_index(node: Index, data: Any) -> str:
    target = lookup(data, node.name)
    if is_array(target) and node.index < len(target):
        return format_value(target[node.index])
    return format_value(None)


def _render_loop(node: Loop, data: Any, scope: ChainMap[str, Any]) -> str:
    iterable = lookup(data, node.iterable)
    if not is_array(iterable):
        return ""
    parts: list[str] = []
    for index, element in enumerate(iterable):
        # The loop variable shadows ``index`` when both share a name.
        frame = {"index": index, node.var: element}
        parts.append(_render_nodes(node.body, data, scope.new_child(frame)))
    return "".join(parts)


def _edge_run(nodes: tuple[Node, ...]) -> int:
    count = 0
    for node in nodes:
        if not isinstance(node, (Text, Loop)):
            break
        count += 1
    return count


def _render_branch(nodes: tuple[Node, ...], data: Any, scope: ChainMap[str, Any]) -> str:
    """Render a conditional branch, trimming whitespace at both edges.

    Literal text and loop output at the edges are trimmed; a variable or
    index value at an edge is left as rendered.
    """
    parts = [_render_nodes((node,), data, scope) for node in nodes]
    lead = _edge_run(nodes)
    if lead == len(nodes):
        return "".join(parts).strip()
    trail = _edge_run(nodes[::-1])
    head = "".join(parts[:lead]).lstrip()
    tail = "".join(parts[len(parts) - trail:]).rstrip()
    return head + "".join(parts[lead:len(parts) - trail]) + tail


def _render_conditional(node: Conditional, data: Any, scope: ChainMap[str, Any]) -> str:
    if is_falsy(lookup(data, node.cond)):
        if node.else_body is None:
            return ""
        return _render_branch(node.else_body, data, scope)
    return _render_branch(node.if_body, data, scope)


def _render_nodes(nodes: tuple[Node, ...], data: Any, scope: ChainMap[str, Any]) -> str:
    out: list[str] = []
    for node in nodes:
        if isinstance(node, Text):
            out.append(node.text)
        elif isinstance(node, Variable):
            out.append(_render_variable(node, data, scope))
        elif isinstance(node, Index):
            out.append(_render_index(node, data))
        elif isinstance(node, Loop):
            out.append(_render_loop(node, data, scope))
        elif isinstance(node, Conditional):
            out.append(_render_conditional(node, data, scope))
    return "".join(out)


def evaluate(nodes: tuple[Node, ...], data: Any) -> str:
    """Render *nodes* against *data*.

    Conditions, loop iterables and indexed targets always resolve as
    top-level keys of *data*. Inside a loop body, bare ``{{ var }}`` and
    ``{{ index }}`` placeholders see the innermost loop's bindings first.
    *data* is never mutated.
    """
    return _render_nodes(nodes, data, ChainMap())
