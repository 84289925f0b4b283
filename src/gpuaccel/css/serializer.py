"""Render a Stylesheet tree back into CSS text.

Default output puts each rule block on one line and indents the contents of
block at-rules by two spaces per level::

    .box { animation: fade 1s; transform: translateZ(0); }
    @media (max-width: 600px) {
      .box { color: red; }
    }

``compact=True`` drops all optional whitespace.
"""

from __future__ import annotations

from gpuaccel.css.model import (
    AtRuleBlock,
    AtRuleStatement,
    Declaration,
    Node,
    RuleBlock,
    Stylesheet,
)

__all__ = ["render", "render_declaration", "render_rule"]

_INDENT = "  "


def render(sheet: Stylesheet, compact: bool = False) -> str:
    """Serialize *sheet* to CSS text."""
    lines: list[str] = []
    for node in sheet.nodes:
        _render_node(node, 0, compact, lines)
    if compact:
        return "".join(lines)
    return "\n".join(lines) + "\n" if lines else ""


def render_declaration(decl: Declaration, compact: bool = False) -> str:
    if compact:
        suffix = "!important" if decl.important else ""
        return f"{decl.property}:{decl.value}{suffix}"
    return str(decl)


def render_rule(rule: RuleBlock, compact: bool = False) -> str:
    """Serialize a single rule block on one line."""
    decls = [render_declaration(d, compact) for d in rule.declarations]
    if compact:
        body = "".join(f"{d};" for d in decls)
        return ",".join(rule.selectors) + "{" + body + "}"
    head = ", ".join(rule.selectors)
    if not decls:
        return f"{head} {{}}"
    return f"{head} {{ " + " ".join(f"{d};" for d in decls) + " }"


def _at_rule_head(name: str, prelude: str) -> str:
    return f"@{name} {prelude}" if prelude else f"@{name}"


def _render_node(node: Node, depth: int, compact: bool, lines: list[str]) -> None:
    indent = "" if compact else _INDENT * depth

    if isinstance(node, RuleBlock):
        lines.append(indent + render_rule(node, compact))
    elif isinstance(node, AtRuleStatement):
        lines.append(indent + _at_rule_head(node.name, node.prelude) + ";")
    elif isinstance(node, AtRuleBlock):
        head = _at_rule_head(node.name, node.prelude)
        lines.append(indent + head + ("{" if compact else " {"))
        inner = "" if compact else _INDENT * (depth + 1)
        for decl in node.declarations:
            lines.append(inner + render_declaration(decl, compact) + ";")
        for child in node.children:
            _render_node(child, depth + 1, compact, lines)
        lines.append(indent + "}")
    else:
        raise TypeError(f"Cannot render node of type {type(node).__name__}")
