"""Stylesheet tree: Declaration, RuleBlock, AtRuleBlock, AtRuleStatement, Stylesheet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair, optionally ``!important``."""

    property: str
    value: str
    important: bool = False

    def __str__(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.property}: {self.value}{suffix}"


@dataclass
class RuleBlock:
    """A selector list sharing one block of declarations."""

    selectors: list[str]
    declarations: list[Declaration] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.selectors:
            raise ValueError("RuleBlock must have at least one selector")

    @property
    def properties(self) -> list[str]:
        """Property names in declaration order, duplicates included."""
        return [decl.property for decl in self.declarations]


@dataclass
class AtRuleBlock:
    """An at-rule with a ``{ ... }`` body.

    Rule-list at-rules (``@media``, ``@keyframes``, ...) keep their nested
    nodes in ``children``; declaration at-rules (``@font-face``, ``@page``)
    keep their body in ``declarations``.
    """

    name: str
    prelude: str = ""
    children: list[Node] = field(default_factory=list)
    declarations: list[Declaration] = field(default_factory=list)


@dataclass
class AtRuleStatement:
    """A block-less at-rule such as ``@import url(a.css);``."""

    name: str
    prelude: str = ""


Node = Union[AtRuleBlock, AtRuleStatement, RuleBlock]


@dataclass
class Stylesheet:
    """The parsed stylesheet: top-level nodes in source order."""

    nodes: list[Node] = field(default_factory=list)

    def iter_rules(self) -> Iterator[RuleBlock]:
        """Yield every RuleBlock at any nesting depth, in document order."""
        for _, rule in self.walk():
            yield rule

    def walk(self) -> Iterator[tuple[tuple[AtRuleBlock, ...], RuleBlock]]:
        """Yield ``(enclosing at-rules, rule)`` pairs in document order."""
        yield from _walk(self.nodes, ())


def _walk(
    nodes: list[Node], parents: tuple[AtRuleBlock, ...]
) -> Iterator[tuple[tuple[AtRuleBlock, ...], RuleBlock]]:
    for node in nodes:
        if isinstance(node, RuleBlock):
            yield parents, node
        elif isinstance(node, AtRuleBlock):
            yield from _walk(node.children, parents + (node,))
