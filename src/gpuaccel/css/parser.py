"""Recursive-descent parser turning CSS tokens into a Stylesheet tree.

Supported structure:
    .a, .b:hover { color: red; transition: opacity 1s !important }
    @media (max-width: 600px) { .a { color: blue; } }
    @keyframes spin { from { ... } to { ... } }
    @font-face { font-family: Foo; src: url(foo.woff2); }
    @import url(base.css);
"""

from __future__ import annotations

import logging
import re

from gpuaccel.css.errors import ParseError
from gpuaccel.css.lexer import tokenize
from gpuaccel.css.model import (
    AtRuleBlock,
    AtRuleStatement,
    Declaration,
    Node,
    RuleBlock,
    Stylesheet,
)
from gpuaccel.css.tokens import CLOSERS, OPENERS, Token

__all__ = [
    "parse",
    "parse_stylesheet",
    "split_selectors",
    "RULE_LIST_AT_RULES",
    "DECLARATION_AT_RULES",
    "STATEMENT_AT_RULES",
    "MAX_NESTING_DEPTH",
]

logger = logging.getLogger(__name__)

# At-rules whose block holds further rules.
RULE_LIST_AT_RULES = frozenset(
    {
        "media",
        "supports",
        "document",
        "container",
        "layer",
        "scope",
        "starting-style",
        "keyframes",
    }
)

# At-rules whose block holds declarations.
DECLARATION_AT_RULES = frozenset(
    {
        "font-face",
        "page",
        "property",
        "counter-style",
        "viewport",
        "font-palette-values",
    }
)

# At-rules terminated by a semicolon instead of a block.
STATEMENT_AT_RULES = frozenset({"import", "charset", "namespace", "layer"})

_VENDOR_PREFIX_RE = re.compile(r"^-[a-z0-9]+-")

# Rule-list at-rules may nest at most this deep.
MAX_NESTING_DEPTH = 256


def parse(tokens: list[Token]) -> Stylesheet:
    """Build a Stylesheet from a token list ending in ``EOF``."""
    return Stylesheet(nodes=_Parser(tokens).parse_rule_list())


def parse_stylesheet(source: str) -> Stylesheet:
    """Tokenize and parse CSS *source* in one step."""
    return parse(tokenize(source))


def split_selectors(tokens: list[Token]) -> list[str]:
    """Split a selector prelude on top-level commas.

    Commas nested in parentheses or attribute brackets do not split.
    Segments are whitespace-trimmed and empty segments dropped.
    """
    segments: list[list[Token]] = [[]]
    depth = 0
    for tok in tokens:
        if tok.kind in OPENERS:
            depth += 1
        elif tok.kind in CLOSERS and depth > 0:
            depth -= 1
        if tok.kind == "COMMA" and depth == 0:
            segments.append([])
            continue
        segments[-1].append(tok)
    return [text for text in (_text(seg) for seg in segments) if text]


def _text(tokens: list[Token]) -> str:
    return "".join(tok.value for tok in tokens).strip()


def _base_name(name: str) -> str:
    """Lower-case at-rule name with any vendor prefix removed."""
    return _VENDOR_PREFIX_RE.sub("", name.lower())


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or tokens[-1].kind != "EOF":
            raise ParseError("Token stream must end with EOF")
        self._tokens = tokens
        self._pos = 0
        self._depth = 0

    # ---- cursor ----

    def _peek(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        tok = self._tokens[self._pos]
        if tok.kind != "EOF":
            self._pos += 1
        return tok

    def _skip_whitespace(self) -> None:
        while self._peek().kind == "WHITESPACE":
            self._pos += 1

    @staticmethod
    def _error(message: str, tok: Token) -> ParseError:
        return ParseError(message, tok.line, tok.column)

    # ---- structure ----

    def parse_rule_list(self, opener: Token | None = None) -> list[Node]:
        """Parse nodes until EOF (top level) or the ``}`` closing *opener*."""
        nodes: list[Node] = []
        while True:
            self._skip_whitespace()
            tok = self._peek()
            if tok.kind == "EOF":
                if opener is not None:
                    raise self._error("Missing closing brace for block", opener)
                return nodes
            if tok.kind == "RBRACE":
                if opener is None:
                    raise self._error("Unmatched closing brace", tok)
                self._advance()
                return nodes
            if tok.kind == "SEMICOLON":
                self._advance()
                continue
            if tok.kind == "AT_KEYWORD":
                nodes.append(self._parse_at_rule())
            else:
                nodes.append(self._parse_rule_block())

    def _collect_prelude(self) -> list[Token]:
        """Collect tokens up to a top-level ``{``, ``;``, ``}`` or EOF."""
        collected: list[Token] = []
        open_groups: list[Token] = []
        while True:
            tok = self._peek()
            if tok.kind in ("EOF", "LBRACE", "RBRACE"):
                self._check_closed(open_groups, "prelude")
                return collected
            if tok.kind == "SEMICOLON" and not open_groups:
                return collected
            self._track_group(tok, open_groups)
            collected.append(self._advance())

    @staticmethod
    def _track_group(tok: Token, open_groups: list[Token]) -> None:
        if tok.kind in OPENERS:
            open_groups.append(tok)
        elif open_groups and tok.kind == OPENERS[open_groups[-1].kind]:
            open_groups.pop()

    def _check_closed(self, open_groups: list[Token], where: str) -> None:
        if open_groups:
            opener = open_groups[-1]
            raise self._error(f"Unclosed '{opener.value}' in {where}", opener)

    def _parse_at_rule(self) -> Node:
        keyword = self._advance()
        name = keyword.value[1:]
        base = _base_name(name)
        prelude = _text(self._collect_prelude())
        terminator = self._peek()

        known = base in RULE_LIST_AT_RULES or base in DECLARATION_AT_RULES
        if not known and base not in STATEMENT_AT_RULES:
            raise self._error(f"Unrecognized at-rule @{name}", keyword)

        if terminator.kind == "SEMICOLON":
            if base not in STATEMENT_AT_RULES:
                raise self._error(f"@{name} requires a block", terminator)
            self._advance()
            return AtRuleStatement(name=name, prelude=prelude)

        if terminator.kind != "LBRACE":
            raise self._error(f"Unterminated @{name} rule", keyword)
        if not known:
            raise self._error(f"@{name} does not take a block", terminator)

        self._advance()
        if base in RULE_LIST_AT_RULES:
            self._depth += 1
            if self._depth > MAX_NESTING_DEPTH:
                raise self._error(
                    f"At-rules nested deeper than {MAX_NESTING_DEPTH} levels", keyword
                )
            children = self.parse_rule_list(opener=terminator)
            self._depth -= 1
            return AtRuleBlock(name=name, prelude=prelude, children=children)
        declarations = self._parse_declarations(opener=terminator)
        return AtRuleBlock(name=name, prelude=prelude, declarations=declarations)

    def _parse_rule_block(self) -> RuleBlock:
        start = self._peek()
        prelude = self._collect_prelude()
        opener = self._peek()
        if opener.kind != "LBRACE":
            raise self._error("Expected '{' after selector", opener)
        selectors = split_selectors(prelude)
        if not selectors:
            raise self._error("Rule block has no selector", start)
        self._advance()
        declarations = self._parse_declarations(opener=opener)
        return RuleBlock(selectors=selectors, declarations=declarations)

    # ---- declarations ----

    def _parse_declarations(self, opener: Token) -> list[Declaration]:
        declarations: list[Declaration] = []
        while True:
            self._skip_whitespace()
            tok = self._peek()
            if tok.kind == "EOF":
                raise self._error("Missing closing brace for block", opener)
            if tok.kind == "RBRACE":
                self._advance()
                return declarations
            if tok.kind == "SEMICOLON":
                self._advance()
                continue
            if tok.kind != "IDENT":
                raise self._error(
                    f"Expected a property name, found {tok.value!r}", tok
                )

            prop = self._advance().value
            self._skip_whitespace()
            colon = self._peek()
            if colon.kind != "COLON":
                raise self._error(f"Expected ':' after property {prop!r}", colon)
            self._advance()

            value_tokens = self._collect_value(prop)
            if self._peek().kind == "SEMICOLON":
                self._advance()

            value, important = _split_important(value_tokens)
            if not value:
                logger.debug(
                    "Dropping empty declaration %r at line %d", prop, tok.line
                )
                continue
            declarations.append(Declaration(prop, value, important))

    def _collect_value(self, prop: str) -> list[Token]:
        collected: list[Token] = []
        open_groups: list[Token] = []
        while True:
            tok = self._peek()
            if tok.kind in ("EOF", "RBRACE"):
                self._check_closed(open_groups, f"value of {prop!r}")
                return collected
            if tok.kind == "SEMICOLON" and not open_groups:
                return collected
            if tok.kind == "LBRACE":
                raise self._error(f"Unexpected '{{' in value of {prop!r}", tok)
            self._track_group(tok, open_groups)
            collected.append(self._advance())


def _split_important(tokens: list[Token]) -> tuple[str, bool]:
    """Strip a trailing ``!important`` from value tokens."""
    tokens = _strip_whitespace(tokens)
    if tokens and tokens[-1].kind == "IDENT" and tokens[-1].value.lower() == "important":
        rest = _strip_whitespace(tokens[:-1])
        if rest and rest[-1].kind == "DELIM" and rest[-1].value == "!":
            return _text(rest[:-1]), True
    return _text(tokens), False


def _strip_whitespace(tokens: list[Token]) -> list[Token]:
    start, end = 0, len(tokens)
    while start < end and tokens[start].kind == "WHITESPACE":
        start += 1
    while end > start and tokens[end - 1].kind == "WHITESPACE":
        end -= 1
    return tokens[start:end]
