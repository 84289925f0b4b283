"""Lexical token type produced by the CSS tokenizer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Token:
    """A single lexical token.

    ``value`` is the token's source text, so joining the values of a run of
    tokens reproduces that stretch of the stylesheet (with comments removed
    and whitespace collapsed).
    """

    kind: str
    value: str
    position: int
    line: int = 1
    column: int = 1


SINGLE_CHAR_TOKENS = {
    "{": "LBRACE",
    "}": "RBRACE",
    "(": "LPAREN",
    ")": "RPAREN",
    "[": "LBRACKET",
    "]": "RBRACKET",
    ":": "COLON",
    ";": "SEMICOLON",
    ",": "COMMA",
}

# Token kinds that open/close a nesting level inside preludes and values.
OPENERS = {"LPAREN": "RPAREN", "LBRACKET": "RBRACKET"}
CLOSERS = {"RPAREN", "RBRACKET"}
