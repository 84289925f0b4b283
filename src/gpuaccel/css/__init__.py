from gpuaccel.css.errors import CSSError, LexError, ParseError
from gpuaccel.css.lexer import tokenize
from gpuaccel.css.model import (
    AtRuleBlock,
    AtRuleStatement,
    Declaration,
    Node,
    RuleBlock,
    Stylesheet,
)
from gpuaccel.css.parser import parse, parse_stylesheet
from gpuaccel.css.serializer import render
from gpuaccel.css.tokens import Token

__all__ = [
    "AtRuleBlock",
    "AtRuleStatement",
    "CSSError",
    "Declaration",
    "LexError",
    "Node",
    "ParseError",
    "RuleBlock",
    "Stylesheet",
    "Token",
    "parse",
    "parse_stylesheet",
    "render",
    "tokenize",
]
