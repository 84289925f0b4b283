"""Hand-written CSS tokenizer.

Produces a flat list of :class:`Token` objects terminated by an ``EOF``
token.  Comments are dropped and runs of whitespace collapse into a single
``WHITESPACE`` token whose value is one space.
"""

from __future__ import annotations

from bisect import bisect_right

from gpuaccel.css.errors import LexError
from gpuaccel.css.tokens import SINGLE_CHAR_TOKENS, Token

__all__ = ["tokenize"]

_WHITESPACE = " \t\n\r\f"

# Tokens that absorb a directly following name character.
_WORD_KINDS = frozenset(
    {"IDENT", "AT_KEYWORD", "HASH", "NUMBER", "PERCENTAGE", "DIMENSION"}
)


def tokenize(source: str) -> list[Token]:
    """Convert CSS *source* into tokens.

    Raises :class:`LexError` on an unterminated string, comment or ``url(``.
    """
    line_starts = [0] + [i + 1 for i, char in enumerate(source) if char == "\n"]

    def locate(position: int) -> tuple[int, int]:
        line = bisect_right(line_starts, position)
        return line, position - line_starts[line - 1] + 1

    tokens: list[Token] = []

    def emit(kind: str, value: str, position: int) -> None:
        line, column = locate(position)
        tokens.append(Token(kind, value, position, line, column))

    index = 0
    length = len(source)

    while index < length:
        char = source[index]

        if char in _WHITESPACE:
            start = index
            while index < length and source[index] in _WHITESPACE:
                index += 1
            if not tokens or tokens[-1].kind != "WHITESPACE":
                emit("WHITESPACE", " ", start)
            continue

        if source.startswith("/*", index):
            end = source.find("*/", index + 2)
            if end == -1:
                raise LexError("Unterminated comment", *locate(index))
            start, index = index, end + 2
            if tokens and _would_join(tokens[-1], source, index):
                emit("WHITESPACE", " ", start)
            continue

        if char in "\"'":
            end = _read_string(source, index, locate)
            emit("STRING", source[index:end], index)
            index = end
            continue

        if _starts_number(source, index):
            kind, end = _read_number(source, index)
            emit(kind, source[index:end], index)
            index = end
            continue

        if _starts_ident(source, index):
            end = _read_name(source, index)
            name = source[index:end]
            if name.lower() == "url" and end < length and source[end] == "(":
                url_end = _read_url(source, end + 1, locate)
                if url_end is not None:
                    emit("URL", source[index:url_end], index)
                    index = url_end
                    continue
            emit("IDENT", name, index)
            index = end
            continue

        if char == "@" and _starts_ident(source, index + 1):
            end = _read_name(source, index + 1)
            emit("AT_KEYWORD", source[index:end], index)
            index = end
            continue

        if char == "#" and _is_name_at(source, index + 1):
            end = _read_name(source, index + 1)
            emit("HASH", source[index:end], index)
            index = end
            continue

        kind = SINGLE_CHAR_TOKENS.get(char, "DELIM")
        emit(kind, char, index)
        index += 1

    emit("EOF", "", length)
    return tokens


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------


def _is_name_start(char: str) -> bool:
    return char.isalpha() or char == "_" or ord(char) > 0x7F


def _is_name_char(char: str) -> bool:
    return _is_name_start(char) or char.isdigit() or char == "-"


def _is_escape_at(source: str, index: int) -> bool:
    return (
        index + 1 < len(source)
        and source[index] == "\\"
        and source[index + 1] != "\n"
    )


def _is_name_at(source: str, index: int) -> bool:
    if index >= len(source):
        return False
    return _is_name_char(source[index]) or _is_escape_at(source, index)


def _starts_ident(source: str, index: int) -> bool:
    if index >= len(source):
        return False
    char = source[index]
    if _is_name_start(char) or _is_escape_at(source, index):
        return True
    if char == "-" and index + 1 < len(source):
        following = source[index + 1]
        return (
            _is_name_start(following)
            or following == "-"
            or _is_escape_at(source, index + 1)
        )
    return False


def _starts_number(source: str, index: int) -> bool:
    def digit_at(i: int) -> bool:
        return i < len(source) and source[i].isdigit()

    char = source[index]
    if char.isdigit():
        return True
    if char == ".":
        return digit_at(index + 1)
    if char in "+-":
        if digit_at(index + 1):
            return True
        return index + 1 < len(source) and source[index + 1] == "." and digit_at(index + 2)
    return False


def _would_join(previous: Token, source: str, index: int) -> bool:
    """True if the text at *index* would merge into *previous* when written
    right after it, as happens once a comment between them is dropped.

    ``1px/**/2px`` and ``div/**/p`` need a separator; ``a/**/:hover`` and
    ``a/**/.b`` do not.
    """
    if index >= len(source):
        return False
    char = source[index]
    if previous.kind == "NUMBER" and char in ".%":
        return True
    if previous.kind in _WORD_KINDS:
        return _is_name_char(char) or _is_escape_at(source, index)
    return False


# ---------------------------------------------------------------------------
# Readers: each returns the index just past what it consumed
# ---------------------------------------------------------------------------


def _read_name(source: str, index: int) -> int:
    while index < len(source):
        if _is_name_char(source[index]):
            index += 1
        elif _is_escape_at(source, index):
            index += 2
        else:
            break
    return index


def _read_digits(source: str, index: int) -> int:
    while index < len(source) and source[index].isdigit():
        index += 1
    return index


def _read_number(source: str, index: int) -> tuple[str, int]:
    length = len(source)
    if source[index] in "+-":
        index += 1
    index = _read_digits(source, index)
    if index + 1 < length and source[index] == "." and source[index + 1].isdigit():
        index = _read_digits(source, index + 1)
    if index < length and source[index] in "eE":
        exp = index + 1
        if exp < length and source[exp] in "+-":
            exp += 1
        if exp < length and source[exp].isdigit():
            index = _read_digits(source, exp)
    if index < length and source[index] == "%":
        return "PERCENTAGE", index + 1
    if _starts_ident(source, index):
        return "DIMENSION", _read_name(source, index)
    return "NUMBER", index


def _read_string(source: str, index: int, locate) -> int:
    quote = source[index]
    start = index
    index += 1
    while index < len(source):
        char = source[index]
        if char == quote:
            return index + 1
        if char == "\\":
            index += 2
            continue
        if char == "\n":
            break
        index += 1
    raise LexError("Unterminated string literal", *locate(start))


def _read_url(source: str, index: int, locate) -> int | None:
    """Read an unquoted ``url(...)`` body starting just after the paren.

    Returns ``None`` when the argument is quoted, in which case the caller
    emits a plain identifier and the string is tokenized normally.
    """
    start = index
    while index < len(source) and source[index] in _WHITESPACE:
        index += 1
    if index < len(source) and source[index] in "\"'":
        return None
    while index < len(source):
        char = source[index]
        if char == ")":
            return index + 1
        if char == "\\":
            index += 2
            continue
        index += 1
    raise LexError("Unterminated url(", *locate(start - 4))
