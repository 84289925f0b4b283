"""CSS engine error types."""


class CSSError(Exception):
    """Base class for errors raised while reading CSS source."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class LexError(CSSError):
    """Raised when CSS source contains a malformed token."""


class ParseError(CSSError):
    """Raised when the token stream does not form a valid stylesheet."""
