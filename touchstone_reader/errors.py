"""Exception hierarchy for Touchstone parsing and queries."""

from __future__ import annotations

from typing import Optional


class TouchstoneError(Exception):
    """Base class for every error raised by touchstone_reader."""


class FileError(TouchstoneError, OSError):
    """The underlying file could not be opened or read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read Touchstone file {path!r}: {reason}")
        self.path = path
        self.reason = reason


class ParseError(TouchstoneError, ValueError):
    """Grammar violation in the option line or a data line."""

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        text: Optional[str] = None,
    ) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        if text is not None:
            message = f"{message} [{text.strip()}]"
        super().__init__(message)
        self.line_number = line_number
        self.text = text


class MissingOptionLine(ParseError):
    pass


class MalformedOptionToken(ParseError):
    def __init__(
        self,
        token: str,
        position: int,
        line_number: Optional[int] = None,
        text: Optional[str] = None,
        detail: str = "unrecognized option token",
    ) -> None:
        super().__init__(f"{detail} {token!r} at position {position}", line_number, text)
        self.token = token
        self.position = position


class MalformedDataLine(ParseError):
    pass


class InvalidNumericToken(ParseError):
    def __init__(
        self,
        token: str,
        column: int,
        line_number: Optional[int] = None,
        text: Optional[str] = None,
    ) -> None:
        super().__init__(f"invalid numeric token {token!r} at column {column}", line_number, text)
        self.token = token
        self.column = column


class QueryError(TouchstoneError):
    """Misuse of the read accessors; never changes the loaded dataset."""


class IndexOutOfRange(QueryError, IndexError):
    pass


class ParamOutOfRange(QueryError, IndexError):
    pass


class EmptyDataset(QueryError, ValueError):
    pass


class InconsistentPairCount(QueryError, ValueError):
    """Pair counts do not fit the requested array shape."""
