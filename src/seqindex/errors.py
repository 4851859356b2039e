"""Error types raised while building or reading sequence indexes."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INPUT = "Input"
    IO = "IO"
    TYPE_CONVERSION = "TypeConversion"
    EOF = "Eof"
    USER = "User"


class SeqIndexError(Exception):
    """Base error carrying an :class:`ErrorKind` and a short message."""

    kind = ErrorKind.INPUT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"kind: {self.kind.value}, message: {self.message}"


class InputError(SeqIndexError, ValueError):
    """Malformed record structure in a sequence or index file."""

    kind = ErrorKind.INPUT


class TypeConversionError(SeqIndexError, ValueError):
    """Bytes that could not be decoded as text where a name was expected."""

    kind = ErrorKind.TYPE_CONVERSION


class EndOfFile(SeqIndexError, EOFError):
    """No more records. Not a fault; iterators treat it as exhaustion."""

    kind = ErrorKind.EOF

    def __init__(self, message: str = "end of file") -> None:
        super().__init__(message)


class UserError(SeqIndexError):
    """Invalid argument supplied by the caller of the command line."""

    kind = ErrorKind.USER


def error_kind(exc: BaseException) -> ErrorKind:
    """Classify an exception raised while indexing."""

    if isinstance(exc, SeqIndexError):
        return exc.kind
    if isinstance(exc, OSError):
        return ErrorKind.IO
    if isinstance(exc, UnicodeError):
        return ErrorKind.TYPE_CONVERSION
    return ErrorKind.INPUT
