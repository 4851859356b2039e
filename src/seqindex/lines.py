"""Line-level primitives shared by the indexer."""

from __future__ import annotations

from typing import BinaryIO

from .errors import EndOfFile


NEWLINE = b"\n"


def read_line(stream: BinaryIO, buffer: bytearray) -> int:
    """Read one line from ``stream`` and append it to ``buffer``.

    The line terminator is kept. Returns the number of bytes appended and
    raises :class:`EndOfFile` when the stream has nothing left to give.
    """

    line = stream.readline()
    if not line:
        raise EndOfFile()
    buffer.extend(line)
    return len(line)


def count_bases(line: bytes) -> int:
    """Count the bytes of a line that are not leading or trailing whitespace."""

    return len(line.strip())


def parse_sequence_name(text: str) -> str:
    """Return the part of a description up to the first whitespace."""

    parts = text.strip().split(None, 1)
    if not parts:
        return ""
    return parts[0]
