"""Read ``.fai`` index files back into records."""

from __future__ import annotations

from pathlib import Path
from typing import List, TextIO

from .errors import EndOfFile, InputError
from .record import IndexRecord, Records


class Reader:
    """Decode ``.fai`` rows one at a time.

    Blank lines are skipped. Each row must hold five or six fields; the
    reader does not require every row to have the same shape.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.line_num = 0

    @classmethod
    def from_path(cls, path: str | Path) -> "Reader":
        return cls(open(path, "r", encoding="utf-8", newline=""))

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "Reader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __iter__(self) -> Records:
        return Records(self)

    def iter(self) -> Records:
        return Records(self)

    def read(self, record: IndexRecord) -> None:
        """Replace the contents of ``record`` with the next row."""

        for line in self.stream:
            self.line_num += 1
            if not line.strip():
                continue
            try:
                decoded = IndexRecord.from_line(line)
            except InputError as exc:
                raise InputError(f"line {self.line_num}: {exc.message}") from None
            record.name = decoded.name
            record.length = decoded.length
            record.offset = decoded.offset
            record.line_bases = decoded.line_bases
            record.line_width = decoded.line_width
            record.qual_offset = decoded.qual_offset
            return
        raise EndOfFile()


def read_index(path: str | Path) -> List[IndexRecord]:
    """Load every record of an index file."""

    with Reader.from_path(path) as reader:
        return list(reader)
