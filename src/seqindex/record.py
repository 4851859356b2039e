"""Index records in the samtools ``.fai`` layout.

Each record locates one sequence in its source file::

    name  length  offset  line_bases  line_width  [qual_offset]

FASTA entries carry five fields; FASTQ entries add the offset of the first
quality value as a sixth.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Protocol, Sequence

from .errors import EndOfFile, InputError


DELIMITER = "\t"
FASTA_WIDTH = 5
FASTQ_WIDTH = 6

_NUMERIC_FIELDS = ("length", "offset", "line_bases", "line_width", "qual_offset")


@dataclass
class IndexRecord:
    name: str = ""
    length: int = 0
    offset: int = 0
    line_bases: int = 0
    line_width: int = 0
    qual_offset: Optional[int] = None

    @property
    def is_fastq(self) -> bool:
        return self.qual_offset is not None

    def clear(self) -> None:
        """Reset every field so the record can be filled again."""

        self.name = ""
        self.length = 0
        self.offset = 0
        self.line_bases = 0
        self.line_width = 0
        self.qual_offset = None

    def to_fields(self) -> List[str]:
        fields = [
            self.name,
            str(self.length),
            str(self.offset),
            str(self.line_bases),
            str(self.line_width),
        ]
        if self.qual_offset is not None:
            fields.append(str(self.qual_offset))
        return fields

    def to_line(self) -> str:
        return DELIMITER.join(self.to_fields()) + "\n"

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "IndexRecord":
        """Decode a split ``.fai`` row.

        Raises :class:`InputError` unless there are exactly five or six
        fields, the name is non-empty and every numeric field is a
        non-negative integer.
        """

        if len(fields) not in (FASTA_WIDTH, FASTQ_WIDTH):
            raise InputError(f"invalid fai format: expected 5 or 6 fields, got {len(fields)}")
        if not fields[0].strip():
            raise InputError("invalid fai format: empty sequence name")

        values = {}
        for field_name, raw in zip(_NUMERIC_FIELDS, fields[1:]):
            values[field_name] = _parse_count(field_name, raw)
        return cls(name=fields[0], **values)

    @classmethod
    def from_line(cls, line: str) -> "IndexRecord":
        return cls.from_fields(line.rstrip("\r\n").split(DELIMITER))


def _parse_count(field_name: str, raw: str) -> int:
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        raise InputError(f"invalid value for {field_name}: {raw!r}")
    return int(text)


class ReadToFai(Protocol):
    """Anything that can fill an :class:`IndexRecord` one entry at a time."""

    def read(self, record: IndexRecord) -> None:
        ...


class Records:
    """Iterate over the records produced by a :class:`ReadToFai` source.

    A fresh record is yielded per step. :class:`EndOfFile` ends iteration;
    every other error propagates to the caller.
    """

    def __init__(self, source: ReadToFai) -> None:
        self.source = source

    def __iter__(self) -> Iterator[IndexRecord]:
        return self

    def __next__(self) -> IndexRecord:
        record = IndexRecord()
        try:
            self.source.read(record)
        except EndOfFile:
            raise StopIteration from None
        return record
