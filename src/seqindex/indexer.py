"""Single-pass FASTA/FASTQ indexer (faidx-style)."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

from .errors import EndOfFile, InputError, TypeConversionError
from .formats import Format, is_description, is_sequence_end
from .lines import count_bases, parse_sequence_name, read_line
from .record import IndexRecord, Records


logger = logging.getLogger(__name__)


class Indexer:
    """Build index records from a FASTA or FASTQ stream.

    Every call to :meth:`read` walks one entry through four phases:
    description, sequence, plus line and quality (the last two only for
    FASTQ). The stream is read strictly forward; the only state kept between
    calls is the header line that closed the previous sequence block.

    The first empty read is tolerated so that the last entry of a file,
    which has no following header, can be closed out. A second empty read
    raises :class:`EndOfFile`.
    """

    def __init__(self, stream: BinaryIO, fmt: Format = Format.FASTA) -> None:
        self.stream = stream
        self.format = fmt
        self.buffer = bytearray()
        self.sequence_num_bytes = 0
        self.eof_seen = False

    @classmethod
    def from_path(cls, path: str | Path, fmt: Format = Format.FASTA) -> "Indexer":
        return cls(open(path, "rb"), fmt)

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "Indexer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __iter__(self) -> Records:
        return Records(self)

    def iter(self) -> Records:
        return Records(self)

    def read(self, record: IndexRecord) -> None:
        """Fill ``record`` with the next entry or raise :class:`EndOfFile`."""

        self._read_description(record)
        self._read_sequence(record)
        self._read_plus(record)
        self._read_quality()
        logger.debug(
            "indexed %s length=%d offset=%d", record.name, record.length, record.offset
        )

    def _read_description(self, record: IndexRecord) -> None:
        if not self.buffer:
            self._read_line()
            if not self.buffer:
                # Nothing after the previous entry (or an empty file).
                raise EndOfFile()
        record.name = _get_name(bytes(self.buffer), self.format)
        record.offset = self.stream.tell()
        self.buffer.clear()

    def _read_sequence(self, record: IndexRecord) -> None:
        self.sequence_num_bytes = 0
        while not (is_sequence_end(self.buffer, self.format) or self.eof_seen):
            self._read_sequence_line(record)

    def _read_sequence_line(self, record: IndexRecord) -> None:
        self.buffer.clear()
        num_bytes = self._read_line()
        if is_sequence_end(self.buffer, self.format):
            return
        if record.line_width == 0:
            record.line_width = num_bytes
            record.line_bases = count_bases(self.buffer)
        elif record.line_width < num_bytes:
            raise InputError(
                f"invalid record {record.name!r}: line of {num_bytes} bytes "
                f"exceeds line width {record.line_width}"
            )
        self.sequence_num_bytes += num_bytes
        record.length += count_bases(self.buffer)

    def _read_plus(self, record: IndexRecord) -> None:
        if self.format is Format.FASTA:
            return
        record.qual_offset = self.stream.tell()
        self.buffer.clear()

    def _read_quality(self) -> None:
        if self.format is Format.FASTA:
            return
        # Quality lines mirror the sequence lines byte for byte.
        self.stream.seek(self.sequence_num_bytes, os.SEEK_CUR)
        self._read_line()

    def _read_line(self) -> int:
        try:
            return read_line(self.stream, self.buffer)
        except EndOfFile:
            if self.eof_seen:
                raise
            self.eof_seen = True
            return 0


def _get_name(description: bytes, fmt: Format) -> str:
    if not is_description(description, fmt):
        raise InputError("invalid input format: expected a description line")
    try:
        text = description[1:].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TypeConversionError(f"invalid sequence name: {exc}") from exc
    name = parse_sequence_name(text)
    if not name:
        raise InputError("invalid input format: empty sequence name")
    return name
