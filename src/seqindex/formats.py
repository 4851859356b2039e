"""Input formats understood by the indexer."""

from __future__ import annotations

from enum import Enum

from .errors import UserError


class Format(Enum):
    FASTA = "fasta"
    FASTQ = "fastq"

    @property
    def description_prefix(self) -> int:
        """First byte of a description (header) line."""
        return ord(">") if self is Format.FASTA else ord("@")

    @property
    def sequence_end_marker(self) -> int:
        """First byte of the line that closes a sequence block."""
        if self is Format.FASTA:
            return self.description_prefix
        return ord("+")

    @classmethod
    def parse(cls, value: str) -> "Format":
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(fmt.value for fmt in cls)
            raise UserError(f"unknown format {value!r} (expected one of: {choices})") from None


def is_description(line: bytes, fmt: Format) -> bool:
    return len(line) > 0 and line[0] == fmt.description_prefix


def is_sequence_end(line: bytes, fmt: Format) -> bool:
    return len(line) > 0 and line[0] == fmt.sequence_end_marker
