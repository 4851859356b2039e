"""Tests for format recognition."""
import pytest

from seqindex.errors import UserError
from seqindex.formats import Format, is_description, is_sequence_end


def test_prefixes():
    assert Format.FASTA.description_prefix == ord(">")
    assert Format.FASTQ.description_prefix == ord("@")
    assert Format.FASTA.sequence_end_marker == ord(">")
    assert Format.FASTQ.sequence_end_marker == ord("+")


@pytest.mark.parametrize(
    "line,fmt,expected",
    [
        (b">name", Format.FASTA, True),
        (b"@name", Format.FASTQ, True),
        (b"abcde", Format.FASTA, False),
        (b"@name", Format.FASTA, False),
        (b"", Format.FASTQ, False),
        (b"", Format.FASTA, False),
    ],
)
def test_is_description(line, fmt, expected):
    assert is_description(line, fmt) is expected


@pytest.mark.parametrize(
    "line,fmt,expected",
    [
        (b">name", Format.FASTA, True),
        (b"+abcde", Format.FASTQ, True),
        (b"+\n", Format.FASTQ, True),
        (b"AAGGCTT", Format.FASTA, False),
        (b"@name", Format.FASTQ, False),
        (b"", Format.FASTQ, False),
    ],
)
def test_is_sequence_end(line, fmt, expected):
    assert is_sequence_end(line, fmt) is expected


def test_is_description_accepts_bytearray():
    assert is_description(bytearray(b">x\n"), Format.FASTA)


@pytest.mark.parametrize("value,expected", [("fasta", Format.FASTA), ("FASTQ", Format.FASTQ)])
def test_parse(value, expected):
    assert Format.parse(value) is expected


def test_parse_unknown():
    with pytest.raises(UserError):
        Format.parse("genbank")
