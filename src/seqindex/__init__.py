"""faidx-style indexing for FASTA and FASTQ files."""

from .api import IndexSummary, build_indexer, index_file, next_record, open_writer, output_name, write
from .errors import EndOfFile, ErrorKind, InputError, SeqIndexError, TypeConversionError, UserError
from .formats import Format
from .indexer import Indexer
from .reader import Reader, read_index
from .record import IndexRecord, Records
from .writer import Writer

__all__ = [
    "IndexSummary",
    "build_indexer",
    "index_file",
    "next_record",
    "open_writer",
    "output_name",
    "write",
    "EndOfFile",
    "ErrorKind",
    "InputError",
    "SeqIndexError",
    "TypeConversionError",
    "UserError",
    "Format",
    "Indexer",
    "Reader",
    "read_index",
    "IndexRecord",
    "Records",
    "Writer",
]
