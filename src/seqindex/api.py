"""Entry points used by the command line to build an index file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set

from .errors import EndOfFile
from .formats import Format
from .indexer import Indexer
from .record import IndexRecord
from .writer import Writer


logger = logging.getLogger(__name__)

FAI_SUFFIX = ".fai"


@dataclass
class IndexSummary:
    """Outcome of indexing one file."""

    source: Path
    output: Path
    records_written: int = 0
    duplicates: List[str] = field(default_factory=list)


def output_name(path: str | Path) -> Path:
    """Index path for a sequence file: the input path with ``.fai`` appended."""

    return Path(f"{path}{FAI_SUFFIX}")


def build_indexer(path: str | Path, fmt: Format = Format.FASTA) -> Indexer:
    return Indexer.from_path(path, fmt)


def next_record(indexer: Indexer) -> Optional[IndexRecord]:
    """Pull one record, or ``None`` once the input is exhausted."""

    record = IndexRecord()
    try:
        indexer.read(record)
    except EndOfFile:
        return None
    return record


def open_writer(path: str | Path) -> Writer:
    return Writer.from_path(path)


def write(writer: Writer, record: IndexRecord) -> None:
    writer.write(record)


def index_file(
    path: str | Path,
    fmt: Format = Format.FASTA,
    output: str | Path | None = None,
) -> IndexSummary:
    """Index ``path`` and write the result next to it (or to ``output``).

    The first record seen for a name wins; later records with the same name
    are reported and skipped. Any error stops the build and leaves whatever
    was already written on disk.
    """

    source = Path(path)
    summary = IndexSummary(
        source=source,
        output=Path(output) if output is not None else output_name(source),
    )
    logger.info("Indexing %s as %s -> %s", source, fmt.value, summary.output)

    names: Set[str] = set()
    with build_indexer(source, fmt) as indexer, open_writer(summary.output) as writer:
        for record in indexer:
            if record.name in names:
                logger.warning("duplicate entry: %s, skipping", record.name)
                summary.duplicates.append(record.name)
                continue
            write(writer, record)
            names.add(record.name)
            summary.records_written += 1

    logger.info(
        "Wrote %d records to %s (%d duplicates skipped)",
        summary.records_written,
        summary.output,
        len(summary.duplicates),
    )
    return summary
