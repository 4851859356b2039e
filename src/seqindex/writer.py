"""Write index records in the ``.fai`` layout."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TextIO

from .errors import InputError
from .record import DELIMITER, IndexRecord


class Writer:
    """Append one tab-separated line per record.

    FASTA (5 field) and FASTQ (6 field) records may be mixed; each line
    carries its own shape.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.writer = csv.writer(
            stream,
            delimiter=DELIMITER,
            lineterminator="\n",
            quoting=csv.QUOTE_NONE,
            quotechar=None,
        )

    @classmethod
    def from_path(cls, path: str | Path) -> "Writer":
        return cls(open(path, "w", encoding="utf-8", newline=""))

    def write(self, record: IndexRecord) -> None:
        try:
            self.writer.writerow(record.to_fields())
        except csv.Error as exc:
            raise InputError(f"cannot write record {record.name!r}: {exc}") from exc

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "Writer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
