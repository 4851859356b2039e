"""Command line for building sequence indexes."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .api import index_file
from .errors import SeqIndexError, UserError, error_kind
from .formats import Format


logger = logging.getLogger(__name__)

FAIDX = "faidx"


@dataclass(frozen=True)
class FaidxOptions:
    file: Path
    format: Format = Format.FASTA
    output: Optional[Path] = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "FaidxOptions":
        fmt = Format.FASTQ if args.fastq else Format.parse(args.format)
        return cls(
            file=Path(args.file),
            format=fmt,
            output=Path(args.output) if args.output else None,
        )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seqindex",
        description="Build samtools-compatible indexes for FASTA/FASTQ files.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    faidx = subparsers.add_parser(FAIDX, help="Write FILE.fai for a FASTA or FASTQ file.")
    faidx.add_argument("file", type=str, help="Path to the FASTA/FASTQ file.")
    fmt_group = faidx.add_mutually_exclusive_group()
    fmt_group.add_argument("--fastq", action="store_true", help="Index the input as FASTQ.")
    fmt_group.add_argument(
        "--format",
        type=str,
        default=Format.FASTA.value,
        choices=[fmt.value for fmt in Format],
        help="Input format (default: fasta).",
    )
    faidx.add_argument("-o", "--output", type=str, default=None, help="Index path [FILE.fai].")
    return parser


def run_faidx(options: FaidxOptions) -> int:
    if not options.file.is_file():
        raise UserError(f"input file not found: {options.file}")
    index_file(options.file, options.format, options.output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        if args.command == FAIDX:
            return run_faidx(FaidxOptions.from_args(args))
        raise UserError(f"unrecognized command {args.command}")
    except (SeqIndexError, OSError) as exc:
        logger.error("kind: %s, message: %s", error_kind(exc).value, getattr(exc, "message", exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
