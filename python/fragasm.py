"""Command line entrypoint for the fragasm greedy assembler."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from Bio import SeqIO
from fastDamerauLevenshtein import damerauLevenshtein as damerau_levenshtein_distance

from fragasm_core import Assembler, load_fragments, write_contigs


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the greedy fragment assembler")
    parser.add_argument("reads", type=Path, help="FASTA or FASTQ file of fragments")
    parser.add_argument(
        "--format",
        choices=("fasta", "fastq"),
        help="Input format (inferred from the file suffix when omitted)",
    )
    parser.add_argument(
        "--output-fasta",
        type=Path,
        help="Optional output FASTA path for the assembled fragments",
    )
    parser.add_argument(
        "--reference",
        type=Path,
        help="Reference FASTA used to score the reconstruction",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def load_reference(reference_path: Path | None) -> str | None:
    if reference_path is None:
        return None
    record = next(SeqIO.parse(str(reference_path), "fasta"), None)
    return str(record.seq).upper() if record is not None else None


def assemble(args: argparse.Namespace) -> int:
    reads = load_fragments(args.reads, args.format)
    if not reads:
        raise RuntimeError(f"No reads were parsed from {args.reads}")

    reference = load_reference(args.reference)

    assembler = Assembler(reads)
    start = time.time()
    merges = assembler.assemble_all()
    assembly_time = time.time() - start

    contigs = sorted(assembler.fragments, key=len, reverse=True)
    longest = contigs[0]

    if args.output_fasta is not None:
        args.output_fasta.parent.mkdir(parents=True, exist_ok=True)
        write_contigs(contigs, args.output_fasta)

    print("fragasm assembly complete")
    print(f"Reads processed       : {len(reads)}")
    print(f"Merges performed      : {merges}")
    print(f"Fragments remaining   : {len(contigs)}")
    print(f"Longest contig length : {len(longest)}")
    print(f"Assembly time         : {assembly_time:.3f}s")
    if reference is not None:
        edit_distance = damerau_levenshtein_distance(
            str(longest), reference, similarity=False
        )
        print(f"Edit distance to ref  : {int(edit_distance)}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return assemble(args)
    except (OSError, ValueError, RuntimeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
