"""Biopython helpers for reading fragments and writing contigs."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable, List, Optional, Union

from Bio import SeqIO

from .sequence import Sequence

_SUFFIX_FORMATS = {
    ".fa": "fasta",
    ".fasta": "fasta",
    ".fna": "fasta",
    ".fq": "fastq",
    ".fastq": "fastq",
}


def infer_format(path: Union[str, Path]) -> str:
    suffix = Path(path).suffix.lower()
    try:
        return _SUFFIX_FORMATS[suffix]
    except KeyError:
        raise ValueError(
            f"Cannot infer sequence format from {str(path)!r}; pass fmt explicitly"
        ) from None


def load_fragments(path: Union[str, Path], fmt: Optional[str] = None) -> List[Sequence]:
    """Parse every record in ``path`` into a validated :class:`Sequence`.

    Bases are upper-cased before validation, so soft-masked input is accepted
    but any ambiguity code (``N`` and friends) raises ``InvalidSymbol``.
    """

    fmt = fmt or infer_format(path)
    return [Sequence.from_record(record) for record in SeqIO.parse(str(path), fmt)]


def write_contigs(
    fragments: Iterable[Sequence],
    handle: Union[str, Path, IO[str]],
    *,
    prefix: str = "contig",
) -> int:
    """Write fragments as FASTA records ``{prefix}_1`` .. ``{prefix}_n``."""

    records = [
        fragment.to_record(f"{prefix}_{idx}", description=f"length={len(fragment)}")
        for idx, fragment in enumerate(fragments, start=1)
    ]
    if isinstance(handle, Path):
        handle = str(handle)
    return SeqIO.write(records, handle, "fasta")
