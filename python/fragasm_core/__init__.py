"""Core utilities for the fragasm greedy assembler."""

from .sequence import (
    ALPHABET,
    InvalidSymbol,
    Sequence,
)
from .overlap import (
    overlap_matrix,
    best_pair,
    overlaps_to_sparse,
)
from .assembler import (
    Assembler,
    MergeCandidate,
)
from .io import (
    infer_format,
    load_fragments,
    write_contigs,
)

__all__ = [
    "ALPHABET",
    "InvalidSymbol",
    "Sequence",
    "overlap_matrix",
    "best_pair",
    "overlaps_to_sparse",
    "Assembler",
    "MergeCandidate",
    "infer_format",
    "load_fragments",
    "write_contigs",
]
