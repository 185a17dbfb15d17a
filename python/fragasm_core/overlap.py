"""Pairwise overlap matrices for the greedy assembler."""

from __future__ import annotations

from typing import Optional, Sequence as SequenceType, Tuple

import numpy as np
from scipy.sparse import coo_matrix

from .sequence import Sequence

MergePair = Tuple[int, int, int]  # (left_idx, right_idx, overlap)


def overlap_matrix(fragments: SequenceType[Sequence]) -> np.ndarray:
    """Return ``M`` with ``M[i, j]`` the overlap of fragment i onto fragment j.

    Only ordered pairs with ``i != j`` are evaluated; the diagonal stays 0 so a
    fragment can never be chosen as its own merge partner even though its
    self-overlap is its full length.
    """

    size = len(fragments)
    matrix = np.zeros((size, size), dtype=np.int64)
    for left_idx in range(size):
        left = fragments[left_idx]
        for right_idx in range(size):
            if right_idx == left_idx:
                continue
            matrix[left_idx, right_idx] = left.calculate_overlap(fragments[right_idx])
    return matrix


def best_pair(
    matrix: np.ndarray,
    lengths: SequenceType[int],
) -> Optional[MergePair]:
    """Pick the ordered pair to merge next, or ``None`` if nothing overlaps.

    The largest overlap wins. Among equal overlaps the smaller right operand
    wins, since it yields the shorter merged fragment. Any remaining tie goes
    to the lowest ``(i, j)`` in row-major order.
    """

    if matrix.shape[0] < 2:
        return None
    best = int(matrix.max())
    if best == 0:
        return None

    rows, cols = np.nonzero(matrix == best)
    right_lengths = np.asarray(lengths, dtype=np.int64)[cols]
    # argmin keeps the first minimum, and nonzero is row-major
    pick = int(np.argmin(right_lengths))
    return int(rows[pick]), int(cols[pick]), best


def overlaps_to_sparse(matrix: np.ndarray) -> coo_matrix:
    """Convert a dense overlap matrix into COO form, dropping zero overlaps."""

    return coo_matrix(np.asarray(matrix, dtype=np.int64))
