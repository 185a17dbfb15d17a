"""Greedy maximum-overlap assembly of nucleotide fragments."""

from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Optional, Tuple, Union

from .overlap import best_pair, overlap_matrix
from .sequence import Sequence

logger = logging.getLogger(__name__)


class MergeCandidate(NamedTuple):
    left: int
    right: int
    overlap: int


def _as_sequence(fragment: Union[Sequence, str]) -> Sequence:
    if isinstance(fragment, Sequence):
        return fragment
    return Sequence(fragment)


class Assembler:
    """Owns a working set of fragments and folds them together greedily.

    The working set is copied from the caller on construction and is only
    ever changed by :meth:`assemble_once`. Reads go through
    :attr:`fragments`, which hands back a tuple snapshot.
    """

    def __init__(self, fragments: Iterable[Union[Sequence, str]]) -> None:
        if isinstance(fragments, (str, Sequence)):
            raise TypeError(
                "Assembler expects a collection of fragments, not a single "
                f"{type(fragments).__name__}"
            )
        self._fragments: List[Sequence] = [_as_sequence(f) for f in fragments]

    @property
    def fragments(self) -> Tuple[Sequence, ...]:
        return tuple(self._fragments)

    @property
    def contig(self) -> Optional[Sequence]:
        """The assembled fragment once the working set has collapsed to one."""

        if len(self._fragments) == 1:
            return self._fragments[0]
        return None

    def __len__(self) -> int:
        return len(self._fragments)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[str(f) for f in self._fragments]!r})"

    def find_best_merge(self) -> Optional[MergeCandidate]:
        """Return the pair :meth:`assemble_once` would merge, without merging."""

        matrix = overlap_matrix(self._fragments)
        lengths = [len(f) for f in self._fragments]
        pair = best_pair(matrix, lengths)
        if pair is None:
            return None
        return MergeCandidate(*pair)

    def assemble_once(self) -> bool:
        """Merge the best-overlapping pair; return ``False`` if none overlaps.

        Ties on overlap go to the pair with the shorter merged result, then to
        the lowest ``(left, right)`` positions.
        """

        candidate = self.find_best_merge()
        if candidate is None:
            return False

        left = self._fragments[candidate.left]
        right = self._fragments[candidate.right]
        merged = left.merged_with(right)
        logger.debug(
            "Merging fragment %d (len %d) with fragment %d (len %d): overlap=%d, merged len=%d",
            candidate.left,
            len(left),
            candidate.right,
            len(right),
            candidate.overlap,
            len(merged),
        )

        consumed = {candidate.left, candidate.right}
        self._fragments = [
            fragment
            for idx, fragment in enumerate(self._fragments)
            if idx not in consumed
        ]
        self._fragments.append(merged)
        return True

    def assemble_all(self) -> int:
        """Merge until one fragment remains or nothing overlaps.

        Returns the number of merges performed, so a call on an already
        terminal assembler returns 0 and changes nothing.
        """

        merges = 0
        while len(self._fragments) > 1:
            if not self.assemble_once():
                break
            merges += 1
        logger.info(
            "Assembly finished after %d merge(s); %d fragment(s) remain",
            merges,
            len(self._fragments),
        )
        return merges
