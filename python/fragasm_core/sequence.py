"""Validated nucleotide fragments and suffix/prefix overlap arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

ALPHABET = "ACGT"
_ALPHABET_SET = frozenset(ALPHABET)


class InvalidSymbol(ValueError):
    """Raised when a fragment contains a character outside ``ALPHABET``."""

    def __init__(self, symbol: str, position: int) -> None:
        # args carry both fields so the exception survives pickling
        super().__init__(symbol, position)
        self.symbol = symbol
        self.position = position

    def __str__(self) -> str:
        return f"Invalid character in sequence: {self.symbol!r} at position {self.position}"


@dataclass(frozen=True)
class Sequence:
    """An immutable run of nucleotides drawn from ``ALPHABET``.

    Equality and hashing are structural on the symbol string, so duplicate
    fragments compare equal while remaining distinct entries in a working set.
    """

    symbols: str

    def __post_init__(self) -> None:
        if not isinstance(self.symbols, str):
            raise TypeError(
                f"Sequence expects a str, got {type(self.symbols).__name__}"
            )
        for position, symbol in enumerate(self.symbols):
            if symbol not in _ALPHABET_SET:
                raise InvalidSymbol(symbol, position)

    @classmethod
    def from_record(cls, record: Union[SeqRecord, Seq]) -> "Sequence":
        """Build a fragment from a Biopython record, upper-casing the bases."""

        seq = record.seq if isinstance(record, SeqRecord) else record
        return cls(str(seq).upper())

    def to_record(self, record_id: str, description: str = "") -> SeqRecord:
        return SeqRecord(Seq(self.symbols), id=record_id, description=description)

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return self.symbols

    def calculate_overlap(self, other: "Sequence") -> int:
        """Return the longest suffix of ``self`` that is a prefix of ``other``.

        Every candidate length is tested because matches are not monotonic:
        ``CAA`` against ``AAG`` matches at 1 and 2, while ``ACA`` against
        ``ACA`` matches at 1 and 3 but not 2. The largest exact match wins.
        """

        bound = min(len(self.symbols), len(other.symbols))
        overlap = 0
        for size in range(1, bound + 1):
            if self.symbols[-size:] == other.symbols[:size]:
                overlap = size
        return overlap

    def merged_with(self, other: "Sequence") -> "Sequence":
        """Return ``self`` followed by the part of ``other`` past the overlap."""

        overlap = self.calculate_overlap(other)
        return Sequence(self.symbols + other.symbols[overlap:])
