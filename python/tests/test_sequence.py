"""Tests for fragment validation, overlap and merge."""

import pickle

import pytest
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from fragasm_core.sequence import InvalidSymbol, Sequence


def test_rejects_symbol_outside_alphabet():
    """Test that an ambiguity code fails construction and names the symbol."""
    with pytest.raises(InvalidSymbol) as excinfo:
        Sequence("CATN")

    assert excinfo.value.symbol == "N"
    assert excinfo.value.position == 3
    assert "'N'" in str(excinfo.value)


def test_rejects_lowercase_and_non_string():
    with pytest.raises(InvalidSymbol):
        Sequence("acgt")
    with pytest.raises(TypeError):
        Sequence(42)


def test_structural_equality_and_length():
    a = Sequence("GATTACA")
    b = Sequence("GATTACA")

    assert a == b
    assert hash(a) == hash(b)
    assert a != Sequence("GATTAC")
    assert a != "GATTACA"
    assert len(a) == 7
    assert str(a) == "GATTACA"


def test_sequence_is_immutable():
    seq = Sequence("ACGT")
    with pytest.raises(AttributeError):
        seq.symbols = "TTTT"


def test_overlap_picks_largest_match():
    """Test the CAA/AAG example: overlap is 2, not 1."""
    assert Sequence("CAA").calculate_overlap(Sequence("AAG")) == 2
    assert Sequence("CAA").merged_with(Sequence("AAG")) == Sequence("CAAG")


def test_overlap_is_not_monotonic():
    """Test that a longer match is found even when a shorter one fails."""
    # sizes 1 and 3 match, size 2 does not
    assert Sequence("ACA").calculate_overlap(Sequence("ACA")) == 3
    assert Sequence("GACA").calculate_overlap(Sequence("ACAT")) == 3


def test_overlap_is_directional():
    a = Sequence("ATTAGACCTG")
    b = Sequence("CCTGCCGGAA")

    assert a.calculate_overlap(b) == 4
    assert b.calculate_overlap(a) == 1
    assert a.merged_with(b) == Sequence("ATTAGACCTGCCGGAA")
    assert b.merged_with(a) == Sequence("CCTGCCGGAATTAGACCTG")

    left, right = Sequence("ACCTG"), Sequence("CCTGT")
    assert left.calculate_overlap(right) == 4
    assert right.calculate_overlap(left) == 0
    assert right.merged_with(left) == Sequence("CCTGTACCTG")


def test_overlap_with_empty_and_self():
    empty = Sequence("")
    seq = Sequence("GGTAC")

    assert empty.calculate_overlap(seq) == 0
    assert seq.calculate_overlap(empty) == 0
    assert seq.calculate_overlap(seq) == len(seq)


def test_overlap_bounds_and_merge_length():
    reads = ["A", "AT", "TAT", "GATTA", "TTAGC", "CCCC", "ATATAT"]
    for left in map(Sequence, reads):
        for right in map(Sequence, reads):
            overlap = left.calculate_overlap(right)
            assert 0 <= overlap <= min(len(left), len(right))
            assert len(left.merged_with(right)) == len(left) + len(right) - overlap


def test_contained_fragment_merges_to_left():
    """Test that a right operand wholly matching the suffix adds nothing."""
    assert Sequence("GATTACA").merged_with(Sequence("ACA")) == Sequence("GATTACA")


def test_biopython_round_trip():
    record = SeqRecord(Seq("acgtt"), id="read_1")

    seq = Sequence.from_record(record)
    assert seq == Sequence("ACGTT")
    assert Sequence.from_record(Seq("TTG")) == Sequence("TTG")

    out = seq.to_record("contig_1")
    assert out.id == "contig_1"
    assert str(out.seq) == "ACGTT"


def test_invalid_symbol_survives_pickling():
    error = pickle.loads(pickle.dumps(InvalidSymbol("N", 3)))

    assert error.symbol == "N"
    assert error.position == 3
    assert str(error) == "Invalid character in sequence: 'N' at position 3"
