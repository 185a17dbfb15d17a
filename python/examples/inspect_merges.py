#!/usr/bin/env python3
"""Step through a greedy assembly and print each merge as it happens."""

from __future__ import annotations

from fragasm_core import Assembler, overlap_matrix


def main() -> None:
    reads = ["ATTAGACCTG", "CCTGCCGGAA", "AGACCTGCCG", "GCCGGAATAC"]
    assembler = Assembler(reads)

    print("Initial overlap matrix (row -> col):")
    print(overlap_matrix(assembler.fragments))

    step = 1
    while True:
        candidate = assembler.find_best_merge()
        if candidate is None:
            break
        left = assembler.fragments[candidate.left]
        right = assembler.fragments[candidate.right]
        assembler.assemble_once()
        merged = assembler.fragments[-1]
        print(f"step {step}: {left} + {right} (overlap={candidate.overlap}) -> {merged}")
        step += 1

    if assembler.contig is not None:
        print(f"\nAssembled: {assembler.contig}")
    else:
        print("\nNo single superstring; remaining fragments:")
        for fragment in assembler.fragments:
            print(f"  {fragment}")


if __name__ == "__main__":
    main()
