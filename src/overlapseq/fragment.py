# src/overlapseq/fragment.py

"""
Immutable nucleotide fragments plus the two primitives the assembler needs:
suffix/prefix overlap and merge.

Usage:
    a = Fragment("CAA")
    b = Fragment("AAG")
    a.calculate_overlap(b)   # 2
    a.merged_with(b)         # Fragment('CAAG')
"""
from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["ALPHABET", "Fragment", "InvalidSequenceError", "is_valid_sequence"]

# Uppercase only, anything else (N, lowercase, whitespace) is rejected
ALPHABET = frozenset("GCAT")

_INVALID_RX = re.compile(r"[^GCAT]")


class InvalidSequenceError(ValueError):
    """Raised when a sequence holds a symbol outside of G, C, A, T."""

    def __init__(self, sequence: str, position: int) -> None:
        self.sequence = sequence
        self.position = position
        self.symbol = sequence[position]
        super().__init__(
            f"Invalid nucleotide {self.symbol!r} at position {position}; "
            f"only {', '.join(sorted(ALPHABET))} are allowed."
        )


def is_valid_sequence(text: str) -> bool:
    """Return True when every symbol of text is in ALPHABET."""
    return _INVALID_RX.search(text) is None


@dataclass(frozen=True)
class Fragment:
    """
    A short read over the alphabet {G, C, A, T}.

    Two fragments are equal when their sequences are equal, position in an
    assembler list is what tells duplicates apart.
    """

    sequence: str

    def __post_init__(self) -> None:
        if not isinstance(self.sequence, str):
            raise TypeError(
                f"Fragment sequence must be str, got {type(self.sequence).__name__}"
            )
        if m := _INVALID_RX.search(self.sequence):
            raise InvalidSequenceError(self.sequence, m.start())

    def __len__(self) -> int:
        return len(self.sequence)

    def __str__(self) -> str:
        return self.sequence

    def __repr__(self) -> str:
        return f"Fragment({self.sequence!r})"

    def length(self) -> int:
        """Number of nucleotides in this fragment."""
        return len(self.sequence)

    def calculate_overlap(self, other: Fragment) -> int:
        """
        Return the length of the longest suffix of this fragment that is also
        a prefix of other.

        Start positions are scanned left to right, so the first full match is
        the longest one. CAA vs AAG gives 2, not 1.
        """
        seq = self.sequence
        # a suffix longer than other can never be one of its prefixes
        first = max(0, len(seq) - len(other.sequence))
        for start in range(first, len(seq)):
            if other.sequence.startswith(seq[start:]):
                return len(seq) - start
        return 0

    def merged_with(self, other: Fragment) -> Fragment:
        """
        Return a new fragment with this one on the left and other on the
        right, overlapped as much as possible. Neither operand changes.
        """
        overlap = self.calculate_overlap(other)
        return Fragment(self.sequence + other.sequence[overlap:])
