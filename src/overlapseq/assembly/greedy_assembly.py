# src/overlapseq/assembly/greedy_assembly.py

"""
Greedy overlap assembly.

Repeatedly merges the two fragments with the largest suffix/prefix overlap
until one fragment is left or no pair overlaps by at least one nucleotide.

Usage:
    asm = Assembler([Fragment("GCATAG"), Fragment("GGCCAT"), Fragment("CATAGG")])
    asm.assemble_all()
    asm.get_fragments()      # [Fragment('GCATAGGCCAT')]
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from overlapseq.fragment import Fragment
from overlapseq.utility.progress import stage_bar

L = logging.getLogger(__name__)

__all__ = ["Assembler", "MergeStep", "TieBreak", "covers_all"]

# Merges need at least this much overlap
MIN_OVERLAP = 1


# Inheriting from str lets TieBreak.SCAN_ORDER == "scan-order" hold, so config/CLI strings work as-is.
class TieBreak(str, Enum):
    """How to choose between candidate pairs that share the largest overlap."""
    SHORTER_MERGE = "shorter-merge"
    SCAN_ORDER = "scan-order"


@dataclass(frozen=True)
class MergeStep:
    """One successful assemble_once() call."""
    left_index: int
    right_index: int
    left: Fragment
    right: Fragment
    overlap: int
    merged: Fragment


def _as_tie_break(value: TieBreak | str) -> TieBreak:
    try:
        return TieBreak(value)
    except ValueError:
        choices = ", ".join(t.value for t in TieBreak)
        raise ValueError(f"Unknown tie-break policy {value!r}; expected one of: {choices}") from None


def covers_all(reads: Iterable[Fragment], fragments: Iterable[Fragment]) -> bool:
    """Return True when every read occurs as a substring of some fragment."""
    contigs = [f.sequence for f in fragments]
    return all(any(r.sequence in c for c in contigs) for r in reads)


class Assembler:
    """
    Holds a private, ordered working list of fragments and merges them greedily.

    Pairs are always addressed by position, never by value, so fragments with
    identical sequences at different positions are independent entries.
    """

    def __init__(self, fragments: Iterable[Fragment], *, tie_break: TieBreak | str = TieBreak.SHORTER_MERGE) -> None:
        self._fragments: list[Fragment] = list(fragments)  # own copy, caller's list stays untouched
        for frag in self._fragments:
            if not isinstance(frag, Fragment):
                raise TypeError(f"Assembler expects Fragment objects, got {type(frag).__name__}")
        self.tie_break = _as_tie_break(tie_break)
        self.history: list[MergeStep] = []

    def __len__(self) -> int:
        return len(self._fragments)

    def __repr__(self) -> str:
        return f"Assembler({self._fragments!r}, tie_break={self.tie_break.value!r})"

    @property
    def fragments(self) -> list[Fragment]:
        return self.get_fragments()

    def get_fragments(self) -> list[Fragment]:
        """Return a snapshot of the current working list."""
        return list(self._fragments)

    def is_complete(self) -> bool:
        return len(self._fragments) <= 1

    def _best_pair(self) -> tuple[int, int, int] | None:
        """
        Scan every ordered pair of distinct positions (i ascending, then j
        ascending) and return (i, j, overlap) of the best merge, or None.
        """
        best: tuple[int, int, int] | None = None
        best_len = 0
        frags = self._fragments
        for i, left in enumerate(frags):
            for j, right in enumerate(frags):
                if i == j:
                    continue
                overlap = left.calculate_overlap(right)
                if overlap < MIN_OVERLAP:
                    continue
                merged_len = len(left) + len(right) - overlap
                if best is None or overlap > best[2]:
                    best, best_len = (i, j, overlap), merged_len
                elif (
                    overlap == best[2]
                    and self.tie_break is TieBreak.SHORTER_MERGE
                    and merged_len < best_len
                ):
                    best, best_len = (i, j, overlap), merged_len
        return best

    def assemble_once(self) -> bool:
        """
        Merge the pair with the largest overlap (ties per self.tie_break).

        The merged fragment is appended and both sources are removed by index.
        Returns False, leaving the list untouched, when no pair overlaps.
        """
        best = self._best_pair()
        if best is None:
            L.debug("No overlapping pair among %d fragments", len(self._fragments))
            return False

        i, j, overlap = best
        left, right = self._fragments[i], self._fragments[j]
        merged = left.merged_with(right)
        self._fragments.append(merged)
        # higher index first so the lower one does not shift
        for idx in sorted((i, j), reverse=True):
            del self._fragments[idx]

        self.history.append(MergeStep(i, j, left, right, overlap, merged))
        L.debug("Merged #%d %s + #%d %s (overlap %d) -> %s", i, left, j, right, overlap, merged)
        return True

    def assemble_all(self, *, show_progress: bool = False) -> int:
        """
        Run assemble_once() until one fragment is left or no merge is possible.

        Every merge removes one fragment, so this stops after at most N-1
        merges. Returns the number of merges performed.
        """
        start = len(self._fragments)
        merges = 0
        with stage_bar(max(start - 1, 0), desc="assemble", unit="merge", disable=not show_progress) as bar:
            while len(self._fragments) > 1 and self.assemble_once():
                merges += 1
                bar.update(1)

        L.info("Assembly finished: %d fragment(s) -> %d after %d merge(s)", start, len(self._fragments), merges)
        return merges
