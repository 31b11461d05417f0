"""Assembly helpers exposed for external callers."""

from .greedy_assembly import Assembler, MergeStep, TieBreak, covers_all

__all__ = ["Assembler", "MergeStep", "TieBreak", "covers_all"]
