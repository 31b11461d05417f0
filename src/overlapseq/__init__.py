# Re-export the core types so callers can
# from overlapseq import Fragment, Assembler
from .fragment import ALPHABET, Fragment, InvalidSequenceError
from .assembly import Assembler, TieBreak

__all__ = ["ALPHABET", "Assembler", "Fragment", "InvalidSequenceError", "TieBreak"]

__version__ = "0.1.0"
