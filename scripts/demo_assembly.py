#!/usr/bin/env python3
"""
Walk through a small greedy assembly step by step.

    python scripts/demo_assembly.py
"""
from __future__ import annotations
import logging

from overlapseq import Assembler, Fragment
from overlapseq.utility.utils import setup_logging


def main() -> None:
    setup_logging(console=True, level=logging.DEBUG, warn_if_generated=False)

    f, g = Fragment("GGCCAT"), Fragment("GCATAGG")
    print(f"{f} -> {g}: overlap {f.calculate_overlap(g)}")
    print(f"{g} -> {f}: overlap {g.calculate_overlap(f)}")

    asm = Assembler([Fragment("GCATAG"), Fragment("GGCCAT"), Fragment("CATAGG")])
    while asm.assemble_once():
        print([str(x) for x in asm.get_fragments()])


if __name__ == "__main__":
    main()
