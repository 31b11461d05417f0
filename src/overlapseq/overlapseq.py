# src/overlapseq/overlapseq.py
from __future__ import annotations
import argparse, logging, sys

from overlapseq.fragment import Fragment, InvalidSequenceError
from overlapseq.assembly import Assembler, TieBreak
from overlapseq.utility.utils import CONF_PATH, config_value, load_config, setup_logging

L = logging.getLogger(__name__)


def _build_parser(cfg: dict) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="overlapseq", description="Greedy overlap assembly of short nucleotide reads (G/C/A/T)")
    ap.add_argument("--config", default=str(CONF_PATH), help="YAML config with assembly/logging defaults (default: %(default)s)")
    ap.add_argument("--log-dir", default=config_value(cfg, "logging.log_dir"), help="Folder for the session log file (default: ./logs)")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v: info, -vv: use for debugging")
    sp = ap.add_subparsers(dest="cmd", required=True)

    # assembly
    p_asm = sp.add_parser("assemble", help="Merge reads by largest suffix/prefix overlap")
    p_asm.add_argument("reads", nargs="+", metavar="READ", help="Reads as plain strings, e.g. GCATAG GGCCAT CATAGG")
    p_asm.add_argument("--once", action="store_true", help="Perform a single merge step instead of running to completion")
    p_asm.add_argument("--tie-break", choices=[t.value for t in TieBreak],
                       default=config_value(cfg, "assembly.tie_break", TieBreak.SHORTER_MERGE.value),
                       help="Which pair wins when overlaps tie (default: %(default)s)")
    p_asm.add_argument("--progress", action="store_true",
                       default=bool(config_value(cfg, "assembly.show_progress", False)),
                       help="Show a progress bar while merging")

    # pairwise overlap
    p_ov = sp.add_parser("overlap", help="Report the overlap and merge of two reads")
    p_ov.add_argument("left", help="Read whose suffix is matched")
    p_ov.add_argument("right", help="Read whose prefix is matched")
    return ap


def _preparse_config(argv: list[str] | None) -> dict:
    """Pick up --config before the real parser is built so its values become defaults."""
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", default=str(CONF_PATH))
    known, _ = pre.parse_known_args(argv)
    return load_config(known.config)


def main(argv: list[str] | None = None) -> int:
    cfg = _preparse_config(argv)
    args = _build_parser(cfg).parse_args(argv)

    LEVEL = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    setup_logging(
        args.log_dir,
        level=LEVEL,
        force=True,
        rotate_mb=config_value(cfg, "logging.rotate_mb"),
        backup_count=config_value(cfg, "logging.backup_count", 0),
        warn_if_generated=args.verbose > 0,
    )

    try:
        if args.cmd == "assemble":
            reads = [Fragment(r) for r in args.reads]
            asm = Assembler(reads, tie_break=args.tie_break)
            if args.once:
                merged = asm.assemble_once()
                L.info("Single step %s", "merged one pair" if merged else "found no overlapping pair")
            else:
                asm.assemble_all(show_progress=args.progress)
            for frag in asm.get_fragments():
                print(frag)

        elif args.cmd == "overlap":
            left, right = Fragment(args.left), Fragment(args.right)
            print(left.calculate_overlap(right))
            print(left.merged_with(right))

    except InvalidSequenceError as e:
        logging.error(e)  # console handler puts this on stderr
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
