# src/overlapseq/utility/progress.py

from __future__ import annotations
from contextlib import contextmanager
from tqdm import tqdm
from typing import Iterator
import threading, logging

_tls = threading.local()  # module-level, one per thread
L = logging.getLogger(__name__)

__all__ = ["stage_bar", "current_bar"]


@contextmanager
def stage_bar(total: int, *, desc: str = "", unit: str = "", disable: bool = False) -> Iterator[tqdm]:
    """
    Context manager that yields a tqdm bar and remembers it in a thread-local so
    nested helpers can tick the parent bar without it being passed around.

    disable=True still yields a working bar object (update() is a no-op on screen),
    so callers never have to branch on whether progress is shown.
    """
    outer = getattr(_tls, "current", None)
    bar = tqdm(
        total=total,
        desc=desc,
        unit=unit,
        leave=False,
        ncols=80,
        disable=disable,
        bar_format=("{l_bar}{bar}| " "{n_fmt}/{total_fmt} " "[elapsed: {elapsed} < remaining: {remaining}]"),
    )  # leave=False so only the latest bar stays on screen
    _tls.current = bar

    try:
        yield bar
    finally:
        bar.close()
        _tls.current = outer  # restore previous parent (or None)


def current_bar() -> tqdm | None:
    """Return the innermost active stage_bar of this thread, if any."""
    return getattr(_tls, "current", None)
