# tests/test_progress.py

"""
The goal here is making sure assemble_all ticks its stage_bar exactly once per merge.
The approach used is a temporary monkeypatch:
 - swap the real stage_bar for a tiny fake that records how often update() is called.
 - run assemble_all on a small read set and assert the counter equals the number of merges.
"""
from __future__ import annotations
from contextlib import contextmanager

import pytest

from overlapseq.assembly import Assembler, greedy_assembly
from overlapseq.fragment import Fragment
import overlapseq.utility.progress as pg

# -------------- tiny in-memory fake bar ---------------

class DummyBar:
    def __init__(self, total):
        self.total = total
        self.n = 0
    def update(self, inc=1):
        self.n += inc
    def close(self):
        pass

@pytest.fixture()
def patch_stage_bar(monkeypatch):
    """Replace the assembler's stage_bar with a counter-collecting dummy."""
    counters = {}

    @contextmanager
    def fake_stage_bar(total, *a, **kw):
        bar = DummyBar(total)
        counters['bar'] = bar
        counters['kw'] = kw
        yield bar

    monkeypatch.setattr(greedy_assembly, "stage_bar", fake_stage_bar)
    yield counters  # give test access to bar after the call

def test_assemble_all_progress(patch_stage_bar):
    asm = Assembler([Fragment(s) for s in ("GCATAG", "GGCCAT", "CATAGG")])
    merges = asm.assemble_all(show_progress=True)

    bar = patch_stage_bar['bar']
    assert bar.total == 2          # N - 1 possible merges
    assert bar.n == merges == 2    # ticked exactly once per merge
    assert patch_stage_bar['kw']['disable'] is False

def test_progress_hidden_by_default(patch_stage_bar):
    Assembler([Fragment("AAA"), Fragment("CCC")]).assemble_all()

    bar = patch_stage_bar['bar']
    assert bar.n == 0
    assert patch_stage_bar['kw']['disable'] is True

def test_stage_bar_restores_parent():
    """Nested bars become current while open and hand back to the outer one."""
    assert pg.current_bar() is None
    with pg.stage_bar(2, desc="outer", disable=True) as outer:
        assert pg.current_bar() is outer
        with pg.stage_bar(1, desc="inner", disable=True) as inner:
            assert pg.current_bar() is inner
        assert pg.current_bar() is outer
    assert pg.current_bar() is None
