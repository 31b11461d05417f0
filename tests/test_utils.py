from __future__ import annotations
import logging, pathlib
from overlapseq.utility.utils import CONF_PATH, config_value, load_config, setup_logging

def test_load_config():
    cfg = load_config(CONF_PATH)
    assert config_value(cfg, "assembly.tie_break") == "shorter-merge"

def test_load_config_missing_file(tmp_path: pathlib.Path):
    assert load_config(tmp_path / "nope.yaml") == {}

def test_load_config_empty_file(tmp_path: pathlib.Path):
    cfg_file = tmp_path / "empty.yaml"
    cfg_file.write_text("# nothing set\n")
    assert load_config(cfg_file) == {}

def test_config_value_defaults():
    cfg = {"assembly": {"tie_break": "scan-order", "show_progress": None}}
    assert config_value(cfg, "assembly.tie_break") == "scan-order"
    assert config_value(cfg, "assembly.show_progress", False) is False   # null falls back
    assert config_value(cfg, "logging.log_dir", "logs") == "logs"
    assert config_value(cfg, "assembly.tie_break.deeper") is None

def test_setup_logging(tmp_path: pathlib.Path):
    """
    tmp_path is a py test fixture that yields a fresh, auto-cleaned path.
    """
    setup_logging(log_dir=str(tmp_path), log_file_prefix="test", force=True, console=False)
    logging.info("hello")

    logging.shutdown()

    logs = list(tmp_path.glob("test_*.log"))
    assert logs, "no log file created"
