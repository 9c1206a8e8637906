from pathlib import Path

import pytest
from keymaze_core.config import SolverConfig, config_from_dict, load_config

ROOT = Path(__file__).resolve().parents[1]


def test_shipped_config_loads():
    cfg = load_config(str(ROOT / "configs" / "solver.yaml"))
    assert cfg.strategy == "memo"
    assert cfg.on_dead_end == "error"
    assert cfg.levels_sources == ["examples"]
    assert cfg.filters["max_keys"] == 26


def test_defaults_without_file():
    assert load_config(None) == SolverConfig()


def test_partial_config_falls_back():
    cfg = config_from_dict({"search": {"strategy": "astar"}, "logging": {"level": "debug"}})
    assert cfg.strategy == "astar"
    assert cfg.heuristic == "farthest"
    assert cfg.log_level == "DEBUG"


def test_bad_values_rejected():
    with pytest.raises(ValueError):
        config_from_dict({"search": {"strategy": "bfs"}})
    with pytest.raises(ValueError):
        config_from_dict({"search": {"on_dead_end": "skip"}})
