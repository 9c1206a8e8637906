from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import yaml

DEFAULT_CONFIG = "configs/solver.yaml"


@dataclass
class SolverConfig:
    strategy: str = "memo"          # memo | astar
    heuristic: str = "farthest"     # astar only: zero | farthest
    on_dead_end: str = "error"      # error | zero
    time_limit: Optional[float] = None
    node_limit: Optional[int] = None
    split_entrance: bool = False
    log_level: str = "WARNING"
    levels_root: str = "keymaze_core/levels"
    levels_sources: List[str] = field(default_factory=lambda: ["examples"])
    filters: Dict[str, Any] = field(default_factory=dict)


def config_from_dict(cfg: Dict[str, Any]) -> SolverConfig:
    search = cfg.get("search") or {}
    maze = cfg.get("maze") or {}
    log = cfg.get("logging") or {}
    levels = cfg.get("levels") or {}
    base = SolverConfig()
    out = SolverConfig(
        strategy=search.get("strategy", base.strategy),
        heuristic=search.get("heuristic", base.heuristic),
        on_dead_end=search.get("on_dead_end", base.on_dead_end),
        time_limit=search.get("time_limit", base.time_limit),
        node_limit=search.get("node_limit", base.node_limit),
        split_entrance=bool(maze.get("split_entrance", base.split_entrance)),
        log_level=str(log.get("level", base.log_level)).upper(),
        levels_root=levels.get("root_dir", base.levels_root),
        levels_sources=list(levels.get("sources", base.levels_sources)),
        filters=dict(cfg.get("filters") or {}),
    )
    if out.strategy not in ("memo", "astar"):
        raise ValueError(f"unknown search strategy: {out.strategy}")
    if out.on_dead_end not in ("error", "zero"):
        raise ValueError(f"unknown on_dead_end policy: {out.on_dead_end}")
    return out


def load_config(path: Optional[str]) -> SolverConfig:
    """Reads a YAML config; a missing path means built-in defaults."""
    if path is None:
        return SolverConfig()
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    return config_from_dict(cfg)
