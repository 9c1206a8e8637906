from __future__ import annotations
import argparse
from keymaze_core.config import DEFAULT_CONFIG, load_config
from keymaze_core.levels.io import iterate_maze_strings, filter_maze


def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default=DEFAULT_CONFIG)
    args = p.parse_args(argv)

    cfg = load_config(args.config)
    flt = cfg.filters

    ok = 0
    bad = 0
    for ref, s in iterate_maze_strings(cfg.levels_root, cfg.levels_sources):
        if filter_maze(s,
                       max_w=flt.get("max_width"),
                       max_h=flt.get("max_height"),
                       min_k=flt.get("min_keys"),
                       max_k=flt.get("max_keys")):
            ok += 1
        else:
            bad += 1
            print(f"[skip] {ref}")
    print(f"valid: {ok}, skipped: {bad}")

if __name__ == "__main__":
    main()
