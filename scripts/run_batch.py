from __future__ import annotations
import argparse, csv, os, time
from typing import Dict
from multiprocessing import Pool, cpu_count
from tqdm import tqdm

from keymaze_core.levels.resolve import load_maze_text_by_id
from keymaze_core.parser import parse_maze_lines
from keymaze_core.variants import split_entrance
from search.runner import run_search

FIELDS = ["maze_id", "strategy", "success", "nodes", "runtime", "solution_len"]


def _run_one(args_tuple) -> Dict[str, object]:
    maze_id, strategy, heur_name, split, time_limit, node_limit = args_tuple
    label = strategy if strategy == "memo" else f"astar+{heur_name}"
    try:
        lines = load_maze_text_by_id(maze_id).splitlines()
        if split:
            lines = split_entrance(lines)
        grid = parse_maze_lines(lines)
        res = run_search(grid, strategy=strategy, heuristic=heur_name,
                         time_limit=time_limit, node_limit=node_limit)
        return {
            "maze_id": maze_id,
            "strategy": label,
            "success": bool(res.get("success", False)),
            "nodes": int(res.get("nodes", 0)),
            "runtime": float(res.get("runtime", 0.0)),
            "solution_len": int(res.get("solution_len", -1)),
        }
    except (OSError, ValueError, IndexError) as e:
        tqdm.write(f"[skip] {maze_id}: {e}")
        return {"maze_id": maze_id, "strategy": label, "success": False, "nodes": 0, "runtime": 0.0, "solution_len": -1}


def main(argv=None):
    p = argparse.ArgumentParser(description="Batch solver runs → CSV (parallel over mazes)")
    p.add_argument("--list", required=True, help="path to .txt list (lines: path#idx)")
    p.add_argument("--strategy", default="memo", choices=["memo", "astar"])
    p.add_argument("--h", default="farthest", choices=["zero", "farthest"])
    p.add_argument("--split", action="store_true", help="four-agent variant of every maze")
    p.add_argument("--out", default="results/batch.csv")
    p.add_argument("--time_limit", type=float, default=None)
    p.add_argument("--node_limit", type=int, default=None)
    p.add_argument("--jobs", type=int, default=0, help="processes (0→cpu_count)")
    args = p.parse_args(argv)

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(args.list, "r", encoding="utf-8") as f:
        maze_ids = [ln.strip() for ln in f if ln.strip() and not ln.strip().startswith("#")]

    jobs = args.jobs or cpu_count()
    payload = [(mid, args.strategy, args.h, args.split, args.time_limit, args.node_limit) for mid in maze_ids]

    started = time.time()
    if jobs == 1:
        rows = [_run_one(t) for t in tqdm(payload, desc="Solving", unit="maze")]
    else:
        # one search per process; memo tables are never shared
        with Pool(processes=jobs) as pool:
            rows = list(tqdm(pool.imap_unordered(_run_one, payload), total=len(payload), desc="Solving", unit="maze"))

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    print(f"done: {len(rows)} mazes → {args.out}; total_time={time.time()-started:.2f}s; jobs={jobs}")


if __name__ == "__main__":
    main()
