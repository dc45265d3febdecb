#!/usr/bin/env python3
"""
Batch runner for sweeping ant counts over farm files and exporting CSV.

Parameters (via CLI args or env vars):
- --farms: comma list of farm files (FARMS)
- --ants: comma list or range (e.g., 1-20) of ant counts, overriding the
  count declared in each file (ANTS)
- --strategy: greedy | exact (STRATEGY)
- --out: output CSV path (default: OUT_DIR/batch_results.csv or ./out/batch_results.csv)

Usage examples:
  python src/batch.py --farms farms/example.txt --ants 1-30
  STRATEGY=exact python src/batch.py --farms farms/example.txt,farms/bottleneck.txt --ants 1,5,10
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

sys.path.append(os.path.dirname(__file__))

from configs import BATCH_CONFIG

from ant_farm import AntFarmError, Config, load_farm, solve
from ant_farm.config import STRATEGIES
from ant_farm.logging_utils import setup_logging
from ant_farm.reporting import write_records


FIELDS = ["farm", "ants", "routes", "route_lengths", "turns", "lower_bound", "efficiency", "error"]


def _parse_list_or_range(s: str) -> List[int]:
    s = s.strip()
    if "," in s:
        return [int(x) for x in s.split(",") if x]
    if "-" in s:
        a, b = s.split("-", 1)
        return list(range(int(a), int(b) + 1))
    return [int(s)]


def run_batch(farms: List[str], ants_list: List[int], strategy: str = "greedy") -> List[Dict[str, object]]:
    logger = setup_logging()
    config = Config(strategy=strategy)
    rows: List[Dict[str, object]] = []
    for farm_path in farms:
        label = Path(farm_path).stem
        try:
            farm = load_farm(farm_path)
        except (AntFarmError, OSError) as exc:
            logger.error("[batch] %s: %s", label, exc)
            rows.append({"farm": label, "error": str(exc)})
            continue
        for ants in ants_list:
            try:
                solution = solve(farm.graph, ants, config)
            except AntFarmError as exc:
                logger.error("[batch] %s ants=%d: %s", label, ants, exc)
                rows.append({"farm": label, "ants": ants, "error": str(exc)})
                continue
            stats = solution.stats
            rows.append(
                {
                    "farm": label,
                    "ants": ants,
                    "routes": len(solution.routes),
                    "route_lengths": ";".join(str(r.length) for r in solution.routes),
                    "turns": stats["turns"],
                    "lower_bound": stats["lower_bound"],
                    "efficiency": stats["efficiency"],
                    "error": "",
                }
            )
            logger.info(
                "[batch] %s ants=%d routes=%d turns=%d bound=%d",
                label,
                ants,
                len(solution.routes),
                stats["turns"],
                stats["lower_bound"],
            )
    return rows


def write_rows(rows: List[Dict[str, object]], out_path: str) -> None:
    write_records(rows, out_path, FIELDS, append=False)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Sweep ant counts over farm files")
    ap.add_argument("--farms", default=os.environ.get("FARMS", BATCH_CONFIG["farms"]))
    ap.add_argument("--ants", default=os.environ.get("ANTS", BATCH_CONFIG["ants"]))
    ap.add_argument(
        "--strategy",
        default=os.environ.get("STRATEGY", BATCH_CONFIG["strategy"]),
        choices=list(STRATEGIES),
    )
    ap.add_argument("--out", default=None)
    args = ap.parse_args(argv)
    if args.strategy not in STRATEGIES:
        ap.error(f"unknown strategy {args.strategy!r} (choose from {', '.join(STRATEGIES)})")

    farms = [f for f in args.farms.split(",") if f]
    ants_list = _parse_list_or_range(args.ants)
    out_path = args.out or os.path.join(os.environ.get("OUT_DIR", "out"), "batch_results.csv")

    rows = run_batch(farms, ants_list, args.strategy)
    write_rows(rows, out_path)
    print(f"Wrote {len(rows)} rows to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
