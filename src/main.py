"""CLI entrypoint that wires configuration, loading, solving and reporting."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

CURRENT_DIR = Path(__file__).parent
if str(CURRENT_DIR) not in sys.path:
    sys.path.append(str(CURRENT_DIR))

from configs import SOLVER_CONFIG
from ant_farm import AntFarmError, Config, load_farm, parse_farm, solve
from ant_farm.config import STRATEGIES
from ant_farm.pathfinder import MAX_FRONTIER
from ant_farm.io_utils import prepare_output_dir, save_plan, save_schedule
from ant_farm.logging_utils import add_file_handler, detach_file_handlers, get_logger, setup_logging
from ant_farm.reporting import (
    append_result_record,
    build_result_record,
    describe_solution,
    format_schedule,
    summarize_run,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Route ants through a farm of rooms and tunnels")
    parser.add_argument("farm", help="Path to the farm description ('-' reads stdin)")
    parser.add_argument(
        "--strategy",
        default=SOLVER_CONFIG.get("strategy", Config().strategy),
        choices=list(STRATEGIES),
        help="Disjoint route selection backend",
    )
    parser.add_argument(
        "--all-routes",
        action="store_true",
        default=SOLVER_CONFIG.get("list_all_routes", False),
        help=(
            "Report every simple route instead of the shortest per start neighbour; "
            "exponential in farm size, so the search also stops after holding "
            f"{MAX_FRONTIER} partial paths"
        ),
    )
    parser.add_argument(
        "--max-routes",
        type=int,
        default=SOLVER_CONFIG.get("max_candidate_routes", Config().max_candidate_routes),
        help="Cap on the number of routes listed with --all-routes",
    )
    parser.add_argument("--output-root", default=SOLVER_CONFIG.get("output_root", Config().output_root))
    parser.add_argument(
        "--save",
        action="store_true",
        default=SOLVER_CONFIG.get("save_artifacts", False),
        help="Write plan.json, schedule.json, run.log and append result.csv",
    )
    parser.add_argument(
        "--viz",
        action="store_true",
        default=SOLVER_CONFIG.get("export_visuals", False),
        help="Render routes.png, timeline.png and anim.gif (implies --save)",
    )
    parser.add_argument("--quiet", action="store_true", help="Print only the move lines")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger = setup_logging(args.debug)
    try:
        config = Config(
            farm_file="" if args.farm == "-" else args.farm,
            strategy=args.strategy,
            list_all_routes=args.all_routes,
            max_candidate_routes=args.max_routes,
            output_root=args.output_root,
            save_artifacts=args.save or args.viz,
            export_visuals=args.viz,
            debug=args.debug,
        ).with_env_overrides()
    except ValueError as exc:
        logger.error("ERROR: %s", exc)
        return 2
    logger.debug("Global configuration:\n%s", json.dumps(config.to_dict(), ensure_ascii=False, indent=2))

    logger.info("[step 1/4] Loading farm from %s", config.farm_file or "<stdin>")
    try:
        farm = load_farm(config.farm_file) if config.farm_file else parse_farm(sys.stdin)
    except (AntFarmError, OSError) as exc:
        logger.error("ERROR: %s", exc)
        return 1
    graph = farm.graph
    logger.info(
        "Farm stats: rooms=%d tunnels=%d ants=%d start=%s end=%s",
        len(graph),
        len(graph.tunnels),
        farm.ants,
        graph.start_name,
        graph.end_name,
    )

    logger.info("[step 2/4] Selecting routes (strategy=%s)", config.strategy)
    try:
        solution = solve(graph, farm.ants, config)
    except AntFarmError as exc:
        logger.error("ERROR: %s", exc)
        return 1
    for line in describe_solution(solution):
        logger.info(line)

    logger.info("[step 3/4] Schedule complete (turns=%d)", solution.turn_count)
    lines = format_schedule(solution.turns)
    if not args.quiet:
        print("\n".join(farm.source_lines))
        print()
    print("\n".join(lines))

    if not config.save_artifacts:
        logger.info("[step 4/4] Artifacts skipped (save_artifacts=False)")
        return 0

    output_dir = prepare_output_dir(config.output_root, config.farm_file, farm.ants, config.strategy)
    add_file_handler(output_dir / "run.log")
    try:
        _write_artifacts(config, solution, lines, output_dir)
    finally:
        detach_file_handlers()
    return 0


def _write_artifacts(config: Config, solution, lines: List[str], output_dir: Path) -> None:
    logger = get_logger()
    logger.info("[step 4/4] Writing artifacts to %s", output_dir)
    plan_path = save_plan(output_dir, {"config": config.to_dict(), "plan": summarize_run(solution)})
    schedule_path = save_schedule(output_dir, lines)
    logger.info("Saved plan to %s and schedule to %s", plan_path, schedule_path)

    if config.export_visuals:
        from ant_farm.visualizer import export_visuals

        artifacts = export_visuals(solution, output_dir)
        logger.info("Visualization artifacts: %s", ", ".join(f"{k}={p.name}" for k, p in artifacts.items()))

    record = build_result_record(solution, config)
    result_csv = Path(config.output_root) / "result.csv"
    append_result_record(record, result_csv)
    logger.info(
        "Run summary -> farm=%s ants=%s routes=%s turns=%s bound=%s",
        record["farm"],
        record["ants"],
        record["routes"],
        record["turns"],
        record["lower_bound"],
    )


if __name__ == "__main__":
    sys.exit(main())
