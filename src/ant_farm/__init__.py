"""Public ant farm router exports."""
from .allocator import Allocation, allocate
from .config import Config
from .errors import AntFarmError, StructuralError, UnsolvableError
from .farm import Farm, load_farm, parse_farm
from .graph import Graph, Room, Route
from .pathfinder import all_routes, candidate_routes, shortest_route
from .planner import Solution, plan_routes, solve
from .reporting import compute_stats, format_schedule, lower_bound, summarize_run
from .scheduler import Move, schedule
from .selector import order_first_hops, select_routes

__all__ = [
    "Allocation",
    "allocate",
    "Config",
    "AntFarmError",
    "StructuralError",
    "UnsolvableError",
    "Farm",
    "load_farm",
    "parse_farm",
    "Graph",
    "Room",
    "Route",
    "all_routes",
    "candidate_routes",
    "shortest_route",
    "Solution",
    "plan_routes",
    "solve",
    "compute_stats",
    "format_schedule",
    "lower_bound",
    "summarize_run",
    "Move",
    "schedule",
    "order_first_hops",
    "select_routes",
]
