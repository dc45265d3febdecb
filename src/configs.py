"""
Solver configuration for the ant farm router.

Defaults for the CLI live in SOLVER_CONFIG; command-line flags override
them and ANTFARM_* environment variables override both. BATCH_CONFIG holds
the default sweep used by batch.py.
"""

from typing import Dict, Any
import os


SOLVER_CONFIG: Dict[str, Any] = {
    # Route selection backend: "greedy" (default) | "exact" (ILP, needs CBC)
    "strategy": "greedy",

    # Candidate listing: shortest route per start neighbour unless exhaustive
    "list_all_routes": False,
    "max_candidate_routes": 1000,

    # Artifacts
    "output_root": os.environ.get("OUT_DIR", "out"),
    "save_artifacts": False,
    "export_visuals": False,
}


# === Batch sweep defaults (used by batch.py) ===
BATCH_CONFIG: Dict[str, Any] = {
    "farms": os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "farms", "example.txt"),
    "ants": "1-20",
    "strategy": "greedy",
}
