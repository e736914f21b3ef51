#!/usr/bin/env python3
"""
Neighborhood Demonstration Script

Logs the adjacency, boundary classification and neighborhoods of a single
cell so the bounded and torus topologies can be compared side by side.
"""

import sys
import os
import argparse
import logging

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

from gridtopo import Direction, GridTopology, Neighborhood, Topology


def describe_cell(grid, x, y, kinds):
    """Collect adjacency and neighborhood information for one cell."""
    grid.check(x, y)

    results = {
        "topology": grid.topology.value,
        "size": grid.shape,
        "cell": (x, y),
        "is_edge": grid.is_edge(x, y),
        "is_corner": grid.is_corner(x, y),
        "adjacent": {d.name: grid.adjacent(x, y, d) for d in Direction},
        "neighborhoods": {k.value: list(grid.neighborhood(x, y, k)) for k in kinds},
    }

    logger.info(f"=== {results['topology'].upper()} {grid.width}x{grid.height} at ({x}, {y}) ===")
    logger.info(f"Edge: {results['is_edge']}  Corner: {results['is_corner']}")
    for name, cell in results["adjacent"].items():
        logger.info(f"  {name:<5} -> {cell if cell is not None else 'blocked'}")
    for name, cells in results["neighborhoods"].items():
        logger.info(f"  {name}: {len(cells)} neighbors {cells}")

    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description="Show grid neighborhoods under each topology")
    parser.add_argument("--topology", choices=[t.value for t in Topology] + ["both"], default="both")
    parser.add_argument("--width", type=int, default=5, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=5, help="Grid height in cells")
    parser.add_argument("--x", type=int, default=0, help="Cell x coordinate")
    parser.add_argument("--y", type=int, default=0, help="Cell y coordinate")
    parser.add_argument("--kind", choices=[k.value for k in Neighborhood] + ["all"], default="all")
    args = parser.parse_args(argv)

    topologies = list(Topology) if args.topology == "both" else [Topology(args.topology)]
    kinds = list(Neighborhood) if args.kind == "all" else [Neighborhood(args.kind)]

    try:
        for topology in topologies:
            describe_cell(GridTopology(topology, args.width, args.height), args.x, args.y, kinds)
    except (ValueError, IndexError) as e:
        logger.error(f"Invalid input: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
