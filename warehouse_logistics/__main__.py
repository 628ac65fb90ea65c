"""Headless entry point.

Run with::

    python -m warehouse_logistics
    python -m warehouse_logistics --layout floor.txt --items 50 --capacity 4
"""

from __future__ import annotations

import argparse
import logging

from .constants import DEFAULT_LAYOUT, DEFAULT_NUM_ITEMS, DEFAULT_STORAGE_CAPACITY
from .headless import run_headless

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Warehouse intake and routing run")
    parser.add_argument("--layout", type=str, default=None,
                        help="ASCII layout file ('.' floor, R rack, I receive, O ship)")
    parser.add_argument("--items", type=int, default=DEFAULT_NUM_ITEMS,
                        help=f"Number of items to receive (default: {DEFAULT_NUM_ITEMS})")
    parser.add_argument("--capacity", type=int, default=DEFAULT_STORAGE_CAPACITY,
                        help=f"Units per storage tile (default: {DEFAULT_STORAGE_CAPACITY})")
    parser.add_argument("--seed", type=int, default=0,
                        help="Random seed for item parts (default: 0)")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every order")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.layout:
        with open(args.layout) as f:
            layout = f.read().splitlines()
    else:
        layout = list(DEFAULT_LAYOUT)
    logger.info("Layout: %s (%d rows)", args.layout or "built-in", len(layout))

    result = run_headless(
        layout=layout,
        num_items=args.items,
        capacity=args.capacity,
        seed=args.seed,
    )

    print()
    print(f"Received: {result['received']:>5}   Rejected:   {result['rejected']:>5}")
    print(f"Stored:   {result['stored']:>5}   Unstored:   {result['unstored']:>5}")
    print(f"Routed:   {result['routed']:>5}   Unroutable: {result['unroutable']:>5}")
    print(f"Graph:    {result['graph_nodes']} nodes, {result['graph_edges']} edges")
    if result["routed"]:
        avg = result["total_route_length"] / result["routed"]
        print(f"Average route: {avg:.1f} steps")
    print(f"Wall: {result['wall_clock_seconds']:.3f}s")


if __name__ == "__main__":
    main()
