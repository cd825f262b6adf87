"""
Walk through the basic operations of the balanced tree and print the results.

Usage:
    # Insert 10, 20, 30, 40, 50, 25, print every traversal, remove 30 and probe for 25 and 30
    balancedtree-demo

    # Use custom keys
    balancedtree-demo --values 5 3 8 1 4 --remove 3 --probe 3 4 --orders inorder levelorder
"""

import argparse
import logging
from typing import List, Optional

from balancedtree.tree import IN_ORDER, TRAVERSAL_ORDERS, BalancedTree, Helper

logger = logging.getLogger(__name__)

DEFAULT_VALUES = [10, 20, 30, 40, 50, 25]
DEFAULT_REMOVE = [30]
DEFAULT_PROBE = [25, 30]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Demonstrate insertion, removal and traversal of an AVL tree")
    parser.add_argument("--values", type=int, nargs="*", default=DEFAULT_VALUES,
                        help="Keys to insert, in order (default: 10 20 30 40 50 25)")
    parser.add_argument("--remove", type=int, nargs="*", default=DEFAULT_REMOVE,
                        help="Keys to remove after the traversals are printed (default: 30)")
    parser.add_argument("--probe", type=int, nargs="*", default=DEFAULT_PROBE,
                        help="Keys to look up at the end (default: 25 30)")
    parser.add_argument("--orders", nargs="+", default=list(TRAVERSAL_ORDERS), choices=TRAVERSAL_ORDERS,
                        help="Traversals to print after insertion (default: all four)")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every rotation")
    return parser


def run_demo(values: List[int], remove: List[int], probe: List[int], orders: List[str]) -> BalancedTree:
    """
    Run the demonstration and return the resulting tree.

    :param values: keys to insert.
    :param remove: keys to remove once the traversals are printed.
    :param probe: keys to look up at the end.
    :param orders: traversal orders to print after insertion.
    """
    tree = BalancedTree()

    print(f"Inserting values: {', '.join(str(value) for value in values)}")
    for value in values:
        tree.insert(key=value)
    logger.info("Inserted %d keys, the tree holds %d keys with height %d.", len(values), len(tree), tree.height)

    for order in orders:
        tree.print_as_list(order=order)

    for value in remove:
        print(f"\nRemoving value {value}...")
        tree.remove(key=value)
    if remove:
        tree.print_as_list(order=IN_ORDER)

    if probe:
        print()
    for value in probe:
        print(f"Tree contains {value}? {'Yes' if tree.contains(key=value) else 'No'}")

    # The demo doubles as a smoke test of the invariants.
    if not (Helper.is_bst(tree.root) and Helper.is_balanced(tree.root)):
        logger.error("The tree violates the AVL invariants: %s", tree.to_level_order_list())

    return tree


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    run_demo(values=args.values, remove=args.remove, probe=args.probe, orders=args.orders)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
