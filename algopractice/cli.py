"""Command that builds a balanced tree and prints it two ways."""

from __future__ import annotations

import argparse

from algopractice.nodes import build_tree, print_tree_leveled, print_tree_structured

DEFAULT_VALUES = [1, 2, 3, 4, 5, 6, 7]


def main(argv: list[str] | None = None) -> int:
    """Build a balanced tree from sorted values and print it level by level and as a grid."""
    parser = argparse.ArgumentParser(
        description="Print a height-balanced binary tree built from sorted values."
    )
    parser.add_argument(
        "values",
        nargs="*",
        type=int,
        help="sorted integer values (default: 1 to 7)",
    )
    args = parser.parse_args(argv)
    root = build_tree(args.values or DEFAULT_VALUES)
    print("Level order:")
    print_tree_leveled(root)
    print("Structured:")
    print_tree_structured(root)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())