"""
TreeBuilder - recursively scans a directory of result images and produces a Tree.

Each directory is represented as a node:

{
  "location": <path of the directory, the scanned root joined with entry names>,
  "items": [<paths of jpg/png images directly inside it, extension stripped>],
  "children": [<one node per immediate subdirectory>]
}

Entries keep the order in which the directory was listed; nothing is sorted.

Usage (CLI):
    python build_tree.py <directory> [--output <file.json>] [--strict]

Usage (library):
    from tree_builder.build_tree import build_tree
    tree = build_tree("/path/to/results")
"""

import argparse
import logging
import os

from tree_builder.components.node import Tree
from tree_builder.components.scanner import scan_directory

logger = logging.getLogger(__name__)


def build_tree(root: str | os.PathLike, strict: bool = False) -> Tree:
    """Scan *root* and return the directory structure as a Tree."""
    tree = scan_directory(root, strict=strict)
    nodes = sum(1 for _ in tree.walk())
    logger.info("build_tree: %d directories under %s", nodes, root)
    return tree


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Recursively scan a directory of images and output its tree."
    )
    parser.add_argument("directory", help="Root directory to scan")
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write JSON output to FILE instead of stdout",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on files without an extension instead of skipping them",
    )
    args = parser.parse_args()

    tree = build_tree(args.directory, strict=args.strict)
    output = tree.model_dump_json(indent=2)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Tree written to {args.output} ({sum(1 for _ in tree.walk())} nodes)")
    else:
        print(output)


if __name__ == "__main__":
    main()
