#!/usr/bin/env python

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
A command line demonstration of Arbor, inserts keys one at a time and prints the tree
after each insert.

    python -m arbor                      # the demonstration sequence
    python -m arbor 1 2 3 4 5 --degree 3 --format ascii
"""

import argparse
import logging
import sys

import arbor
from arbor.exceptions import InvalidConfigurationError
from arbor.utils import display

# Define ANSI color codes
ANSI_RED = "\u001b[31m"
ANSI_RESET = "\u001b[0m"

DEMO_KEYS = [10, 20, 5, 6, 12, 30, 7, 17]

RENDERERS = {
    "text": display.to_text,
    "ascii": display.to_ascii,
    "mermaid": display.to_mermaid,
    "json": lambda tree: display.to_json(tree).decode(),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Insert keys into a B-tree and show its structure")

    parser.add_argument(
        "keys", type=int, nargs="*", help="Keys to insert, defaults to a demonstration sequence."
    )
    parser.add_argument(
        "--degree",
        type=int,
        default=None,
        help="Minimum degree of the tree (default %(default)s uses ARBOR_MINIMUM_DEGREE).",
    )
    parser.add_argument(
        "--format", choices=sorted(RENDERERS), default="text", help="How to display the tree."
    )
    parser.add_argument(
        "--quiet", action="store_true", default=False, help="Only show the final tree."
    )
    parser.add_argument(
        "--verbose", action="store_true", default=False, help="Log splits as they happen."
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        tree = arbor.BTree(args.degree)
    except InvalidConfigurationError as err:
        print(f"{ANSI_RED}{err}{ANSI_RESET}", file=sys.stderr)
        return 1

    render = RENDERERS[args.format]
    keys = args.keys or DEMO_KEYS

    for key in keys:
        tree.insert(key)
        if not args.quiet:
            print(f"\n--- Inserting: {key} ---")
            print(render(tree))

    print(f"\n*** FINAL B-TREE (t={tree.minimum_degree}, {len(tree)} keys) ***")
    print(render(tree))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
