"""Console demonstration for preordertree.

Usage:
    python -m preordertree

Builds the sample tree, prints every value by stepping next_node from the
root, then waits for Enter before exiting.
"""

import sys

from .api import next_node
from .core.node import Node


def build_sample_tree() -> Node:
    return Node(
        1,
        Node(
            2,
            Node(3),
            Node(4)),
        Node(
            5,
            Node(6),
            Node(7)))


def main() -> int:
    """Run the demonstration loop. Always returns 0."""
    node = build_sample_tree()
    while node is not None:
        print(node.value)
        node = next_node(node)

    print("End of tree traversal. Type any key to exit.")
    try:
        input()
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
