#!/usr/bin/env python3
"""
Comparison of the three pre-order cache scopes.

This example demonstrates:
- The process-wide cache going stale when a second tree is traversed
- Per-tree caches keeping both trees navigable
- Fresh navigation picking up nodes attached after the last traversal
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from preordertree import Node, PreOrderNavigator, TraversalConfig
from preordertree.testing import find_by_value, sample_tree, unbalanced_tree


def describe(label: str, navigator: PreOrderNavigator) -> None:
    first = sample_tree()
    second = unbalanced_tree()

    navigator.next(first)
    navigator.next(second)

    after_two = navigator.next(find_by_value(first, 2))
    print(f"{label:<8} next(2) in first tree after traversing second: {after_two}")

    seven = find_by_value(first, 7)
    seven.attach(Node(70))
    print(f"{label:<8} next(7) after attaching 70: {navigator.next(seven)}")


def main():
    describe("process", PreOrderNavigator(TraversalConfig.process_wide()))
    describe("tree", PreOrderNavigator(TraversalConfig.per_tree()))
    describe("fresh", PreOrderNavigator(TraversalConfig.always_fresh()))


if __name__ == "__main__":
    main()
