"""Small demonstration of lowest-common-ancestor lookups on a sample tree."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from bintree.node import Node, lowest_common_ancestor


def build_sample_tree() -> Node:
    """Build the fixed sample tree and return its root."""
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(128, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(45, root.right)
    root.right.right.left = Node(92, root.right.right)
    root.right.right.right = Node(65, root.right.right)
    return root


def describe_ancestor(first: Node, second: Node) -> str:
    """Describe the lowest common ancestor of two nodes as one line."""
    ancestor = lowest_common_ancestor(first, second)
    found = "(nil)" if ancestor is None else str(ancestor.value)
    return f"Ancestor of [{first.value}] & [{second.value}]: {found}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print ancestor lookups for three pairs of nodes in the sample tree."""
    parser = argparse.ArgumentParser(
        description="Show lowest common ancestors in a sample binary tree."
    )
    parser.parse_args(argv)

    root = build_sample_tree()
    assert root.left and root.right and root.right.left and root.right.right
    assert root.right.right.right
    pairs = [
        (root.left, root.right),
        (root.right.left, root.right.right.right),
        (root.right.right, root.right.right.right),
    ]
    for first, second in pairs:
        print(describe_ancestor(first, second))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())