# bintree

This is a small binary tree of integers. Each `Node` stores a `value` and keeps
links to its `parent`, `left` child and `right` child. The package answers the
usual structural questions about a tree:

- traversal orders
- height, depth and size
- leaf counts and balance
- whether the tree is full or perfect
- siblings and uncles
- the lowest common ancestor of two nodes

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintree.node import Node, lowest_common_ancestor

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
big = right.insert_right(128)
```

`insert_left` and `insert_right` always return the new node. Suppose the parent already has a child on that side. The old child then becomes the new node's child on the same side, which moves it one level down.

`Node(value, parent)` records `parent` as the new node's parent. It does not attach the new node as a child of `parent`. To attach it, assign it to `parent.left` or `parent.right` yourself, or use the insert methods.

`detach()` removes a node, together with its whole subtree, from its parent. The node then becomes a root.

## Queries

| Method | Result |
| --- | --- |
| `preorder()`, `inorder()`, `postorder()` | iterators over the stored values |
| `height()` | edges on the longest path down to a leaf; a leaf has height 0 |
| `depth()` | edges up to the root; the root has depth 0 |
| `size()` | number of nodes in the subtree |
| `leaves()` | number of leaves in the subtree |
| `internal_nodes()` | number of nodes with at least one child |
| `balance()` | levels in the left subtree minus levels in the right subtree |
| `is_full()` | every node has either zero or two children |
| `is_perfect()` | every node has zero or two children and all leaves are at the same depth |
| `is_leaf()`, `is_root()` | whether the node has no children, or no parent |
| `sibling()`, `uncle()` | the node asked for, or `None` if there is none |

`lowest_common_ancestor(first, second)` returns the deepest node that is an
ancestor of both nodes. Each node counts as its own ancestor. The function returns
`None` when the nodes belong to different trees, or when either argument is `None`.

```python
>>> list(root.preorder())
[98, 12, 54, 402, 128]
>>> lowest_common_ancestor(left, big).value
98
```

## Demo

```
bintree-demo
```

This command builds a fixed sample tree with `bintree.demo.build_sample_tree()`.
It then prints the lowest common ancestor for three pairs of its nodes:

```
Ancestor of [12] & [402]: 98
Ancestor of [45] & [65]: 402
Ancestor of [128] & [65]: 128
```

`bintree.demo.describe_ancestor(first, second)` returns one such line as a string.

## What it does not do

The tree keeps no ordering among its values, so it is not a search tree. There is
no lookup by value and no automatic balancing. Nothing removes a single node while
keeping its children: `detach()` always takes the whole subtree with it.