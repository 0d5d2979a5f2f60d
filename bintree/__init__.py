"""Binary tree nodes with parent links, traversals, structural queries and a demo."""

__version__ = "0.1.0"
__all__ = ["node", "demo"]