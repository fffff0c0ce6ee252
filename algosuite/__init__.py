"""Classic algorithm solutions over linked lists, trees, arrays, grids, stacks and windows."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "backtracking",
    "dynamic",
    "grid",
    "linked_list",
    "stack",
    "tree",
    "window",
]