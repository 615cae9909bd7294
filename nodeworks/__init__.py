"""Linked lists, containers, a block-mapped deque and binary search trees with classic algorithms."""

__version__ = "0.1.0"

__all__ = [
    "linked",
    "sorted_lists",
    "containers",
    "sorting",
    "chunked_deque",
    "list_edits",
    "list_transforms",
    "bst",
    "tree_views",
    "tree_paths",
    "tree_edits",
]