from tree_builder.build_tree import build_tree
from tree_builder.components import ImageFormat, Tree
from tree_builder.errors import MalformedEntryError, ReportError

__all__ = [
    "build_tree",
    "ImageFormat",
    "Tree",
    "MalformedEntryError",
    "ReportError",
]
