from .node import ImageFormat, Tree
from .scanner import scan_directory

__all__ = ["ImageFormat", "Tree", "scan_directory"]
