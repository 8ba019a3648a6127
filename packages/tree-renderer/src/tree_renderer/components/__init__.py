from .markup import (
    DEFAULT_FIGURE_WIDTH,
    figure_directive,
    include_directive,
    section_heading,
    subsection_heading,
)
from .writer import write_document

__all__ = [
    "DEFAULT_FIGURE_WIDTH",
    "figure_directive",
    "include_directive",
    "section_heading",
    "subsection_heading",
    "write_document",
]
