"""
TreeRenderer - turns a Tree into one LaTeX section file per directory.

For every child of a node the renderer writes ``<child>/section.tex``:

    \\section{<child name>}
    \\input{<grandchild>/section.tex}          one per subdirectory
    \\subsubsection*{<image name>}             one pair per image
    \\includegraphics[width=...]{{"<image path>"}}

and hands back the ``\\input`` directives for the children so the caller can
list them in the top-level document. The node passed in gets no section of
its own, so images lying directly in the scanned root never appear in the
report.
"""

import logging

from tree_builder.components.node import Tree

from tree_renderer.components.markup import (
    DEFAULT_FIGURE_WIDTH,
    figure_directive,
    include_directive,
    section_heading,
    subsection_heading,
)
from tree_renderer.components.writer import write_document

logger = logging.getLogger(__name__)

SECTION_FILENAME = "section.tex"


def render_section(
    tree: Tree,
    nested: list[str],
    figure_width: str = DEFAULT_FIGURE_WIDTH,
) -> str:
    """Assemble the content of *tree*'s own section file."""
    doc = [section_heading(tree.section)]
    doc.extend(nested)
    for item in tree.items:
        doc.append(subsection_heading(item.name))
        doc.append(figure_directive(item, figure_width))
    return "\n".join(doc)


def render_tree(
    tree: Tree,
    section_filename: str = SECTION_FILENAME,
    figure_width: str = DEFAULT_FIGURE_WIDTH,
) -> list[str]:
    """
    Write the section files below *tree* and return the inclusion directives
    for its direct children, in order.

    Subdirectories are rendered depth-first, so a section file is always
    written before the directive pointing at it is returned.

    Raises:
        OSError: If a section file cannot be written. Files written before the
            failure are left on disk.
        MalformedEntryError: If a child directory has no base name.
    """
    inputs: list[str] = []
    for child in tree.children:
        nested = render_tree(child, section_filename, figure_width)
        target = write_document(
            child.location / section_filename,
            render_section(child, nested, figure_width),
        )
        inputs.append(include_directive(target))
        logger.debug(
            "rendered %s: %d subsections, %d figures",
            target,
            len(nested),
            len(child.items),
        )
    return inputs
