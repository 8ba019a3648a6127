"""
Top-level report assembly.

Writes the two documents that live in the scanned root: the preamble
(``report.tex``), copied verbatim from a template, and the index
(``main.tex``), one ``\\input`` line per top-level section.
"""

import logging
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, Field

from tree_builder.build_tree import build_tree
from tree_renderer.components.writer import write_document
from tree_renderer.render_tree import render_tree

from report_tool.config import Settings

logger = logging.getLogger(__name__)


class ReportResult(BaseModel):
    """Files produced by one run."""

    report: Path
    index: Path
    inputs: list[str] = Field(default_factory=list)
    sections: int = 0


def load_template(template_path: Path | None = None) -> str:
    """Return the preamble, from *template_path* or the bundled template."""
    if template_path is not None:
        return Path(template_path).read_text(encoding="utf-8")
    return resources.files("report_tool").joinpath("templates/report.tex").read_text(
        encoding="utf-8"
    )


def generate_report(root: str | Path, settings: Settings) -> ReportResult:
    """
    Generate the whole report skeleton under *root*.

    Args:
        root: Directory holding the result images.
        settings: File names, figure width and scanning options.

    Returns:
        A ReportResult describing the files written.

    Raises:
        OSError: On any listing or writing failure. Nothing is cleaned up.
        MalformedEntryError: On an entry the scanner cannot represent.
    """
    root = Path(root)

    # scan first so a missing root fails before anything is written
    tree = build_tree(root, strict=settings.strict_extensions)
    report = write_document(
        root / settings.report_filename, load_template(settings.template_path)
    )
    inputs = render_tree(
        tree,
        section_filename=settings.section_filename,
        figure_width=settings.figure_width,
    )
    index = write_document(root / settings.index_filename, "\n".join(inputs))

    sections = sum(1 for _ in tree.walk()) - 1
    if tree.items:
        logger.warning(
            "%d image(s) directly in %s are not part of any section",
            len(tree.items),
            root,
        )
    logger.info("generate_report: %d sections written under %s", sections, root)
    return ReportResult(report=report, index=index, inputs=inputs, sections=sections)
