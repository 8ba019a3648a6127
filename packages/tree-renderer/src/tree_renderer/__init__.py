from tree_renderer.render_tree import SECTION_FILENAME, render_section, render_tree

__all__ = ["SECTION_FILENAME", "render_section", "render_tree"]
